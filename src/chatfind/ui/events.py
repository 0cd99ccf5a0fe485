"""Qt signal bridges for panel notifications and navigation.

Part of the Qt adapter API: pass ``PanelEvents`` and ``QtNavigationSink`` to
``ServiceContainer.create`` as the notification channel and navigation sink.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from chatfind.services.navigation_service import RESULT_OPEN


class PanelEvents(QObject):
    """Notification channel for the search panel."""

    result_opened = Signal()
    event_dispatched = Signal(str)

    def dispatch(self, event_name: str) -> None:
        self.event_dispatched.emit(event_name)
        if event_name == RESULT_OPEN:
            self.result_opened.emit()


class QtNavigationSink(QObject):
    """Forwards route changes to whoever owns the page stack."""

    subpage_requested = Signal(str)  # path

    def load_sub_page(self, path: str) -> None:
        self.subpage_requested.emit(path)
