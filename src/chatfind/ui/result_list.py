"""Qt list model over result-row view-models.

Part of the Qt adapter API: hosts embed the presenter in a ``QListView`` by
feeding ``ResultPresenter.present_all`` rows to ``ResultListModel.set_rows``.
Nothing in the CLI imports this module.
"""

from __future__ import annotations

from PySide6.QtCore import (
    QAbstractListModel,
    QModelIndex,
    QObject,
    QPersistentModelIndex,
    Qt,
)

from chatfind.models.navigation import NavigationAction
from chatfind.models.view import ResultRowRoles, ResultViewModel


class ResultListModel(QAbstractListModel):
    """Model for search result rows."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._rows: list[ResultViewModel] = []

    def set_rows(self, rows: list[ResultViewModel]) -> None:
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()

    def clear(self) -> None:
        self.set_rows([])

    def row_at(self, index: int) -> ResultViewModel | None:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def activate(self, index: int) -> NavigationAction | None:
        """Run the activation handler of the row at ``index``."""
        row = self.row_at(index)
        if row is None:
            return None
        return row.on_activate()

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        return len(self._rows)

    def data(
        self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole
    ) -> object:
        if not index.isValid() or index.row() >= len(self._rows):
            return None
        r = self._rows[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return r.title
        if role == ResultRowRoles.KIND:
            return r.kind
        if role == ResultRowRoles.SUBTITLE:
            return r.subtitle
        if role == ResultRowRoles.ICON:
            return r.icon.value
        if role == ResultRowRoles.IS_GROUP:
            return r.is_group
        if role == ResultRowRoles.LAYOUT:
            return r.highlight_layout.value
        if role == ResultRowRoles.AVATAR_CONTACT:
            return r.avatar_contact
        if role == ResultRowRoles.PRESENCE:
            return r.presence
        if role == ResultRowRoles.TIMESTAMP:
            return r.timestamp
        if role == ResultRowRoles.CALL_TO_ACTION:
            return r.call_to_action
        return None
