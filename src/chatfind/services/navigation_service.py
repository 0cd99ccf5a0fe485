"""Navigation for activated search results."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chatfind.models.navigation import NavigationAction, NavigationKind

if TYPE_CHECKING:
    from chatfind.config import Config
    from chatfind.services.protocols import (
        ChatRegistryProtocol,
        NavigationSinkProtocol,
        NotificationChannelProtocol,
        RoomProtocol,
    )

logger = logging.getLogger(__name__)

RESULT_OPEN = "chatSearchResultOpen"


class NavigationResolver:
    """Opens the room, contact or message behind an activated result row."""

    def __init__(
        self,
        *,
        registry: ChatRegistryProtocol,
        sink: NavigationSinkProtocol,
        notifications: NotificationChannelProtocol,
        config: Config,
    ) -> None:
        self._registry = registry
        self._sink = sink
        self._notifications = notifications
        self._config = config

    def activate(
        self,
        target: RoomProtocol | str | None,
        message_id: str | None = None,
        index: int | None = None,
    ) -> NavigationAction:
        """Navigate to ``target``.

        The panel is always notified first so it can reset its search state whatever
        the navigation outcome. A contact handle opens the contact page; a room
        without ``message_id`` is looked up in the registry and opened in the
        background when not yet instantiated; a room with ``message_id`` is opened
        and scrolled to that message.
        """
        self._notifications.dispatch(RESULT_OPEN)

        if isinstance(target, str):
            path = self._config.contact_path(target)
            logger.debug("Opening contact %s", target)
            self._sink.load_sub_page(path)
            return NavigationAction(kind=NavigationKind.OPEN_CONTACT, path=path, contact_id=target)

        if target is None:
            logger.warning("Result activated without a navigation target")
            return NavigationAction(kind=NavigationKind.NONE)

        if target.chat_id and not message_id:
            return self._open_room(target.chat_id)

        path = target.get_room_url()
        self._sink.load_sub_page(path)
        if message_id:
            logger.debug("Opening %s at message %s (index=%s)", path, message_id, index)
            target.scroll_to_message_id(message_id, index)
            return NavigationAction(
                kind=NavigationKind.OPEN_MESSAGE,
                path=path,
                chat_id=target.chat_id or "",
                message_id=message_id,
                index=index,
            )
        return NavigationAction(
            kind=NavigationKind.OPEN_ROOM, path=path, chat_id=target.chat_id or ""
        )

    def _open_room(self, chat_id: str) -> NavigationAction:
        chat_room = self._registry.get_chat_by_id(chat_id)
        if chat_room is not None:
            path = chat_room.get_room_url()
            logger.debug("Opening room %s", path)
            self._sink.load_sub_page(path)
            return NavigationAction(kind=NavigationKind.OPEN_ROOM, path=path, chat_id=chat_id)

        # Not awaited: the registry populates the room once it is ready.
        logger.info("Chat %s not instantiated, opening it in the background", chat_id)
        self._registry.open_chat(
            [self._config.self_handle, chat_id], self._config.private_mode, background=True
        )
        return NavigationAction(kind=NavigationKind.CREATE_ROOM, chat_id=chat_id)
