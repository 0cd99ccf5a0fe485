"""Protocol definitions for the collaborators chatfind consumes."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from typing import Protocol

from chatfind.models.search import MatchSpan, MessageRecord


class MessageBufferProtocol(Protocol):
    """A room's local message history."""

    def get_renderable_summary(self, message: MessageRecord) -> str: ...


class RoomProtocol(Protocol):
    """A live chat room instance."""

    chat_id: str
    type: str
    topic: str
    members: Collection[str]
    messages_buff: MessageBufferProtocol

    def get_room_url(self) -> str: ...

    def get_room_title(self) -> str: ...

    def get_participants_except_me(self) -> Sequence[str]: ...

    def scroll_to_message_id(self, message_id: str, index: int | None = None) -> None: ...


class ChatRegistryProtocol(Protocol):
    """Session registry of instantiated chat rooms."""

    def get_chat_by_id(self, chat_id: str) -> RoomProtocol | None: ...

    def open_chat(
        self, participants: Sequence[str], mode: str, *, background: bool = False
    ) -> object: ...


class ContactDirectoryProtocol(Protocol):
    """Contact names, nicknames and presence."""

    def get_nickname(self, contact_id: str) -> str: ...

    def get_name(self, contact_id: str) -> str: ...

    def get_presence(self, contact_id: str) -> str: ...

    def get_last_activity(self, contact_id: str) -> str: ...


class HighlighterProtocol(Protocol):
    def highlight(
        self, text: str, spans: Iterable[MatchSpan], escape_html: bool = False
    ) -> str: ...


class NavigationSinkProtocol(Protocol):
    """Performs the actual route change."""

    def load_sub_page(self, path: str) -> None: ...


class NotificationChannelProtocol(Protocol):
    """Named events consumed by the owning search panel."""

    def dispatch(self, event_name: str) -> None: ...
