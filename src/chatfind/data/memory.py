"""In-memory chat session collaborators backed by a snapshot."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from chatfind.data.snapshot import ContactRecord, RoomRecord, Snapshot
from chatfind.models.rooms import is_group
from chatfind.models.search import Match, MatchKind, MessageRecord

logger = logging.getLogger(__name__)

_SUMMARY_LIMIT = 160


class MemoryMessageBuffer:
    """Loaded messages of one room, oldest first."""

    def __init__(self, messages: Sequence[MessageRecord] = ()) -> None:
        self._messages = list(messages)

    def __len__(self) -> int:
        return len(self._messages)

    def index_of(self, message_id: str) -> int | None:
        for i, message in enumerate(self._messages):
            if message.message_id == message_id:
                return i
        return None

    def get(self, message_id: str) -> MessageRecord | None:
        i = self.index_of(message_id)
        return self._messages[i] if i is not None else None

    def get_renderable_summary(self, message: MessageRecord) -> str:
        text = " ".join(message.text.split())
        if len(text) > _SUMMARY_LIMIT:
            return text[: _SUMMARY_LIMIT - 1] + "…"
        return text


class MemoryContactDirectory:
    def __init__(self, contacts: Sequence[ContactRecord] = ()) -> None:
        self._contacts = {c.handle: c for c in contacts}

    def add(self, contact: ContactRecord) -> None:
        self._contacts[contact.handle] = contact

    def get_nickname(self, contact_id: str) -> str:
        contact = self._contacts.get(contact_id)
        return contact.nickname if contact else ""

    def get_name(self, contact_id: str) -> str:
        contact = self._contacts.get(contact_id)
        return contact.name if contact else ""

    def get_presence(self, contact_id: str) -> str:
        contact = self._contacts.get(contact_id)
        return contact.presence if contact else ""

    def get_last_activity(self, contact_id: str) -> str:
        contact = self._contacts.get(contact_id)
        return contact.last_activity if contact else ""


@dataclass
class ScrollRequest:
    message_id: str
    index: int | None


class MemoryRoom:
    """A chat room built from a snapshot record."""

    def __init__(
        self,
        record: RoomRecord,
        *,
        self_handle: str,
        contacts: MemoryContactDirectory,
    ) -> None:
        self.chat_id = record.chat_id
        self.type = record.type
        self.topic = record.topic
        self.members = tuple(record.participants)
        self.messages_buff = MemoryMessageBuffer(record.messages)
        self.scroll_requests: list[ScrollRequest] = []
        self._self_handle = self_handle
        self._contacts = contacts

    def __repr__(self) -> str:
        return f"MemoryRoom(chat_id={self.chat_id!r}, type={self.type!r})"

    def get_room_url(self) -> str:
        if is_group(self):
            return f"fm/chat/g/{self.chat_id}"
        return f"fm/chat/{self.chat_id}"

    def get_participants_except_me(self) -> list[str]:
        return [h for h in self.members if h != self._self_handle]

    def get_room_title(self) -> str:
        if self.topic:
            return self.topic
        names = []
        for handle in self.get_participants_except_me():
            name = self._contacts.get_nickname(handle) or self._contacts.get_name(handle)
            names.append(name or handle)
        return ", ".join(names) or self.chat_id

    def scroll_to_message_id(self, message_id: str, index: int | None = None) -> None:
        self.scroll_requests.append(ScrollRequest(message_id=message_id, index=index))


@dataclass
class OpenChatRequest:
    participants: list[str]
    mode: str
    background: bool


class MemoryChatRegistry:
    """Registry of instantiated rooms; ``open_chat`` creates missing ones."""

    def __init__(self, self_handle: str, contacts: MemoryContactDirectory) -> None:
        self._self_handle = self_handle
        self._contacts = contacts
        self._rooms: dict[str, MemoryRoom] = {}
        self.open_requests: list[OpenChatRequest] = []

    def add(self, record: RoomRecord) -> MemoryRoom:
        room = self.detached_room(record)
        self._rooms[room.chat_id] = room
        return room

    def detached_room(self, record: RoomRecord) -> MemoryRoom:
        """A room object that is not (yet) registered."""
        return MemoryRoom(record, self_handle=self._self_handle, contacts=self._contacts)

    def get_chat_by_id(self, chat_id: str) -> MemoryRoom | None:
        return self._rooms.get(chat_id)

    def open_chat(
        self, participants: Sequence[str], mode: str, *, background: bool = False
    ) -> MemoryRoom:
        self.open_requests.append(
            OpenChatRequest(participants=list(participants), mode=mode, background=background)
        )
        others = [h for h in participants if h != self._self_handle]
        chat_id = others[0] if len(others) == 1 else "-".join(sorted(others))
        existing = self._rooms.get(chat_id)
        if existing is not None:
            return existing
        logger.info("Instantiating %s chat %s (background=%s)", mode, chat_id, background)
        return self.add(RoomRecord(chat_id=chat_id, type=mode, participants=list(participants)))


@dataclass
class RecordingNavigationSink:
    """Navigation sink that keeps the visited paths."""

    pages: list[str] = field(default_factory=list)

    def load_sub_page(self, path: str) -> None:
        self.pages.append(path)


@dataclass
class RecordingNotifications:
    events: list[str] = field(default_factory=list)

    def dispatch(self, event_name: str) -> None:
        self.events.append(event_name)


def build_registry(snapshot: Snapshot) -> tuple[MemoryChatRegistry, MemoryContactDirectory]:
    contacts = MemoryContactDirectory(snapshot.contacts)
    registry = MemoryChatRegistry(snapshot.self_handle, contacts)
    for record in snapshot.rooms:
        registry.add(record)
    return registry, contacts


def build_matches(snapshot: Snapshot, registry: MemoryChatRegistry) -> list[Match]:
    """Resolve a snapshot's match records against the registry's live rooms.

    A chat id with no registered room yields a detached room, as for a 1:1 chat
    that has never been opened. Message indexes are only set when the room's
    buffer holds the message.
    """
    matches: list[Match] = []
    for record in snapshot.matches:
        room = None
        if record.chat_id:
            room = registry.get_chat_by_id(record.chat_id)
            if room is None:
                room = registry.detached_room(
                    RoomRecord(
                        chat_id=record.chat_id,
                        participants=[snapshot.self_handle, record.chat_id],
                    )
                )

        data: MessageRecord | str | None = None
        index = None
        if record.kind == MatchKind.MESSAGE and record.message_id:
            message = None
            if room is not None:
                index = room.messages_buff.index_of(record.message_id)
                message = room.messages_buff.get(record.message_id)
            data = message or MessageRecord(message_id=record.message_id)
        elif record.kind == MatchKind.MEMBER:
            data = record.contact_id

        matches.append(
            Match(kind=record.kind, room=room, data=data, matches=record.matches, index=index)
        )
    return matches
