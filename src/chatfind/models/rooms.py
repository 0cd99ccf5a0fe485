"""Room classification helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from chatfind.services.protocols import RoomProtocol

GROUP_ROOM_TYPES = frozenset({"group", "public"})


class RoomDescriptor(BaseModel):
    """Display facts derived from a live room."""

    chat_id: str
    is_group: bool = False
    title: str = ""
    participant_except_self: str = ""


def is_group(room: RoomProtocol | None) -> bool:
    """Whether ``room`` is a group or public chat. ``None`` is never a group.

    Evaluated on every call since a room's type can change (public -> private).
    """
    if room is None:
        return False
    return room.type in GROUP_ROOM_TYPES


def describe_room(room: RoomProtocol) -> RoomDescriptor:
    group = is_group(room)
    participant = ""
    if not group:
        others = room.get_participants_except_me()
        if others:
            participant = others[0]
    return RoomDescriptor(
        chat_id=room.chat_id or "",
        is_group=group,
        title=room.topic or room.get_room_title() or "",
        participant_except_self=participant,
    )
