"""Navigation outcome models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class NavigationKind(StrEnum):
    OPEN_CONTACT = "open_contact"
    OPEN_ROOM = "open_room"
    CREATE_ROOM = "create_room"
    OPEN_MESSAGE = "open_message"
    NONE = "none"


class NavigationAction(BaseModel):
    """What an activated result row did."""

    kind: NavigationKind
    path: str = ""
    chat_id: str = ""
    contact_id: str = ""
    message_id: str = ""
    index: int | None = None
