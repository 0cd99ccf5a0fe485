"""Search match models."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from chatfind.services.protocols import RoomProtocol


class MatchKind(StrEnum):
    """Kinds of search matches produced by the search engine."""

    MESSAGE = "message"
    CHAT = "chat"
    MEMBER = "member"
    NIL = "nil"


class MatchSpan(BaseModel):
    """Half-open character range ``[start, end)`` that matched the query."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int


class MessageRecord(BaseModel):
    """A chat message as attached to a message match."""

    message_id: str
    delay: int = 0
    renderable_summary: str = ""
    text: str = ""


@dataclass(frozen=True)
class Match:
    """A single search-result entry. Never mutated once built."""

    kind: MatchKind | str
    room: RoomProtocol | None = None
    data: MessageRecord | str | None = None
    matches: Sequence[MatchSpan] = ()
    index: int | None = None
