"""JSON snapshots of rooms, contacts and search matches."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from result import Err, Ok, Result

from chatfind.models.search import MatchSpan, MessageRecord

logger = logging.getLogger(__name__)


class RoomRecord(BaseModel):
    chat_id: str
    type: str = "private"
    topic: str = ""
    participants: list[str] = Field(default_factory=list)
    messages: list[MessageRecord] = Field(default_factory=list)


class ContactRecord(BaseModel):
    handle: str
    name: str = ""
    nickname: str = ""
    presence: str = "offline"
    last_activity: str = ""


class MatchRecord(BaseModel):
    """A search match referencing rooms, messages and contacts by id."""

    kind: str
    chat_id: str | None = None
    message_id: str | None = None
    contact_id: str | None = None
    matches: list[MatchSpan] = Field(default_factory=list)


class Snapshot(BaseModel):
    """Local chat state plus the matches of one search query."""

    self_handle: str = ""
    rooms: list[RoomRecord] = Field(default_factory=list)
    contacts: list[ContactRecord] = Field(default_factory=list)
    matches: list[MatchRecord] = Field(default_factory=list)


def load_snapshot(path: Path) -> Result[Snapshot, str]:
    """Read and validate a snapshot file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(f"Cannot read snapshot {path}: {exc}")
    try:
        snapshot = Snapshot.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning("Invalid snapshot %s: %d error(s)", path, exc.error_count())
        return Err(f"Invalid snapshot {path}: {exc}")
    return Ok(snapshot)
