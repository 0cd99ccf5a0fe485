"""Match classification into presentation variants."""

from __future__ import annotations

import logging

from chatfind.models.search import Match, MatchKind, MessageRecord
from chatfind.models.view import (
    ChatVariant,
    EmptyVariant,
    MemberVariant,
    MessageVariant,
    RenderVariant,
)

logger = logging.getLogger(__name__)

_EMPTY = EmptyVariant()


def classify(match: Match | None) -> RenderVariant:
    """Map a raw match to exactly one presentation variant.

    Absent, ``nil``, unknown or malformed matches become ``EmptyVariant`` so a bad
    entry from the search engine never breaks the result list.
    """
    if match is None:
        return _EMPTY

    try:
        kind = MatchKind(match.kind)
    except ValueError:
        logger.debug("Unknown match kind %r, rendering as empty", match.kind)
        return _EMPTY

    spans = tuple(match.matches or ())
    match kind:
        case MatchKind.MESSAGE:
            if (
                match.room is None
                or not isinstance(match.data, MessageRecord)
                or not match.data.message_id
            ):
                logger.debug("Message match without room or message id")
                return _EMPTY
            return MessageVariant(
                room=match.room, message=match.data, matches=spans, index=match.index
            )
        case MatchKind.CHAT:
            if match.room is None:
                logger.debug("Chat match without room")
                return _EMPTY
            return ChatVariant(room=match.room, matches=spans)
        case MatchKind.MEMBER:
            contact_id = match.data if isinstance(match.data, str) else ""
            if match.room is None and not contact_id:
                logger.debug("Member match without room or contact id")
                return _EMPTY
            return MemberVariant(contact_id=contact_id, room=match.room, matches=spans)
        case _:
            return _EMPTY
