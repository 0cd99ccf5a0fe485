"""Models for chatfind."""

from chatfind.models.navigation import NavigationAction, NavigationKind
from chatfind.models.rooms import GROUP_ROOM_TYPES, RoomDescriptor, describe_room, is_group
from chatfind.models.search import Match, MatchKind, MatchSpan, MessageRecord
from chatfind.models.view import (
    ChatVariant,
    EmptyVariant,
    HighlightLayout,
    IconKind,
    MemberVariant,
    MessageVariant,
    RenderVariant,
    ResolvedSummary,
    ResultRowRoles,
    ResultViewModel,
)

__all__ = [
    "ChatVariant",
    "EmptyVariant",
    "HighlightLayout",
    "IconKind",
    "Match",
    "MatchKind",
    "MatchSpan",
    "MemberVariant",
    "MessageRecord",
    "MessageVariant",
    "NavigationAction",
    "NavigationKind",
    "RenderVariant",
    "ResolvedSummary",
    "ResultRowRoles",
    "ResultViewModel",
    "RoomDescriptor",
    "GROUP_ROOM_TYPES",
    "describe_room",
    "is_group",
]
