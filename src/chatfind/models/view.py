"""Presentation variants and row view-models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from PySide6.QtCore import Qt

from chatfind.models.search import MatchSpan, MessageRecord

if TYPE_CHECKING:
    from chatfind.models.navigation import NavigationAction
    from chatfind.services.protocols import RoomProtocol


class ResultRowRoles:
    """Named Qt UserRole offsets for ResultViewModel data in list models."""

    KIND = Qt.ItemDataRole.UserRole
    SUBTITLE = Qt.ItemDataRole.UserRole + 1
    ICON = Qt.ItemDataRole.UserRole + 2
    IS_GROUP = Qt.ItemDataRole.UserRole + 3
    LAYOUT = Qt.ItemDataRole.UserRole + 4
    AVATAR_CONTACT = Qt.ItemDataRole.UserRole + 5
    PRESENCE = Qt.ItemDataRole.UserRole + 6
    TIMESTAMP = Qt.ItemDataRole.UserRole + 7
    CALL_TO_ACTION = Qt.ItemDataRole.UserRole + 8


class IconKind(StrEnum):
    GROUP = "group"
    AVATAR = "avatar"
    NONE = "none"


class HighlightLayout(StrEnum):
    GRAPHIC = "graphic"
    TEXTUAL = "textual"


@dataclass(frozen=True)
class MessageVariant:
    kind: ClassVar[str] = "message"

    room: RoomProtocol
    message: MessageRecord
    matches: tuple[MatchSpan, ...] = ()
    index: int | None = None


@dataclass(frozen=True)
class ChatVariant:
    kind: ClassVar[str] = "chat"

    room: RoomProtocol
    matches: tuple[MatchSpan, ...] = ()


@dataclass(frozen=True)
class MemberVariant:
    kind: ClassVar[str] = "member"

    contact_id: str
    room: RoomProtocol | None = None
    matches: tuple[MatchSpan, ...] = ()


@dataclass(frozen=True)
class EmptyVariant:
    kind: ClassVar[str] = "nil"


RenderVariant: TypeAlias = MessageVariant | ChatVariant | MemberVariant | EmptyVariant


@dataclass(frozen=True)
class ResolvedSummary:
    """Display text and decorations resolved for one variant."""

    title: str
    subtitle: str | None = None
    icon: IconKind = IconKind.NONE
    is_group: bool = False
    highlight_layout: HighlightLayout = HighlightLayout.TEXTUAL
    avatar_contact: str | None = None
    presence: str | None = None
    timestamp: str | None = None
    call_to_action: str | None = None


def _noop() -> None:
    return None


@dataclass(frozen=True)
class ResultViewModel:
    """Everything a renderer needs to draw and activate one result row."""

    variant: RenderVariant
    title: str
    subtitle: str | None = None
    icon: IconKind = IconKind.NONE
    is_group: bool = False
    highlight_layout: HighlightLayout = HighlightLayout.TEXTUAL
    avatar_contact: str | None = None
    presence: str | None = None
    timestamp: str | None = None
    call_to_action: str | None = None
    on_activate: Callable[[], NavigationAction | None] = _noop
    on_search_messages: Callable[[], None] | None = None

    @property
    def kind(self) -> str:
        return self.variant.kind
