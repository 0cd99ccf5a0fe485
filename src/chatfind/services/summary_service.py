"""Display text resolution for result variants."""

from __future__ import annotations

import html
import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TYPE_CHECKING, TypeAlias

from chatfind.formatting import format_member_count, format_time_marker
from chatfind.models.rooms import is_group
from chatfind.models.view import (
    ChatVariant,
    EmptyVariant,
    HighlightLayout,
    IconKind,
    MemberVariant,
    MessageVariant,
    RenderVariant,
    ResolvedSummary,
)

if TYPE_CHECKING:
    from chatfind.config import Config
    from chatfind.services.protocols import (
        ContactDirectoryProtocol,
        HighlighterProtocol,
        RoomProtocol,
    )

logger = logging.getLogger(__name__)

_Candidate: TypeAlias = Callable[[], str | None]


def first_non_empty(chain: Iterable[_Candidate]) -> str:
    """Evaluate candidates in order and return the first non-empty value."""
    for candidate in chain:
        value = candidate()
        if value:
            return value
    return ""


def room_title(room: RoomProtocol | None) -> str:
    """Room topic, falling back to the computed room title."""
    if room is None:
        return ""
    return first_non_empty([lambda: room.topic, room.get_room_title])


class SummaryResolver:
    """Computes title, subtitle and decorations for each variant."""

    def __init__(
        self,
        highlighter: HighlighterProtocol,
        contacts: ContactDirectoryProtocol,
        config: Config,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._highlighter = highlighter
        self._contacts = contacts
        self._config = config
        self._clock = clock

    def resolve(self, variant: RenderVariant, *, is_first_query: bool = False) -> ResolvedSummary:
        match variant:
            case MessageVariant():
                return self._message(variant)
            case ChatVariant():
                return self._chat(variant)
            case MemberVariant():
                return self._member(variant)
            case EmptyVariant():
                return self._empty(is_first_query)
            case _:
                logger.debug("Unhandled variant %r, resolving as empty", variant)
                return self._empty(is_first_query)

    def contact_name(self, contact_id: str) -> str:
        """Nickname, falling back to the canonical contact name."""
        if not contact_id:
            return ""
        return first_non_empty(
            [
                lambda: self._contacts.get_nickname(contact_id),
                lambda: self._contacts.get_name(contact_id),
            ]
        )

    def _message(self, variant: MessageVariant) -> ResolvedSummary:
        room = variant.room
        message = variant.message
        group = is_group(room)
        summary = first_non_empty(
            [
                lambda: message.renderable_summary,
                lambda: room.messages_buff.get_renderable_summary(message),
            ]
        )
        contact = None
        presence = None
        if not group:
            others = room.get_participants_except_me()
            contact = others[0] if others else None
            if contact:
                presence = self._contacts.get_presence(contact) or None
        now = self._clock() if self._clock else None
        return ResolvedSummary(
            title=html.escape(room_title(room)),
            subtitle=self._highlighter.highlight(summary, variant.matches, True),
            icon=IconKind.GROUP if group else IconKind.AVATAR,
            is_group=group,
            highlight_layout=HighlightLayout.GRAPHIC,
            avatar_contact=contact,
            presence=presence,
            timestamp=format_time_marker(message.delay, now) or None,
        )

    def _chat(self, variant: ChatVariant) -> ResolvedSummary:
        return ResolvedSummary(
            title=self._highlighter.highlight(variant.room.topic or "", variant.matches, True),
            icon=IconKind.GROUP,
            is_group=is_group(variant.room),
            highlight_layout=HighlightLayout.GRAPHIC,
        )

    def _member(self, variant: MemberVariant) -> ResolvedSummary:
        room = variant.room
        graphic = bool(variant.matches)
        layout = HighlightLayout.GRAPHIC if graphic else HighlightLayout.TEXTUAL

        if room is not None and is_group(room):
            title = room_title(room)
            if graphic:
                return ResolvedSummary(
                    title=self._highlighter.highlight(title, variant.matches, True),
                    icon=IconKind.GROUP,
                    is_group=True,
                    highlight_layout=layout,
                )
            return ResolvedSummary(
                title=html.escape(title),
                subtitle=format_member_count(len(room.members)),
                icon=IconKind.GROUP,
                is_group=True,
                highlight_layout=layout,
            )

        contact_id = variant.contact_id
        name = self.contact_name(contact_id)
        if graphic:
            return ResolvedSummary(
                title=self._highlighter.highlight(name, variant.matches, True),
                icon=IconKind.AVATAR,
                highlight_layout=layout,
                avatar_contact=contact_id or None,
                presence=(self._contacts.get_presence(contact_id) if contact_id else "") or None,
            )
        return ResolvedSummary(
            title=html.escape(name),
            subtitle=self._contacts.get_last_activity(contact_id) if contact_id else "",
            icon=IconKind.AVATAR,
            highlight_layout=layout,
            avatar_contact=contact_id or None,
        )

    def _empty(self, is_first_query: bool) -> ResolvedSummary:
        return ResolvedSummary(
            title=self._config.no_results_label,
            icon=IconKind.NONE,
            highlight_layout=HighlightLayout.TEXTUAL,
            call_to_action=self._config.search_messages_markup if is_first_query else None,
        )
