"""Tests for display text resolution."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import MagicMock

from fakes import FakeRoom

from chatfind.config import Config
from chatfind.models.search import MatchSpan, MessageRecord
from chatfind.models.view import (
    ChatVariant,
    EmptyVariant,
    HighlightLayout,
    IconKind,
    MemberVariant,
    MessageVariant,
)
from chatfind.services.highlight import Highlighter
from chatfind.services.summary_service import SummaryResolver, first_non_empty, room_title

TODAY_0930 = int(datetime(2026, 3, 4, 9, 30, tzinfo=UTC).timestamp())


def span(start: int, end: int) -> tuple[MatchSpan, ...]:
    return (MatchSpan(start=start, end=end),)


class TestFallbackChains:
    def test_first_non_empty_short_circuits(self) -> None:
        second = MagicMock(return_value="second")
        assert first_non_empty([lambda: "first", second]) == "first"
        second.assert_not_called()

    def test_first_non_empty_skips_empty_values(self) -> None:
        assert first_non_empty([lambda: None, lambda: "", lambda: "x"]) == "x"
        assert first_non_empty([]) == ""

    def test_room_title_prefers_topic(self) -> None:
        assert room_title(FakeRoom(topic="Topic", title="Computed")) == "Topic"
        assert room_title(FakeRoom(title="Computed")) == "Computed"
        assert room_title(FakeRoom()) == ""
        assert room_title(None) == ""


class TestMessageSummary:
    def test_private_room_uses_buffer_summary(self, summaries: SummaryResolver) -> None:
        room = FakeRoom(chat_id="peer", title="Pete", summary="Lunch at noon?")
        message = MessageRecord(message_id="m1", delay=TODAY_0930)
        result = summaries.resolve(MessageVariant(room=room, message=message, matches=span(0, 5)))

        assert result.title == "Pete"
        assert result.subtitle == "<strong>Lunch</strong> at noon?"
        assert result.icon is IconKind.AVATAR
        assert result.is_group is False
        assert result.avatar_contact == "peer"
        assert result.presence == "online"
        assert result.timestamp == "Today 09:30"
        room.messages_buff.get_renderable_summary.assert_called_once_with(message)

    def test_precomputed_summary_wins_and_is_escaped(self, summaries: SummaryResolver) -> None:
        room = FakeRoom(summary="from buffer")
        message = MessageRecord(message_id="m1", renderable_summary="a <b> c")
        result = summaries.resolve(MessageVariant(room=room, message=message, matches=span(6, 7)))

        assert result.subtitle == "a &lt;b&gt; <strong>c</strong>"
        room.messages_buff.get_renderable_summary.assert_not_called()

    def test_group_room(self, summaries: SummaryResolver) -> None:
        room = FakeRoom(type="group", topic="Team", members=("me", "a", "b"), summary="hi")
        result = summaries.resolve(
            MessageVariant(room=room, message=MessageRecord(message_id="m1"))
        )
        assert result.title == "Team"
        assert result.subtitle == "hi"
        assert result.icon is IconKind.GROUP
        assert result.is_group is True
        assert result.avatar_contact is None
        assert result.presence is None
        assert result.timestamp is None

    def test_missing_title_and_summary_degrade_to_empty(self, summaries: SummaryResolver) -> None:
        result = summaries.resolve(
            MessageVariant(room=FakeRoom(), message=MessageRecord(message_id="m1"))
        )
        assert result.title == ""
        assert result.subtitle == ""


def test_chat_summary_highlights_topic(summaries: SummaryResolver) -> None:
    room = FakeRoom(type="public", topic="A & B")
    result = summaries.resolve(ChatVariant(room=room, matches=span(0, 1)))
    assert result.title == "<strong>A</strong> &amp; B"
    assert result.subtitle is None
    assert result.icon is IconKind.GROUP
    assert result.is_group is True
    assert result.highlight_layout is HighlightLayout.GRAPHIC


class TestMemberSummary:
    def test_contact_graphic_layout(self, summaries: SummaryResolver) -> None:
        result = summaries.resolve(MemberVariant(contact_id="peer", matches=span(0, 2)))
        assert result.highlight_layout is HighlightLayout.GRAPHIC
        assert result.title == "<strong>Pe</strong>te"
        assert result.subtitle is None
        assert result.presence == "online"
        assert result.icon is IconKind.AVATAR
        assert result.avatar_contact == "peer"

    def test_contact_textual_layout_falls_back_to_name(self, summaries: SummaryResolver) -> None:
        result = summaries.resolve(MemberVariant(contact_id="bob"))
        assert result.highlight_layout is HighlightLayout.TEXTUAL
        assert result.title == "Bob &lt;B&gt; Smith"
        assert result.subtitle == "Last seen yesterday"
        assert result.presence is None

    def test_layouts_produce_distinct_shapes(self, summaries: SummaryResolver) -> None:
        graphic = summaries.resolve(MemberVariant(contact_id="bob", matches=span(0, 3)))
        textual = summaries.resolve(MemberVariant(contact_id="bob", matches=()))
        assert (graphic.subtitle, graphic.presence) == (None, "away")
        assert (textual.subtitle, textual.presence) == ("Last seen yesterday", None)
        assert graphic.title == "<strong>Bob</strong> &lt;B&gt; Smith"

    def test_unknown_contact_degrades_to_empty_title(self, summaries: SummaryResolver) -> None:
        result = summaries.resolve(MemberVariant(contact_id="ghost"))
        assert result.title == ""
        assert result.subtitle == ""

    def test_private_room_context_uses_contact(self, summaries: SummaryResolver) -> None:
        room = FakeRoom(type="private", title="ignored")
        result = summaries.resolve(MemberVariant(contact_id="peer", room=room))
        assert result.title == "Pete"
        assert result.is_group is False

    def test_group_textual_shows_member_count(self, summaries: SummaryResolver) -> None:
        room = FakeRoom(type="group", title="Team Alpha", members=("me", "a", "b"))
        result = summaries.resolve(MemberVariant(contact_id="a", room=room))
        assert result.title == "Team Alpha"
        assert result.subtitle == "3 members"
        assert result.icon is IconKind.GROUP
        assert result.is_group is True
        assert result.highlight_layout is HighlightLayout.TEXTUAL

    def test_group_graphic_highlights_topic(self, summaries: SummaryResolver) -> None:
        room = FakeRoom(type="group", topic="Team", members=("me",))
        result = summaries.resolve(MemberVariant(contact_id="a", room=room, matches=span(0, 2)))
        assert result.title == "<strong>Te</strong>am"
        assert result.subtitle is None
        assert result.highlight_layout is HighlightLayout.GRAPHIC


class TestEmptySummary:
    def test_first_query_attaches_call_to_action(self, summaries: SummaryResolver) -> None:
        result = summaries.resolve(EmptyVariant(), is_first_query=True)
        assert result.title == "No results"
        assert result.call_to_action == "<a>Search messages</a> instead?"
        assert result.icon is IconKind.NONE

    def test_refinement_has_no_call_to_action(self, summaries: SummaryResolver) -> None:
        result = summaries.resolve(EmptyVariant(), is_first_query=False)
        assert result.call_to_action is None

    def test_labels_come_from_config(self, contacts) -> None:  # type: ignore[no-untyped-def]
        config = Config(no_results_label="Nothing", search_messages_label="Try [A]here[/A]")
        resolver = SummaryResolver(Highlighter(), contacts, config)
        result = resolver.resolve(EmptyVariant(), is_first_query=True)
        assert result.title == "Nothing"
        assert result.call_to_action == "Try <a>here</a>"
