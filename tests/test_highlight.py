"""Tests for match-span highlighting."""

from __future__ import annotations

from chatfind.models.search import MatchSpan
from chatfind.services.highlight import Highlighter, resolve_spans


def spans(*pairs: tuple[int, int]) -> list[MatchSpan]:
    return [MatchSpan(start=s, end=e) for s, e in pairs]


class TestHighlighter:
    def test_empty_spans_return_text_unmodified(self) -> None:
        h = Highlighter()
        text = "Hello <world> & friends"
        assert h.highlight(text, []) == text
        assert h.highlight(text, ()) == text

    def test_empty_spans_with_escape_only_escapes(self) -> None:
        h = Highlighter()
        assert h.highlight("a < b", [], escape_html=True) == "a &lt; b"

    def test_single_span(self) -> None:
        h = Highlighter()
        assert h.highlight("Lunch at noon", spans((0, 5))) == "<strong>Lunch</strong> at noon"

    def test_custom_tag(self) -> None:
        h = Highlighter("mark")
        assert h.highlight("abc", spans((1, 2))) == "a<mark>b</mark>c"

    def test_out_of_order_spans_applied_left_to_right(self) -> None:
        h = Highlighter()
        result = h.highlight("one two three", spans((8, 13), (0, 3)))
        assert result == "<strong>one</strong> two <strong>three</strong>"

    def test_overlapping_span_earlier_wins(self) -> None:
        h = Highlighter()
        result = h.highlight("abcdefgh", spans((2, 6), (0, 4)))
        assert result == "<strong>abcd</strong>efgh"

    def test_same_start_keeps_first_given(self) -> None:
        h = Highlighter()
        result = h.highlight("abcdef", spans((0, 2), (0, 5)))
        assert result == "<strong>ab</strong>cdef"

    def test_adjacent_spans_both_kept(self) -> None:
        h = Highlighter()
        assert h.highlight("abcd", spans((0, 2), (2, 4))) == (
            "<strong>ab</strong><strong>cd</strong>"
        )

    def test_offsets_refer_to_unescaped_text(self) -> None:
        h = Highlighter()
        result = h.highlight("<b> & c", spans((4, 5)), escape_html=True)
        assert result == "&lt;b&gt; <strong>&amp;</strong> c"

    def test_spans_are_clamped_and_empty_dropped(self) -> None:
        h = Highlighter()
        assert h.highlight("abc", spans((-3, 1), (2, 99), (1, 1))) == (
            "<strong>a</strong>b<strong>c</strong>"
        )
        assert h.highlight("abc", spans((5, 9))) == "abc"

    def test_none_text_renders_empty(self) -> None:
        assert Highlighter().highlight(None, spans((0, 1))) == ""  # type: ignore[arg-type]


def test_resolve_spans_orders_and_deduplicates() -> None:
    assert resolve_spans(spans((5, 8), (0, 2), (1, 3), (6, 7)), 10) == [(0, 2), (5, 8)]
    assert resolve_spans(None, 10) == []
