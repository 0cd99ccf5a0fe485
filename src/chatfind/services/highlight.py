"""Match-span highlighting."""

from __future__ import annotations

import html
from collections.abc import Iterable

from chatfind.models.search import MatchSpan


class Highlighter:
    """Wraps matched substrings in an emphasis tag."""

    def __init__(self, tag: str = "strong") -> None:
        self._tag = tag

    def highlight(
        self, text: str, spans: Iterable[MatchSpan], escape_html: bool = False
    ) -> str:
        """Wrap each span of ``text`` in ``<tag>``.

        Offsets refer to the raw ``text``. Spans are applied left to right; a span
        overlapping one already accepted is dropped, so the earlier span wins.
        With no usable spans the text is returned unmodified (escaped if asked).
        """
        text = text or ""
        ranges = resolve_spans(spans, len(text))
        if not ranges:
            return html.escape(text) if escape_html else text

        def segment(value: str) -> str:
            return html.escape(value) if escape_html else value

        parts: list[str] = []
        cursor = 0
        for start, end in ranges:
            parts.append(segment(text[cursor:start]))
            parts.append(f"<{self._tag}>{segment(text[start:end])}</{self._tag}>")
            cursor = end
        parts.append(segment(text[cursor:]))
        return "".join(parts)


def resolve_spans(spans: Iterable[MatchSpan] | None, length: int) -> list[tuple[int, int]]:
    """Clamp, order and de-overlap spans against a text of ``length`` characters."""
    if not spans:
        return []
    clamped: list[tuple[int, int]] = []
    for span in spans:
        start = min(max(span.start, 0), length)
        end = min(max(span.end, 0), length)
        if end > start:
            clamped.append((start, end))

    # sorted() is stable: equal starts keep their original order
    clamped = sorted(clamped, key=lambda r: r[0])
    accepted: list[tuple[int, int]] = []
    last_end = 0
    for start, end in clamped:
        if start < last_end:
            continue
        accepted.append((start, end))
        last_end = end
    return accepted
