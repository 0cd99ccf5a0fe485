"""Result row presenter."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from chatfind.models.view import (
    ChatVariant,
    MemberVariant,
    MessageVariant,
    RenderVariant,
    ResultViewModel,
)
from chatfind.services.classifier import classify

if TYPE_CHECKING:
    from chatfind.models.navigation import NavigationAction
    from chatfind.models.search import Match
    from chatfind.services.navigation_service import NavigationResolver
    from chatfind.services.summary_service import SummaryResolver


class ResultPresenter:
    """Builds view-models for result rows. Keeps no state between renders."""

    def __init__(self, summaries: SummaryResolver, navigation: NavigationResolver) -> None:
        self._summaries = summaries
        self._navigation = navigation

    def present(
        self,
        match: Match | None,
        *,
        is_first_query: bool = False,
        on_search_messages: Callable[[], None] | None = None,
    ) -> ResultViewModel:
        variant = classify(match)
        summary = self._summaries.resolve(variant, is_first_query=is_first_query)
        return ResultViewModel(
            variant=variant,
            title=summary.title,
            subtitle=summary.subtitle,
            icon=summary.icon,
            is_group=summary.is_group,
            highlight_layout=summary.highlight_layout,
            avatar_contact=summary.avatar_contact,
            presence=summary.presence,
            timestamp=summary.timestamp,
            call_to_action=summary.call_to_action,
            on_activate=self._activation_for(variant),
            on_search_messages=on_search_messages if summary.call_to_action else None,
        )

    def present_all(
        self,
        matches: Iterable[Match],
        *,
        is_first_query: bool = False,
        on_search_messages: Callable[[], None] | None = None,
    ) -> list[ResultViewModel]:
        """Present every match; an empty result set yields a single empty row."""
        rows = [
            self.present(m, is_first_query=is_first_query, on_search_messages=on_search_messages)
            for m in matches
        ]
        if not rows:
            rows.append(
                self.present(
                    None, is_first_query=is_first_query, on_search_messages=on_search_messages
                )
            )
        return rows

    def _activation_for(self, variant: RenderVariant) -> Callable[[], NavigationAction | None]:
        navigation = self._navigation
        match variant:
            case MessageVariant(room=room, message=message, index=index):
                return lambda: navigation.activate(room, message.message_id, index)
            case ChatVariant(room=room):
                return lambda: navigation.activate(room)
            case MemberVariant(room=None, contact_id=contact_id):
                return lambda: navigation.activate(contact_id)
            case MemberVariant(room=room):
                return lambda: navigation.activate(room)
            case _:
                return _no_activation


def _no_activation() -> None:
    return None
