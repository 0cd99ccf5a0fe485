"""Service container with DI wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chatfind.services.highlight import Highlighter
from chatfind.services.navigation_service import NavigationResolver
from chatfind.services.presenter import ResultPresenter
from chatfind.services.summary_service import SummaryResolver

if TYPE_CHECKING:
    from chatfind.config import Config
    from chatfind.services.protocols import (
        ChatRegistryProtocol,
        ContactDirectoryProtocol,
        NavigationSinkProtocol,
        NotificationChannelProtocol,
    )


@dataclass
class ServiceContainer:
    """Holds all services. Built once at startup, immutable."""

    config: Config
    highlighter: Highlighter
    summaries: SummaryResolver
    navigation: NavigationResolver
    presenter: ResultPresenter

    @classmethod
    def create(
        cls,
        config: Config,
        *,
        registry: ChatRegistryProtocol,
        contacts: ContactDirectoryProtocol,
        sink: NavigationSinkProtocol,
        notifications: NotificationChannelProtocol,
    ) -> ServiceContainer:
        """Factory that wires the collaborators into the services."""
        highlighter = Highlighter(config.highlight_tag)
        summaries = SummaryResolver(highlighter, contacts, config)
        navigation = NavigationResolver(
            registry=registry, sink=sink, notifications=notifications, config=config
        )
        presenter = ResultPresenter(summaries, navigation)
        return cls(
            config=config,
            highlighter=highlighter,
            summaries=summaries,
            navigation=navigation,
            presenter=presenter,
        )
