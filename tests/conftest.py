"""Shared fixtures for chatfind tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fakes import FIXED_NOW, FakeContacts, FakeRegistry

from chatfind.config import Config
from chatfind.data.memory import RecordingNavigationSink, RecordingNotifications
from chatfind.data.snapshot import Snapshot
from chatfind.services.highlight import Highlighter
from chatfind.services.navigation_service import NavigationResolver
from chatfind.services.presenter import ResultPresenter
from chatfind.services.summary_service import SummaryResolver

SAMPLE_SNAPSHOT_PATH = Path(__file__).parent / "data" / "sample_snapshot.json"


@pytest.fixture
def config() -> Config:
    return Config(self_handle="me")


@pytest.fixture
def contacts() -> FakeContacts:
    return FakeContacts(
        nicknames={"peer": "Pete"},
        names={"peer": "Peter Parker", "bob": "Bob <B> Smith"},
        presence={"peer": "online", "bob": "away"},
        last_activity={"peer": "Last seen 2m ago", "bob": "Last seen yesterday"},
    )


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def sink() -> RecordingNavigationSink:
    return RecordingNavigationSink()


@pytest.fixture
def notifications() -> RecordingNotifications:
    return RecordingNotifications()


@pytest.fixture
def summaries(contacts: FakeContacts, config: Config) -> SummaryResolver:
    return SummaryResolver(Highlighter(), contacts, config, clock=lambda: FIXED_NOW)


@pytest.fixture
def navigation(
    registry: FakeRegistry,
    sink: RecordingNavigationSink,
    notifications: RecordingNotifications,
    config: Config,
) -> NavigationResolver:
    return NavigationResolver(
        registry=registry, sink=sink, notifications=notifications, config=config
    )


@pytest.fixture
def presenter(summaries: SummaryResolver, navigation: NavigationResolver) -> ResultPresenter:
    return ResultPresenter(summaries, navigation)


@pytest.fixture
def sample_snapshot_path() -> Path:
    """Path to the sample snapshot JSON file."""
    return SAMPLE_SNAPSHOT_PATH


@pytest.fixture
def sample_snapshot() -> Snapshot:
    return Snapshot.model_validate_json(SAMPLE_SNAPSHOT_PATH.read_text(encoding="utf-8"))
