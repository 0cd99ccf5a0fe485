"""Typer CLI for chatfind: render and open search-result rows from a snapshot."""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from typing import Annotated

import typer
from result import Err

from chatfind.config import Config
from chatfind.data.memory import (
    RecordingNavigationSink,
    RecordingNotifications,
    build_matches,
    build_registry,
)
from chatfind.data.snapshot import Snapshot, load_snapshot
from chatfind.models.view import ResultViewModel
from chatfind.services.container import ServiceContainer

app = typer.Typer(
    name="chatfind",
    help="Render chat search results and resolve where each one navigates.",
    no_args_is_help=True,
)

_TAG_RE = re.compile(r"<(/?)(\w+)>")

SnapshotArg = Annotated[
    Path, typer.Argument(help="JSON snapshot of rooms, contacts and matches")
]
SelfHandleOpt = Annotated[
    str | None,
    typer.Option("--self-handle", help="Override the snapshot's current user handle"),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(path: Path) -> Snapshot:
    loaded = load_snapshot(path)
    if isinstance(loaded, Err):
        typer.echo(f"Error: {loaded.err_value}", err=True)
        raise typer.Exit(code=1)
    return loaded.ok_value


def _plain(markup: str | None) -> str:
    """Markup to terminal text; highlighted spans become ``*...*``."""
    if not markup:
        return ""
    text = _TAG_RE.sub(lambda m: "*" if m.group(2) == "strong" else "", markup)
    return html.unescape(text)


def _describe(position: int, row: ResultViewModel) -> str:
    parts = [f"[{position}]", row.kind, row.highlight_layout.value, _plain(row.title)]
    if row.subtitle:
        parts.append(f"- {_plain(row.subtitle)}")
    if row.timestamp:
        parts.append(f"({row.timestamp})")
    if row.call_to_action:
        parts.append(f"| {_plain(row.call_to_action)}")
    return " ".join(parts)


@app.command()
def render(
    snapshot_path: SnapshotArg,
    first_query: Annotated[
        bool, typer.Option("--first-query", help="Treat the search as the first attempt")
    ] = False,
    self_handle: SelfHandleOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print one line per result row."""
    _configure_logging(verbose)
    snapshot = _load(snapshot_path)
    config = Config(self_handle=self_handle or snapshot.self_handle)
    registry, contacts = build_registry(snapshot)
    services = ServiceContainer.create(
        config,
        registry=registry,
        contacts=contacts,
        sink=RecordingNavigationSink(),
        notifications=RecordingNotifications(),
    )
    rows = services.presenter.present_all(
        build_matches(snapshot, registry), is_first_query=first_query
    )
    for position, row in enumerate(rows):
        typer.echo(_describe(position, row))


@app.command("open")
def open_row(
    snapshot_path: SnapshotArg,
    row: Annotated[int, typer.Argument(help="Zero-based row to activate")],
    self_handle: SelfHandleOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Activate a result row and print the navigation it performed."""
    _configure_logging(verbose)
    snapshot = _load(snapshot_path)
    config = Config(self_handle=self_handle or snapshot.self_handle)
    registry, contacts = build_registry(snapshot)
    sink = RecordingNavigationSink()
    notifications = RecordingNotifications()
    services = ServiceContainer.create(
        config, registry=registry, contacts=contacts, sink=sink, notifications=notifications
    )
    matches = build_matches(snapshot, registry)
    rows = services.presenter.present_all(matches)
    if not 0 <= row < len(rows):
        typer.echo(f"Error: row {row} out of range (0-{len(rows) - 1})", err=True)
        raise typer.Exit(code=1)

    action = rows[row].on_activate()
    for event in notifications.events:
        typer.echo(f"event: {event}")
    for page in sink.pages:
        typer.echo(f"page: {page}")
    for request in registry.open_requests:
        mode = "background" if request.background else "foreground"
        typer.echo(f"open_chat: {','.join(request.participants)} {request.mode} {mode}")
    if row < len(matches) and matches[row].room is not None:
        for scroll in getattr(matches[row].room, "scroll_requests", []):
            typer.echo(f"scroll: {scroll.message_id} index={scroll.index}")
    if action is None:
        typer.echo("action: none")
    else:
        typer.echo(f"action: {action.model_dump_json(exclude_defaults=True)}")
