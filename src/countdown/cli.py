"""Countdown CLI - days until the events you're looking forward to."""

import json
import logging
import sys
from datetime import datetime, timezone

import click

from .adapters.file_event_store import EventStoreError, FileEventStore
from .config import Config, load_config
from .core.events import MAX_EVENT_TIME, FutureEvent, StoredEvent
from .core.ordering import SORT_ORDER_TOKENS, parse_sort_order
from .core.pipeline import applicable_events
from .ports.event_store import EventStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> EventStore:
    """Resolve the event store from config."""
    return FileEventStore(config.events_path())


@click.group(invoke_without_command=True)
@click.version_option()
@click.option(
    "--order", "-o",
    type=click.Choice(SORT_ORDER_TOKENS),
    default=None,
    help="Specify the ordering of the events returned",
)
@click.option("-n", "limit", type=click.IntRange(min=0), default=None,
              help="Max number of events to display.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, order: str | None, limit: int | None, as_json: bool, debug: bool):
    """Countdown to events you're looking forward to."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    if ctx.invoked_subcommand is not None and (order or limit is not None or as_json):
        raise click.UsageError("Listing options can't be combined with a subcommand.")

    ctx.obj = {"now": datetime.now(timezone.utc), "config": load_config()}

    if ctx.invoked_subcommand is None:
        _show_events(ctx.obj["config"], ctx.obj["now"], order, limit, as_json)


@main.command("add-event")
@click.option("--event", "-e", "name", required=True, help="Name of event")
@click.option("--date", "-d", "time", required=True,
              type=click.IntRange(0, MAX_EVENT_TIME),
              help="Date of event (Unix timestamp, seconds)")
@click.pass_context
def add_event(ctx, name: str, time: int):
    """Add new events."""
    if not name.strip():
        raise click.BadParameter("must not be empty", param_hint="'--event'")

    config: Config = ctx.obj["config"]
    store = get_store(config)
    try:
        store.add(StoredEvent(name=name, time=time))
    except EventStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    logger.info(f"Added event {name!r} at {time}")

    _show_events(config, ctx.obj["now"], None, None, False)


def _show_events(
    config: Config,
    now: datetime,
    order: str | None,
    limit: int | None,
    as_json: bool,
) -> None:
    """Load, filter, order and print events."""
    store = get_store(config)
    try:
        stored = store.load()
    except EventStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    sort_order = parse_sort_order(order or config.default_order)
    if limit is None:
        limit = config.default_limit

    events = applicable_events(stored, now=now, order=sort_order, limit=limit)
    logger.debug(f"{len(events)} of {len(stored)} events to display")
    _echo_events(events, as_json)


def _echo_events(events: list[FutureEvent], as_json: bool) -> None:
    if as_json:
        click.echo(
            json.dumps(
                [{"name": e.name, "days_left": e.days_left} for e in events],
                indent=2,
            )
        )
        return

    if not events:
        click.echo("No upcoming events.")
        return

    for event in events:
        click.echo(event.format())


if __name__ == "__main__":
    main()
