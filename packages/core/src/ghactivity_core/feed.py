"""Assemble rendered events into the activity report."""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from ghactivity_core.models import Event
from ghactivity_core.renderers import BULLET, render

logger = logging.getLogger(__name__)

EVENT_SEPARATOR = ";\n\n"
NO_ACTIVITY = "No recent activity."


def format_feed(username: str, events: Iterable[Event]) -> str:
    """Render the report for ``username``.

    Every event is rendered before anything is returned, so an
    UnknownEventType part-way through leaves no partial report behind.
    """
    header = f"{username}'s GitHub activity:"
    items = [f"{BULLET} {render(event)}" for event in events]
    if not items:
        return f"{header}\n{NO_ACTIVITY}"
    return f"{header}\n{EVENT_SEPARATOR.join(items)}."


def write_feed(username: str, events: Iterable[Event], stream: TextIO) -> None:
    report = format_feed(username, events)
    stream.write(report + "\n")
    stream.flush()
    logger.debug("Wrote activity report for %s (%d chars)", username, len(report))
