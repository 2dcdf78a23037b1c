"""Temporal contact between a candidate and existing entries at one slot/day.

A recurring template (no date) occurs on every matching weekday, so it is in
contact with everything placed at the same slot and day. A dated instance only
touches recurring templates and other instances on that same date.
"""
from __future__ import annotations

from collections.abc import Iterable

from app.schemas.schedule import ScheduleCandidate, ScheduleEntryOut


def is_in_contact(candidate: ScheduleCandidate, entry: ScheduleEntryOut) -> bool:
    if candidate.date is None or entry.is_recurring:
        return True
    return entry.date == candidate.date


def find_contacting_entries(
    candidate: ScheduleCandidate,
    existing: Iterable[ScheduleEntryOut],
) -> list[ScheduleEntryOut]:
    """Filter entries already narrowed to the candidate's time slot and weekday."""
    return [entry for entry in existing if is_in_contact(candidate, entry)]
