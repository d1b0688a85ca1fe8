"""Filtering and aggregation over journal entries.

Everything here is a pure function of the entries, the selected
TimeFilter and the current time. Nothing is cached.
"""

import calendar
from datetime import datetime, timedelta
from typing import Iterable, NamedTuple, Optional

from winloss.models import Entry, EntryType, TimeFilter

# Months subtracted for each month-based filter
FILTER_MONTHS = {
    TimeFilter.MONTH: 1,
    TimeFilter.THREE_MONTHS: 3,
    TimeFilter.SIX_MONTHS: 6,
}


class Counts(NamedTuple):
    """Per-category entry counts."""

    win: int
    loss: int
    ofg: int

    @property
    def total(self) -> int:
        return self.win + self.loss + self.ofg

    def for_type(self, entry_type: EntryType) -> int:
        """Get the count for one entry type."""
        return {
            EntryType.WIN: self.win,
            EntryType.LOSS: self.loss,
            EntryType.OPPORTUNITY_FOR_GROWTH: self.ofg,
        }[entry_type]


def subtract_months(moment: datetime, months: int) -> datetime:
    """Move a datetime back by calendar months.

    The day is clamped to the length of the target month, so
    31 March minus one month is the last day of February.
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def cutoff(time_filter: TimeFilter, now: datetime) -> Optional[datetime]:
    """Get the earliest timestamp a filter admits.

    Args:
        time_filter: Selected window.
        now: Reference time.

    Returns:
        The cutoff, or None when the filter admits everything.
    """
    if time_filter == TimeFilter.ALL:
        return None
    if time_filter == TimeFilter.WEEK:
        return now - timedelta(days=7)
    return subtract_months(now, FILTER_MONTHS[time_filter])


def filter_entries(
    entries: Iterable[Entry],
    time_filter: TimeFilter,
    now: Optional[datetime] = None,
) -> list[Entry]:
    """Select entries created at or after the filter's cutoff.

    Args:
        entries: Entries in display order.
        time_filter: Selected window.
        now: Reference time, defaults to the current time.

    Returns:
        Matching entries, order preserved.
    """
    start = cutoff(time_filter, now or datetime.now())
    if start is None:
        return list(entries)
    return [e for e in entries if e.created_at >= start]


def count_by_type(entries: Iterable[Entry]) -> Counts:
    """Count entries per category in a single pass."""
    win = loss = ofg = 0
    for entry in entries:
        if entry.type == EntryType.WIN:
            win += 1
        elif entry.type == EntryType.LOSS:
            loss += 1
        else:
            ofg += 1
    return Counts(win=win, loss=loss, ofg=ofg)


def summarize(
    entries: Iterable[Entry],
    time_filter: TimeFilter,
    now: Optional[datetime] = None,
) -> tuple[list[Entry], Counts]:
    """Filter entries and count the result.

    Returns:
        Tuple of (filtered entries, counts of the filtered entries).
    """
    filtered = filter_entries(entries, time_filter, now)
    return filtered, count_by_type(filtered)
