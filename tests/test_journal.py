"""Property-based tests for filtering and aggregation.

**Feature: winloss**
"""

from datetime import datetime, timedelta

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from winloss.journal import (
    Counts,
    count_by_type,
    cutoff,
    filter_entries,
    subtract_months,
    summarize,
)
from winloss.models import Entry, EntryType, TimeFilter


NOW = datetime(2025, 10, 18, 12, 0, 0)


def entry_at(created_at: datetime, entry_type: EntryType = EntryType.WIN) -> Entry:
    return Entry(type=entry_type, text="note", created_at=created_at)


def entry_strategy():
    """Generate entries within two years of NOW."""
    return st.builds(
        Entry,
        type=st.sampled_from(list(EntryType)),
        text=st.just("note"),
        created_at=st.datetimes(
            min_value=NOW - timedelta(days=730),
            max_value=NOW + timedelta(days=1),
        ),
    )


class TestCutoff:
    """Cutoff timestamps for each time window."""

    def test_all_has_no_cutoff(self):
        assert cutoff(TimeFilter.ALL, NOW) is None

    def test_week(self):
        assert cutoff(TimeFilter.WEEK, NOW) == datetime(2025, 10, 11, 12, 0, 0)

    def test_month(self):
        assert cutoff(TimeFilter.MONTH, NOW) == datetime(2025, 9, 18, 12, 0, 0)

    def test_three_months(self):
        assert cutoff(TimeFilter.THREE_MONTHS, NOW) == datetime(2025, 7, 18, 12, 0, 0)

    def test_six_months_crosses_year(self):
        assert cutoff(TimeFilter.SIX_MONTHS, datetime(2025, 3, 10)) == datetime(2024, 9, 10)


class TestSubtractMonths:
    """Calendar month arithmetic with day clamping."""

    @pytest.mark.parametrize(
        "moment,months,expected",
        [
            (datetime(2025, 3, 31), 1, datetime(2025, 2, 28)),
            (datetime(2024, 3, 31), 1, datetime(2024, 2, 29)),
            (datetime(2025, 1, 15), 1, datetime(2024, 12, 15)),
            (datetime(2025, 8, 31), 6, datetime(2025, 2, 28)),
            (datetime(2025, 5, 31, 8, 45), 3, datetime(2025, 2, 28, 8, 45)),
            (datetime(2025, 12, 31), 12, datetime(2024, 12, 31)),
        ],
    )
    def test_known_dates(self, moment, months, expected):
        assert subtract_months(moment, months) == expected

    @given(
        moment=st.datetimes(min_value=datetime(1990, 1, 1), max_value=datetime(2100, 1, 1)),
        months=st.integers(min_value=0, max_value=24),
    )
    @settings(max_examples=200)
    def test_never_later_than_input(self, moment, months):
        result = subtract_months(moment, months)

        assert result <= moment
        assert (moment.year * 12 + moment.month) - (result.year * 12 + result.month) == months


class TestFilterInclusion:
    """
    **Feature: winloss, Property: Filter Inclusion**

    *For any* entry and filter, the entry is included iff the filter is All
    or the entry was created at or after the cutoff.
    """

    @given(
        entries=st.lists(entry_strategy(), max_size=40),
        time_filter=st.sampled_from(list(TimeFilter)),
    )
    @settings(max_examples=100)
    def test_inclusion(self, entries, time_filter):
        filtered = filter_entries(entries, time_filter, NOW)
        start = cutoff(time_filter, NOW)

        expected = [
            e for e in entries
            if time_filter == TimeFilter.ALL or e.created_at >= start
        ]
        assert filtered == expected

    def test_ten_days_old(self):
        entry = entry_at(NOW - timedelta(days=10))

        assert filter_entries([entry], TimeFilter.WEEK, NOW) == []
        assert filter_entries([entry], TimeFilter.MONTH, NOW) == [entry]

    def test_cutoff_is_inclusive(self):
        entry = entry_at(NOW - timedelta(days=7))

        assert filter_entries([entry], TimeFilter.WEEK, NOW) == [entry]

    def test_just_past_cutoff_excluded(self):
        entry = entry_at(NOW - timedelta(days=7, microseconds=1))

        assert filter_entries([entry], TimeFilter.WEEK, NOW) == []

    def test_order_preserved(self):
        entries = [entry_at(NOW - timedelta(days=d)) for d in (1, 40, 2, 3)]

        assert filter_entries(entries, TimeFilter.WEEK, NOW) == [entries[0], entries[2], entries[3]]

    def test_now_defaults_to_current_time(self):
        recent = entry_at(datetime.now() - timedelta(hours=1))
        old = entry_at(datetime.now() - timedelta(days=8))

        assert filter_entries([recent, old], TimeFilter.WEEK) == [recent]


class TestCounts:
    """
    **Feature: winloss, Property: Category Counts**

    *For any* filtered set, counts match per-type tallies and sum to its size.
    """

    @given(
        entries=st.lists(entry_strategy(), max_size=40),
        time_filter=st.sampled_from(list(TimeFilter)),
    )
    @settings(max_examples=100)
    def test_counts_match_filtered(self, entries, time_filter):
        filtered, counts = summarize(entries, time_filter, NOW)

        assert counts == Counts(
            win=sum(1 for e in filtered if e.type == EntryType.WIN),
            loss=sum(1 for e in filtered if e.type == EntryType.LOSS),
            ofg=sum(1 for e in filtered if e.type == EntryType.OPPORTUNITY_FOR_GROWTH),
        )
        assert counts.total == len(filtered)

    def test_empty(self):
        assert count_by_type([]) == Counts(0, 0, 0)

    def test_for_type(self):
        counts = Counts(win=3, loss=1, ofg=2)

        assert counts.for_type(EntryType.WIN) == 3
        assert counts.for_type(EntryType.LOSS) == 1
        assert counts.for_type(EntryType.OPPORTUNITY_FOR_GROWTH) == 2
