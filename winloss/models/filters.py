"""TimeFilter model."""

from enum import Enum


class TimeFilter(str, Enum):
    """Relative time window used to select entries for the log."""

    ALL = "All"
    WEEK = "Week"
    MONTH = "Month"
    THREE_MONTHS = "3 Months"
    SIX_MONTHS = "6 Months"

    @property
    def label(self) -> str:
        return self.value

    @property
    def slug(self) -> str:
        """Short form accepted on the command line."""
        return SLUGS[self]

    @classmethod
    def parse(cls, value: str) -> "TimeFilter":
        """Parse a member name, label or slug, ignoring case.

        Raises:
            ValueError: If the text names no filter.
        """
        needle = value.strip().lower()
        for time_filter in cls:
            names = (
                time_filter.name.lower(),
                time_filter.label.lower(),
                time_filter.slug,
            )
            if needle in names:
                return time_filter
        raise ValueError(
            f"Unknown filter '{value}'. Use one of: "
            + ", ".join(f.slug for f in cls)
        )


SLUGS = {
    TimeFilter.ALL: "all",
    TimeFilter.WEEK: "week",
    TimeFilter.MONTH: "month",
    TimeFilter.THREE_MONTHS: "3m",
    TimeFilter.SIX_MONTHS: "6m",
}
