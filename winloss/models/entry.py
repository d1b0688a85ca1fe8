"""Entry and EntryType data models."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator


class EntryType(str, Enum):
    """Category of a journal entry. The value is the short code."""

    WIN = "W"
    LOSS = "L"
    OPPORTUNITY_FOR_GROWTH = "OFG"

    @property
    def code(self) -> str:
        """Short code used for storage and display."""
        return self.value

    @property
    def long(self) -> str:
        """Human-readable label."""
        return LONG_LABELS[self]

    @classmethod
    def parse(cls, value: str) -> "EntryType":
        """Parse a short code or long label, ignoring case.

        Args:
            value: Text such as 'w', 'OFG' or 'Opportunity for Growth'.

        Returns:
            The matching EntryType.

        Raises:
            ValueError: If the text names no entry type.
        """
        needle = value.strip().lower()
        for entry_type in cls:
            if needle in (entry_type.code.lower(), entry_type.long.lower()):
                return entry_type
        raise ValueError(
            f"Unknown entry type '{value}'. Use one of: "
            + ", ".join(t.code for t in cls)
        )


LONG_LABELS = {
    EntryType.WIN: "Win",
    EntryType.LOSS: "Loss",
    EntryType.OPPORTUNITY_FOR_GROWTH: "Opportunity for Growth",
}


class Entry(BaseModel):
    """Represents one recorded win, loss or opportunity for growth."""

    id: UUID = Field(default_factory=uuid4, description="Unique entry ID")
    type: EntryType = Field(..., description="Entry category")
    text: str = Field(..., description="Free-form commentary")
    created_at: datetime = Field(
        default_factory=datetime.now,
        alias="date",
        description="Entry creation timestamp",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("created_at")
    @classmethod
    def _to_local_naive(cls, value: datetime) -> datetime:
        """Store aware timestamps as naive local time."""
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
