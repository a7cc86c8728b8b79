"""Domain models for a single purchase call.

These are pure domain objects; nothing here is persisted.
"""

from dataclasses import dataclass
from typing import Self

from tickets.domain.errors import InvalidTicketTypeError
from tickets.domain.value_objects import TicketCategory


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for ``count`` tickets of one category."""

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            raise InvalidTicketTypeError(detail=f"Unsupported ticket type {self.category!r}")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidTicketTypeError(detail=f"Ticket count must be an integer, got {self.count!r}")
        if self.count < 0:
            raise InvalidTicketTypeError(detail="Ticket count cannot be negative")

    @classmethod
    def of(cls, category: TicketCategory | str, count: int) -> Self:
        return cls(category=TicketCategory.parse(category), count=count)


@dataclass(frozen=True)
class AggregatedCounts:
    """Per-category ticket totals for one purchase."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant


@dataclass(frozen=True)
class PurchaseOutcome:
    """Amount to charge and seats to reserve for a validated purchase."""

    total_price: int
    seats_to_reserve: int
