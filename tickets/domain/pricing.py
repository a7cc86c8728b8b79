"""Ticket prices and seat computation."""

from types import MappingProxyType

from tickets.domain.models import AggregatedCounts, PurchaseOutcome
from tickets.domain.value_objects import TicketCategory

TICKET_PRICES = MappingProxyType(
    {
        TicketCategory.ADULT: 20,
        TicketCategory.CHILD: 10,
        TicketCategory.INFANT: 0,
    }
)


def calculate_price(adult: int, child: int) -> int:
    return adult * TICKET_PRICES[TicketCategory.ADULT] + child * TICKET_PRICES[TicketCategory.CHILD]


def calculate_seats(adult: int, child: int) -> int:
    # infants sit on an adult's lap
    return adult + child


def price_purchase(counts: AggregatedCounts) -> PurchaseOutcome:
    """Return the amount and seat count for validated counts."""
    return PurchaseOutcome(
        total_price=calculate_price(counts.adult, counts.child),
        seats_to_reserve=calculate_seats(counts.adult, counts.child),
    )
