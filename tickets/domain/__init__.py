from tickets.domain.models import AggregatedCounts, PurchaseOutcome, TicketTypeRequest
from tickets.domain.value_objects import AccountId, TicketCategory

__all__ = [
    "AggregatedCounts",
    "PurchaseOutcome",
    "TicketTypeRequest",
    "AccountId",
    "TicketCategory",
]
