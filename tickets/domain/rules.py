"""Eligibility rules applied before a purchase is priced."""

from collections import Counter
from collections.abc import Iterable

from tickets.domain.errors import (
    InvalidTicketTypeError,
    NoAdultPresentError,
    NoTicketsError,
    TooManyTicketsError,
    UnsupervisedInfantError,
)
from tickets.domain.models import AggregatedCounts, TicketTypeRequest
from tickets.domain.value_objects import AccountId, TicketCategory

MAX_TICKETS_PER_PURCHASE = 20


def validate_account(account_id: object) -> AccountId:
    """Return the validated account identifier.

    Raises:
        InvalidAccountError: If ``account_id`` is not a non-negative integer.
    """
    return AccountId(account_id)


def aggregate(requests: Iterable[object]) -> AggregatedCounts:
    """Sum requested counts per category.

    Raises:
        InvalidTicketTypeError: If any element is not a TicketTypeRequest.
    """
    totals: Counter[TicketCategory] = Counter()
    for request in requests:
        if not isinstance(request, TicketTypeRequest):
            raise InvalidTicketTypeError(detail=f"Expected a ticket request, got {type(request).__name__}")
        totals[request.category] += request.count
    return AggregatedCounts(
        adult=totals[TicketCategory.ADULT],
        child=totals[TicketCategory.CHILD],
        infant=totals[TicketCategory.INFANT],
    )


def validate_counts(counts: AggregatedCounts) -> None:
    """Check purchase eligibility; the first failing rule wins.

    Raises:
        NoTicketsError: If no tickets are requested.
        TooManyTicketsError: If more than MAX_TICKETS_PER_PURCHASE are requested.
        UnsupervisedInfantError: If infants outnumber adults.
        NoAdultPresentError: If child or infant tickets have no adult.
    """
    total = counts.total
    if total == 0:
        raise NoTicketsError()
    if total > MAX_TICKETS_PER_PURCHASE:
        raise TooManyTicketsError(total=total, limit=MAX_TICKETS_PER_PURCHASE)
    if counts.infant > counts.adult:
        raise UnsupervisedInfantError()
    if counts.adult == 0:
        raise NoAdultPresentError()
