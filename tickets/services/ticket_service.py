"""Ticket service - purchase orchestration lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants before any side effect
- Dispatch to collaborators in a fixed order: seats, then payment
- Let collaborator faults propagate unchanged
"""

import logging
from typing import Self

from tickets.domain.errors import InvalidPurchaseError
from tickets.domain.models import PurchaseOutcome
from tickets.domain.pricing import price_purchase
from tickets.domain.rules import aggregate, validate_account, validate_counts
from tickets.gateways.interfaces import PaymentCollector, SeatAllocator
from tickets.gateways.loader import get_payment_collector, get_seat_allocator
from tickets.serializers import parse_ticket_requests
from tickets.signals import tickets_purchased

logger = logging.getLogger(__name__)


class TicketService:
    """Service for validating, pricing and dispatching ticket purchases."""

    def __init__(self, seat_allocator: SeatAllocator, payment_collector: PaymentCollector) -> None:
        self._seat_allocator = seat_allocator
        self._payment_collector = payment_collector

    @classmethod
    def from_settings(cls) -> Self:
        """Build a service wired to the collaborators named in settings."""
        return cls(
            seat_allocator=get_seat_allocator(),
            payment_collector=get_payment_collector(),
        )

    def purchase_tickets(self, account_id: object, *ticket_type_requests: object) -> PurchaseOutcome:
        """Validate and price a purchase, then reserve seats and take payment.

        Raises:
            InvalidAccountError: If account_id is not a non-negative integer.
            InvalidTicketTypeError: If any request is not a TicketTypeRequest.
            NoTicketsError, TooManyTicketsError, UnsupervisedInfantError,
            NoAdultPresentError: If the aggregated counts break a purchase rule.

        Faults raised by the collaborators propagate unchanged.
        """
        try:
            account = validate_account(account_id)
            counts = aggregate(ticket_type_requests)
            validate_counts(counts)
        except InvalidPurchaseError as exc:
            logger.info("Rejected purchase for account %r: %s", account_id, exc.code.value)
            raise

        outcome = price_purchase(counts)
        logger.debug(
            "Dispatching purchase for account %d: %d seat(s), amount %d",
            account.value,
            outcome.seats_to_reserve,
            outcome.total_price,
        )
        try:
            self._seat_allocator.reserve_seat(account.value, outcome.seats_to_reserve)
            self._payment_collector.make_payment(account.value, outcome.total_price)
        except Exception:
            logger.exception("Collaborator failed for account %d", account.value)
            raise

        tickets_purchased.send(sender=type(self), account_id=account.value, outcome=outcome)
        return outcome

    def purchase_from_payload(self, account_id: object, payload: object) -> PurchaseOutcome:
        """Parse raw ``{"type", "count"}`` lines and purchase them.

        The account is checked before the payload so errors surface in the
        same order as for purchase_tickets.

        Raises:
            InvalidAccountError: If account_id is not a non-negative integer.
            InvalidTicketTypeError: If the payload is malformed.
        """
        try:
            validate_account(account_id)
            requests = parse_ticket_requests(payload)
        except InvalidPurchaseError as exc:
            logger.info("Rejected purchase for account %r: %s", account_id, exc.code.value)
            raise
        return self.purchase_tickets(account_id, *requests)
