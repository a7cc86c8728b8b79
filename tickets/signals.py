"""Django signals for completed ticket purchases.

``tickets_purchased`` is sent with ``account_id`` and ``outcome`` once seats
are reserved and payment is collected.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

tickets_purchased = Signal()


@receiver(tickets_purchased)
def log_ticket_purchase(sender, account_id, outcome, **kwargs):
    """Record a completed purchase."""
    logger.info(
        "Account %d purchased %d seat(s) for %d",
        account_id,
        outcome.seats_to_reserve,
        outcome.total_price,
    )
