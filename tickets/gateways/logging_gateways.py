"""Stand-in collaborators that only log what they are asked to do.

Used as the default wiring until real seat booking and payment services are
configured in settings.
"""

import logging

from tickets.gateways.interfaces import PaymentCollector, SeatAllocator

logger = logging.getLogger(__name__)


class LoggingSeatAllocator(SeatAllocator):
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("Reserving %d seat(s) for account %d", seat_count, account_id)


class LoggingPaymentCollector(PaymentCollector):
    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Collecting payment of %d from account %d", amount, account_id)
