"""Pytest configuration and shared fixtures."""

import pytest

from tickets.gateways.interfaces import PaymentCollector, SeatAllocator
from tickets.services.ticket_service import TicketService


class RecordingSeatAllocator(SeatAllocator):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.calls.append(("reserve_seat", account_id, seat_count))


class RecordingPaymentCollector(PaymentCollector):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, amount: int) -> None:
        self.calls.append(("make_payment", account_id, amount))


@pytest.fixture
def calls() -> list:
    """Shared call log so the order of collaborator calls is observable."""
    return []


@pytest.fixture
def seat_allocator(calls: list) -> RecordingSeatAllocator:
    return RecordingSeatAllocator(calls)


@pytest.fixture
def payment_collector(calls: list) -> RecordingPaymentCollector:
    return RecordingPaymentCollector(calls)


@pytest.fixture
def ticket_service(
    seat_allocator: RecordingSeatAllocator,
    payment_collector: RecordingPaymentCollector,
) -> TicketService:
    return TicketService(seat_allocator=seat_allocator, payment_collector=payment_collector)
