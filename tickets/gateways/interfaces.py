"""Collaborator interfaces (ports to third-party services).

Implementations must be swappable; the purchase service depends on these only.
"""

from abc import ABC, abstractmethod


class SeatAllocator(ABC):
    """Interface for the external seat booking service."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account."""
        ...


class PaymentCollector(ABC):
    """Interface for the external payment gateway."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account."""
        ...
