from tickets.gateways.interfaces import PaymentCollector, SeatAllocator

__all__ = ["PaymentCollector", "SeatAllocator"]
