"""Build collaborators from the dotted paths configured in settings."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from tickets.gateways.interfaces import PaymentCollector, SeatAllocator


def _load(setting_name: str, interface: type) -> object:
    path = getattr(settings, setting_name)
    try:
        gateway_class = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"{setting_name} refers to {path!r}, which cannot be imported") from exc
    if not (isinstance(gateway_class, type) and issubclass(gateway_class, interface)):
        raise ImproperlyConfigured(f"{setting_name} must name a {interface.__name__} subclass, got {path!r}")
    return gateway_class()


def get_seat_allocator() -> SeatAllocator:
    return _load("TICKETS_SEAT_ALLOCATOR", SeatAllocator)


def get_payment_collector() -> PaymentCollector:
    return _load("TICKETS_PAYMENT_COLLECTOR", PaymentCollector)
