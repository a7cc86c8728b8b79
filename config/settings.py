"""Django settings for the ticket purchase service."""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-development-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "rest_framework",
    "tickets.apps.TicketsConfig",
]

DATABASES: dict = {}

USE_TZ = True

# Collaborators
TICKETS_SEAT_ALLOCATOR = os.environ.get(
    "TICKETS_SEAT_ALLOCATOR",
    "tickets.gateways.logging_gateways.LoggingSeatAllocator",
)
TICKETS_PAYMENT_COLLECTOR = os.environ.get(
    "TICKETS_PAYMENT_COLLECTOR",
    "tickets.gateways.logging_gateways.LoggingPaymentCollector",
)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "loggers": {
        "tickets": {
            "handlers": ["console"],
            "level": os.environ.get("TICKETS_LOG_LEVEL", "INFO"),
        },
    },
}
