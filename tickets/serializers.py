"""Serializers for turning raw request lines into domain ticket requests."""

import logging

from rest_framework import serializers

from tickets.domain.errors import InvalidTicketTypeError
from tickets.domain.models import TicketTypeRequest
from tickets.domain.value_objects import TicketCategory

logger = logging.getLogger(__name__)


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that refuses strings, floats and booleans."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail("invalid")
        return super().to_internal_value(data)


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for a single ``{"type": ..., "count": ...}`` line."""

    type = serializers.CharField(trim_whitespace=False)
    count = StrictIntegerField(min_value=0)

    def validate_type(self, value: str) -> TicketCategory:
        try:
            return TicketCategory.parse(value)
        except InvalidTicketTypeError:
            raise serializers.ValidationError(f"Unsupported ticket type {value!r}.") from None


def parse_ticket_requests(payload: object) -> tuple[TicketTypeRequest, ...]:
    """Validate raw request lines and convert them to TicketTypeRequests.

    Raises:
        InvalidTicketTypeError: If the payload or any line is malformed.
    """
    serializer = TicketTypeRequestSerializer(data=payload, many=True)
    if not serializer.is_valid():
        logger.debug("Rejected ticket request payload: %s", serializer.errors)
        raise InvalidTicketTypeError(detail=serializer.errors)
    return tuple(
        TicketTypeRequest(category=line["type"], count=line["count"])
        for line in serializer.validated_data
    )
