"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from tickets.domain.errors import InvalidAccountError, InvalidTicketTypeError


class TicketCategory(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def parse(cls, value: object) -> Self:
        """Return the category named by ``value``, ignoring case.

        Raises:
            InvalidTicketTypeError: If ``value`` does not name a category.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidTicketTypeError(detail=f"Unsupported ticket type {value!r}")
        try:
            return cls[value.upper()]
        except KeyError:
            raise InvalidTicketTypeError(detail=f"Unsupported ticket type {value!r}") from None


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid identifier
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAccountError(self.value)
        if self.value < 0:
            raise InvalidAccountError(self.value)

    def __int__(self) -> int:
        return self.value
