"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    NO_TICKETS = "NO_TICKETS"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    UNSUPERVISED_INFANT = "UNSUPERVISED_INFANT"
    NO_ADULT_PRESENT = "NO_ADULT_PRESENT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Base for every reason a purchase is rejected before dispatch."""


class InvalidAccountError(InvalidPurchaseError):
    """Raised when an account identifier is not a non-negative integer."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Your account details are invalid.",
        )
        self.account_id = account_id


class InvalidTicketTypeError(InvalidPurchaseError):
    """Raised when a ticket request line is malformed."""

    def __init__(self, detail: object = None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE,
            message="Please request valid ticket types.",
        )
        self.detail = detail


class NoTicketsError(InvalidPurchaseError):
    """Raised when a purchase requests zero tickets in total."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKETS,
            message="You have not purchased any tickets.",
        )


class TooManyTicketsError(InvalidPurchaseError):
    """Raised when a purchase exceeds the per-purchase ticket cap."""

    def __init__(self, total: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"You are not permitted to request more than {limit} tickets.",
        )
        self.total = total
        self.limit = limit


class UnsupervisedInfantError(InvalidPurchaseError):
    """Raised when infants outnumber adults."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNSUPERVISED_INFANT,
            message="Every infant must be supervised by an adult.",
        )


class NoAdultPresentError(InvalidPurchaseError):
    """Raised when child or infant tickets are requested without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_ADULT_PRESENT,
            message="Children/infants cannot book without an adult.",
        )
