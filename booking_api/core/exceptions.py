"""
Error taxonomy for booking operations.

Every error aborts the enclosing unit of work; none are recovered locally.
The request layer maps them onto HTTP status codes.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence


class BookingServiceError(Exception):
    """Base exception for booking service errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str


class ValidationError(BookingServiceError):
    """A business rule on the request failed; raised before any write."""

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__("; ".join(issue.message for issue in self.issues))

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([ValidationIssue(field=field, message=message)])


class NotFoundError(BookingServiceError):
    """Referenced booking, shipment, vessel, location or address does not exist."""

    pass


class ConflictError(BookingServiceError):
    """Supplied identity contradicts an existing record."""

    pass


class AmbiguousReferenceError(BookingServiceError):
    """A lookup matched more than one record."""

    pass


class StateTransitionError(BookingServiceError):
    """Operation attempted from a status that does not permit it."""

    def __init__(
        self,
        operation: str,
        current_status: Optional[str],
        allowed_statuses: Iterable[str],
    ) -> None:
        self.operation = operation
        self.current_status = current_status
        self.allowed_statuses = sorted(allowed_statuses)
        super().__init__(
            f"Cannot {operation} booking in status {current_status}; "
            f"allowed statuses: {', '.join(self.allowed_statuses)}"
        )


class PersistenceError(BookingServiceError):
    """Underlying storage failure; the unit of work is discarded."""

    pass


class UpdateError(PersistenceError):
    """A conditional write did not affect the expected number of rows."""

    pass


class CreateError(PersistenceError):
    """A record that must be written could not be created."""

    pass
