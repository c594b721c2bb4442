from fastapi import HTTPException, status

from booking_api.core.exceptions import (
    AmbiguousReferenceError,
    BookingServiceError,
    ConflictError,
    NotFoundError,
    StateTransitionError,
    ValidationError,
)
from booking_api.services.booking import BookingOrchestrator


async def get_orchestrator() -> BookingOrchestrator:
    return BookingOrchestrator()


def http_error(exc: BookingServiceError) -> HTTPException:
    """Translate a service error into the matching HTTP response."""
    if isinstance(exc, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[{"field": issue.field, "message": issue.message} for issue in exc.issues],
        )
    if isinstance(exc, AmbiguousReferenceError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    if isinstance(exc, StateTransitionError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": exc.message,
                "currentStatus": exc.current_status,
                "allowedStatuses": exc.allowed_statuses,
            },
        )
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message)
    # PersistenceError and its subclasses
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message)
