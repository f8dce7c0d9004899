class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class LoginError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class DataIntegrityError(DomainError):
    """A seat references a ticket type that is not in the catalog."""

    def __init__(self, *, seat_id: str, ticket_type_id: str) -> None:
        self.seat_id = seat_id
        self.ticket_type_id = ticket_type_id
        super().__init__(
            f'Seat {seat_id} references unknown ticket type {ticket_type_id}', 422
        )


class InvalidTransitionError(DomainError):
    def __init__(self, *, state: str, event: str, reason: str = '') -> None:
        self.state = state
        self.event = event
        message = f'{event} is not allowed while checkout is {state}'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message, 409)


class RemoteServiceError(CustomBaseError):
    """
    The ticketing API answered with a non-2xx status or an unreadable body.

    outcome_unknown is True when the client cannot tell whether the server
    acted on the request.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        detail: str | None = None,
        outcome_unknown: bool = False,
    ) -> None:
        self.detail = detail
        self.outcome_unknown = outcome_unknown
        super().__init__(message, status_code)


class RemoteUnavailableError(RemoteServiceError):
    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message, 503, detail=detail, outcome_unknown=True)
