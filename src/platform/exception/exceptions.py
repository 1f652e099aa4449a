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


class InvalidStateTransitionError(DomainError):
    """Raised when a status change is not allowed by the entity's state machine."""

    def __init__(
        self, message: str, *, entity: str = '', current: str = '', proposed: str = ''
    ) -> None:
        self.entity = entity
        self.current = current
        self.proposed = proposed
        super().__init__(message, 422)
