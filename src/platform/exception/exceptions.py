from typing import Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int, *, details: Optional[str] = None) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details  # only rendered outside production
        super().__init__(message)


class InvalidInputError(CustomBaseError):
    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message, 400, details=details)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = 'Invalid token. Please log in again!') -> None:
        super().__init__(message)


class ExpiredTokenError(AuthenticationError):
    def __init__(self, message: str = 'Your token has expired! Please log in again.') -> None:
        super().__init__(message)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    # Duplicates are reported as a plain bad request, not 409
    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message, 400, details=details)


class InternalError(CustomBaseError):
    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message, 500, details=details)
