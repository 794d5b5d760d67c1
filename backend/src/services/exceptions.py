"""Shared exceptions for service layer operations."""


class AccessDeniedError(Exception):
    """
    Raised when a caller asks for a bookmark it does not own.

    Covers both "no such record" and "record owned by someone else" so callers
    cannot use the error to probe which ids exist. The API maps it to 403.
    """

    def __init__(self, message: str = "Access to resource denied") -> None:
        super().__init__(message)


class CredentialsTakenError(Exception):
    """Raised when signup or a profile edit uses an email that belongs to another user."""

    def __init__(self, message: str = "Credentials taken") -> None:
        super().__init__(message)


class InvalidCredentialsError(Exception):
    """Raised on signin with an unknown email or a wrong password (not distinguished)."""

    def __init__(self, message: str = "Credentials incorrect") -> None:
        super().__init__(message)
