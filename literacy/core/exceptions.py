"""Domain errors raised by the services and mapped to HTTP responses in main."""

from typing import Any, Optional

from literacy.constants.constants import Message


class PlatformError(Exception):
    """Base error carrying a client-facing message and an HTTP status."""

    status_code = 500

    def __init__(self, message: str = Message.internal_error.value, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_content(self) -> dict:
        content = {"message": self.message}
        if self.details is not None:
            content["errors"] = self.details
        return content


class ValidationError(PlatformError):
    status_code = 400

    def __init__(self, message: str = Message.invalid_data.value, details: Optional[Any] = None):
        super().__init__(message, details)


class ConflictError(PlatformError):
    status_code = 400

    def __init__(self, message: str = Message.email_taken.value):
        super().__init__(message)


class AuthError(PlatformError):
    status_code = 401

    def __init__(self, message: str = Message.invalid_credentials.value):
        super().__init__(message)


class EmailNotVerifiedError(AuthError):
    status_code = 403

    def __init__(self, message: str = Message.email_not_verified.value):
        super().__init__(message)


class InvalidTokenError(PlatformError):
    status_code = 400

    def __init__(self, message: str = Message.invalid_token.value):
        super().__init__(message)


class NotFoundError(PlatformError):
    status_code = 404

    def __init__(self, message: str = Message.module_not_found.value):
        super().__init__(message)


class InternalError(PlatformError):
    status_code = 500
