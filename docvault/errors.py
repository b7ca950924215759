"""Domain errors raised by the services and mapped to HTTP responses in ``docvault.main``."""


class AppError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    message = "Validation failed"


class AuthenticationError(AppError):
    status_code = 401
    message = "Unauthorized"


class InvalidTokenError(AuthenticationError):
    message = "Unauthorized: Invalid token"


class NotFoundError(AppError):
    # also covers records owned by someone else
    status_code = 404
    message = "Not found"


class ConflictError(AppError):
    status_code = 409
    message = "Conflict"


class ConfigurationError(RuntimeError):
    """Process-level misconfiguration, e.g. a missing signing secret."""
