class AppError(Exception):
    """Base class for errors rendered as {success: false, message}."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFound(AppError):
    # Absent, or owned by someone else
    status_code = 404


class Unauthorized(AppError):
    status_code = 401


class Forbidden(AppError):
    status_code = 403


class ValidationFailure(AppError):
    status_code = 400


class Conflict(AppError):
    status_code = 409


class GenerationFailure(AppError):
    status_code = 500
