"""Application error taxonomy, rendered by the handlers in main.py"""


class BookingAppError(Exception):
    """Base class for errors that map onto an HTTP response"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookingAppError):
    """Missing or malformed input"""

    status_code = 400


class ConflictError(BookingAppError):
    """Request conflicts with shop state, e.g. booking on a closed day"""

    status_code = 400


class NotFoundError(BookingAppError):
    status_code = 404


class AuthenticationError(BookingAppError):
    status_code = 401


class StorageError(BookingAppError):
    """Failure reported by the database"""

    status_code = 500


class NotificationError(BookingAppError):
    """Outbound message could not be delivered. Logged by the sender, never propagated."""
