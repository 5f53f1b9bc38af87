"""
Service Error Categories

The small set of errors every adapter service reports to its caller.
Each category carries an HTTP status code so the API layer can render it
without further translation.
"""

from typing import Any


class ConfigurationError(ValueError):
    """Raised at construction time when a service is missing its credentials."""


class ServiceError(Exception):
    """Base class for errors surfaced by the adapter services."""

    name = "GeneralError"
    code = 500
    class_name = "general-error"

    def __init__(self, message: Any = "Error", data: Any = None):
        # Stripe errors are passed as the message; keep their text
        if isinstance(message, BaseException):
            data = message if data is None else data
            message = str(message) or message.__class__.__name__
        elif isinstance(message, dict):
            data = message if data is None else data
            message = message.get("message") or self.name
        self.message = message
        self.data = data
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a JSON-safe dictionary."""
        data = self.data
        if data is not None and not isinstance(data, (dict, list, str, int, float)):
            data = {
                "type": getattr(data, "type", None) or data.__class__.__name__,
                "message": str(data),
            }
        return {
            "name": self.name,
            "message": self.message,
            "code": self.code,
            "class_name": self.class_name,
            "data": data,
        }


class BadRequest(ServiceError):
    name = "BadRequest"
    code = 400
    class_name = "bad-request"


class NotAuthenticated(ServiceError):
    name = "NotAuthenticated"
    code = 401
    class_name = "not-authenticated"


class PaymentError(ServiceError):
    name = "PaymentError"
    code = 402
    class_name = "payment-error"


class MethodNotAllowed(ServiceError):
    name = "MethodNotAllowed"
    code = 405
    class_name = "method-not-allowed"


class TooManyRequests(ServiceError):
    name = "TooManyRequests"
    code = 429
    class_name = "too-many-requests"


class GeneralError(ServiceError):
    pass


class NotImplementedMethod(ServiceError):
    name = "NotImplemented"
    code = 501
    class_name = "not-implemented"


class Unavailable(ServiceError):
    name = "Unavailable"
    code = 503
    class_name = "unavailable"
