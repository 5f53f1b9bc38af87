"""
Stripe error translation.

Maps the error types Stripe reports onto the service error categories in
``core.errors``. The mapping is closed: every ``StripeErrorType`` has an
entry, and anything else becomes a ``GeneralError``.
"""

from enum import Enum
from typing import Any, Optional

import stripe
import structlog

from core.errors import (
    BadRequest,
    GeneralError,
    NotAuthenticated,
    PaymentError,
    ServiceError,
    TooManyRequests,
    Unavailable,
)
from core.logging import BusinessEvents
from core.metrics import gateway_errors

log = structlog.get_logger(__name__)

UNKNOWN_GATEWAY_ERROR = "Unknown Payment Gateway Error"


class StripeErrorType(str, Enum):
    CARD = "StripeCardError"
    INVALID_REQUEST = "StripeInvalidRequestError"
    INVALID_REQUEST_LEGACY = "StripeInvalidRequest"
    API = "StripeAPIError"
    CONNECTION = "StripeConnectionError"
    AUTHENTICATION = "StripeAuthenticationError"
    RATE_LIMIT = "StripeRateLimitError"


ERROR_CATEGORIES: dict[StripeErrorType, type[ServiceError]] = {
    # A declined card
    StripeErrorType.CARD: PaymentError,
    # Invalid parameters were supplied to Stripe's API
    StripeErrorType.INVALID_REQUEST: BadRequest,
    StripeErrorType.INVALID_REQUEST_LEGACY: BadRequest,
    # An error occurred internally with Stripe's API
    StripeErrorType.API: Unavailable,
    # The HTTPS communication with Stripe failed
    StripeErrorType.CONNECTION: Unavailable,
    # Probably an incorrect API key
    StripeErrorType.AUTHENTICATION: NotAuthenticated,
    StripeErrorType.RATE_LIMIT: TooManyRequests,
}

# The Python SDK raises typed exceptions instead of tagging a ``type`` string.
# First match wins.
SDK_ERROR_TYPES: tuple[tuple[type[Exception], StripeErrorType], ...] = (
    (stripe.CardError, StripeErrorType.CARD),
    (stripe.RateLimitError, StripeErrorType.RATE_LIMIT),
    (stripe.InvalidRequestError, StripeErrorType.INVALID_REQUEST),
    (stripe.AuthenticationError, StripeErrorType.AUTHENTICATION),
    (stripe.APIConnectionError, StripeErrorType.CONNECTION),
    (stripe.APIError, StripeErrorType.API),
)


def error_type(error: Any) -> Optional[str]:
    """Return the Stripe type discriminator of an error, if it has one."""
    for exc_class, member in SDK_ERROR_TYPES:
        if isinstance(error, exc_class):
            return member.value
    if isinstance(error, dict):
        return error.get("type")
    discriminator = getattr(error, "type", None)
    return discriminator if isinstance(discriminator, str) else None


def translate_error(error: Any) -> ServiceError:
    """Translate a Stripe error into its service error category."""
    if isinstance(error, ServiceError):
        return error

    discriminator = error_type(error)
    try:
        category = ERROR_CATEGORIES[StripeErrorType(discriminator)]
    except ValueError:
        translated = GeneralError(UNKNOWN_GATEWAY_ERROR, error)
    else:
        translated = category(error, error)

    log.warning(
        BusinessEvents.STRIPE_ERROR,
        category=translated.name,
        stripe_type=discriminator,
        error=str(error),
    )
    gateway_errors.labels(category=translated.name).inc()
    return translated


def error_handler(error: Any):
    """Raise the service error for a Stripe error."""
    translated = translate_error(error)
    if isinstance(error, BaseException) and translated is not error:
        raise translated from error
    raise translated
