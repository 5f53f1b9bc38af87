"""Stripe resources exposed as CRUD-style services."""

from payments.base import Operation, StripeAdapter
from payments.error_handler import StripeErrorType, error_handler, translate_error
from payments.normalize_query import clean_query, normalize_query
from payments.options import Paginate, ServiceOptions
from payments.order import OrderService
from payments.price import PriceService
from payments.transfer import TransferService

__all__ = [
    "Operation",
    "OrderService",
    "Paginate",
    "PriceService",
    "ServiceOptions",
    "StripeAdapter",
    "StripeErrorType",
    "TransferService",
    "clean_query",
    "error_handler",
    "normalize_query",
    "translate_error",
]
