"""
API Routes Package

Mounts every Stripe service under its resource name.
"""

import structlog
from fastapi import APIRouter

from core.errors import ConfigurationError
from payments import OrderService, PriceService, ServiceOptions, TransferService

from .services import service_router

log = structlog.get_logger(__name__)

SERVICES = {
    "transfers": TransferService,
    "prices": PriceService,
    "orders": OrderService,
}


def build_router(options: ServiceOptions) -> APIRouter:
    """Create the router holding one sub-router per available service."""
    router = APIRouter()
    for name, service_class in SERVICES.items():
        try:
            service = service_class(options)
        except ConfigurationError as exc:
            log.warning("service.disabled", service=name, error=str(exc))
            continue
        router.include_router(service_router(service), prefix=f"/{name}", tags=[name])
    return router


__all__ = ["SERVICES", "build_router"]
