"""
Service Routes

Mounts a Stripe service as a REST resource. Each HTTP verb maps to one
service verb; unsupported verbs still route and answer 501.
"""

from typing import Any

import stripe
from fastapi import APIRouter, Body, Request, status

from api.query import build_params
from payments.base import StripeAdapter


def to_response(result: Any) -> Any:
    """Plain JSON data for a service result.

    Stripe objects hold their requestor (and with it the API key) as state,
    so they are converted with ``to_dict()`` before FastAPI encodes them.
    """
    if isinstance(result, stripe.StripeObject):
        return to_response(result.to_dict())
    if isinstance(result, dict):
        return {key: to_response(value) for key, value in result.items()}
    if isinstance(result, list):
        return [to_response(item) for item in result]
    return result


def service_router(service: StripeAdapter) -> APIRouter:
    """Build the CRUD routes for a single service."""
    router = APIRouter()

    @router.get("")
    async def find(request: Request):
        return to_response(await service.find(build_params(request.query_params)))

    @router.get("/{id}")
    async def get(id: str, request: Request):
        return to_response(await service.get(id, build_params(request.query_params)))

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create(request: Request, data: dict[str, Any] = Body(...)):
        return to_response(
            await service.create(data, build_params(request.query_params))
        )

    @router.put("/{id}")
    async def update(id: str, request: Request, data: dict[str, Any] = Body(...)):
        return to_response(
            await service.update(id, data, build_params(request.query_params))
        )

    @router.patch("/{id}")
    async def patch(id: str, request: Request, data: dict[str, Any] = Body(...)):
        return to_response(
            await service.patch(id, data, build_params(request.query_params))
        )

    @router.delete("/{id}")
    async def remove(id: str, request: Request):
        return to_response(
            await service.remove(id, build_params(request.query_params))
        )

    return router
