"""
Stripe Orders Service

Orders are updated like any other resource, but a truthy ``pay`` flag in
the payload also pays the order. The pay call is awaited before the update
is sent; if paying fails, the error propagates and the order is not updated.
"""

import structlog

from core.errors import ConfigurationError
from core.logging import BusinessEvents
from payments.base import Operation, StripeAdapter

log = structlog.get_logger(__name__)


class OrderService(StripeAdapter):
    resource = "orders"
    operations = frozenset(
        {Operation.FIND, Operation.GET, Operation.CREATE, Operation.UPDATE}
    )

    def __init__(self, options=None, **kwargs):
        super().__init__(options, **kwargs)
        # The Orders API is no longer bundled with the Stripe SDK
        if not hasattr(self.stripe, self.resource):
            raise ConfigurationError(
                "Stripe client does not expose the `orders` API; "
                "pass a `stripe` client handle that does"
            )

    async def _find(self, params=None):
        filtered = self.filter_params(params)
        return await self.handle_paginate(filtered, "list", self.api.list)

    async def _get(self, id, params=None):
        return await self.call(
            "retrieve", self.api.retrieve, id, options=self.request_options(params)
        )

    async def _create(self, data, params=None):
        return await self.call(
            "create", self.api.create, params=data, options=self.request_options(params)
        )

    async def _update(self, id, data, params=None):
        options = self.request_options(params)
        payload = {key: value for key, value in data.items() if key != "pay"}

        if data.get("pay"):
            log.info(BusinessEvents.ORDER_PAY, order_id=id)
            await self.call("pay", self.api.pay, id, params=payload, options=options)

        return await self.call(
            "update", self.api.update, id, params=payload, options=options
        )
