from payments.base import Operation, StripeAdapter
from payments.normalize_query import normalize_query


class TransferService(StripeAdapter):
    """Stripe transfers. Removing a transfer reverses it."""

    resource = "transfers"
    operations = frozenset(
        {
            Operation.FIND,
            Operation.GET,
            Operation.CREATE,
            Operation.UPDATE,
            Operation.REMOVE,
        }
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
        return await self.call(
            "update",
            self.api.update,
            id,
            params=data,
            options=self.request_options(params),
        )

    async def _remove(self, id, params=None):
        # Partial reversals pass e.g. {"amount": 500} in the query
        return await self.call(
            "create_reversal",
            self.api.reversals.create,
            id,
            params=normalize_query(params) or None,
            options=self.request_options(params),
        )
