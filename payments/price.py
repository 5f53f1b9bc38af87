from payments.base import Operation, StripeAdapter


class PriceService(StripeAdapter):
    resource = "prices"
    operations = frozenset(
        {Operation.FIND, Operation.GET, Operation.CREATE, Operation.UPDATE}
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
