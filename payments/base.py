"""
Stripe Service Adapter

Base class for the CRUD-style Stripe services. It handles:
- Option validation and Stripe client construction
- Query cleaning and pagination limit clamping
- Collecting every page when pagination is disabled
- Translating Stripe errors into service errors
"""

import math
from enum import Enum
from typing import Any, Optional

import stripe
import structlog
from starlette.concurrency import run_in_threadpool

from core.errors import ConfigurationError, MethodNotAllowed, NotImplementedMethod
from core.logging import BusinessEvents
from core.metrics import stripe_requests
from core.tracing import get_tracer
from payments.error_handler import error_handler
from payments.normalize_query import clean_query
from payments.options import ServiceOptions

log = structlog.get_logger(__name__)


class Operation(str, Enum):
    FIND = "find"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    PATCH = "patch"
    REMOVE = "remove"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not (
        isinstance(value, float) and math.isnan(value)
    )


class StripeAdapter:
    """Adapter exposing one Stripe resource through find/get/create/update/patch/remove.

    Subclasses name the Stripe client service they wrap in ``resource`` and
    list the verbs they support in ``operations``; each listed verb must have
    its ``_<verb>`` implementation. Verbs outside ``operations`` fail with
    ``NotImplementedMethod``.
    """

    resource: str = ""
    operations: frozenset[Operation] = frozenset()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for operation in cls.operations:
            slot = f"_{operation.value}"
            if getattr(cls, slot) is getattr(StripeAdapter, slot):
                raise TypeError(
                    f"{cls.__name__} declares '{operation.value}' but does not implement {slot}"
                )

    def __init__(self, options: Optional[ServiceOptions] = None, **kwargs):
        if options is None:
            options = ServiceOptions(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a ServiceOptions instance or keyword options")

        if not options.secret_key and options.stripe is None:
            raise ConfigurationError(
                "Stripe service option `secret_key` or `stripe` needs to be provided"
            )

        self.options = options
        if options.stripe is not None:
            self.stripe = options.stripe
        else:
            self.stripe = stripe.StripeClient(
                options.secret_key, max_network_retries=options.max_network_retries
            )

    @property
    def api(self):
        """The Stripe client service for this resource."""
        return getattr(self.stripe, self.resource)

    # Public verbs

    async def find(self, params: Optional[dict] = None):
        return await self._dispatch(Operation.FIND, self._find, params)

    async def get(self, id: str, params: Optional[dict] = None):
        return await self._dispatch(Operation.GET, self._get, id, params)

    async def create(self, data: dict, params: Optional[dict] = None):
        return await self._dispatch(Operation.CREATE, self._create, data, params)

    async def update(self, id: str, data: dict, params: Optional[dict] = None):
        return await self._dispatch(Operation.UPDATE, self._update, id, data, params)

    async def patch(self, id: str, data: dict, params: Optional[dict] = None):
        # Resources without a distinct patch call fall back to update
        if Operation.PATCH in self.operations:
            return await self._dispatch(Operation.PATCH, self._patch, id, data, params)
        if Operation.UPDATE in self.operations:
            return await self._dispatch(Operation.UPDATE, self._update, id, data, params)
        return await self._dispatch(Operation.PATCH, self._patch, id, data, params)

    async def remove(self, id: str, params: Optional[dict] = None):
        return await self._dispatch(Operation.REMOVE, self._remove, id, params)

    # Operation slots, overridden by the services that support them

    async def _find(self, params=None):
        raise NotImplementedMethod("Find method not implemented")

    async def _get(self, id, params=None):
        raise NotImplementedMethod("Get method not implemented")

    async def _create(self, data, params=None):
        raise NotImplementedMethod("Create method not implemented")

    async def _update(self, id, data, params=None):
        raise NotImplementedMethod("Update method not implemented")

    async def _patch(self, id, data, params=None):
        raise NotImplementedMethod("Patch method not implemented")

    async def _remove(self, id, params=None):
        raise NotImplementedMethod("Remove method not implemented")

    async def _dispatch(self, operation: Operation, handler, *args):
        if operation not in self.operations:
            log.info(
                BusinessEvents.SERVICE_NOT_IMPLEMENTED,
                resource=self.resource,
                operation=operation.value,
            )
            raise NotImplementedMethod(
                f"{operation.value.capitalize()} method not implemented"
            )
        try:
            return await handler(*args)
        except Exception as exc:
            error_handler(exc)

    # Query and pagination handling

    def get_limit(self, limit: Any, params_paginate: Any = None):
        """Clamp a requested page size to the pagination policy.

        With pagination disabled the requested limit is sent as is; Stripe
        itself rejects a limit above 100 with an invalid request error.
        """
        if params_paginate is False:
            return limit

        paginate = self.options.paginate
        if paginate and (paginate.default or paginate.max):
            base = paginate.default or 0
            lower = limit if _is_number(limit) else base
            upper = paginate.max if _is_number(paginate.max) else math.inf
            return min(lower, upper)
        return limit

    def clean_query(self, query: Any) -> Any:
        return clean_query(query)

    def filter_query(self, params: Optional[dict] = None) -> dict:
        params = params or {}
        query = dict(params.get("query") or {})
        paginate = params.get("paginate")

        limit = query.pop("$limit", None)
        if limit is None:
            limit = query.get("limit")
        if limit is None and paginate is not False and self.options.paginate:
            limit = self.options.paginate.default
        if limit is not None:
            query["limit"] = self.get_limit(limit, paginate)

        return self.clean_query(query)

    def filter_params(self, params: Optional[dict] = None) -> dict:
        params = params or {}
        return {
            "query": self.filter_query(params),
            "stripe": params.get("stripe"),
            "paginate": params.get("paginate") is not False,
        }

    async def handle_paginate(self, filtered: dict, operation: str, method, *args):
        """Return one page, or every record when pagination is disabled."""
        page = await self.call(
            operation,
            method,
            *args,
            params=filtered["query"],
            options=filtered["stripe"],
        )
        if filtered["paginate"]:
            return page

        if hasattr(page, "auto_paging_iter"):
            # Stripe sizes each fetched chunk by the query's limit (10 when unset)
            return await run_in_threadpool(lambda: list(page.auto_paging_iter()))

        raise MethodNotAllowed("Cannot use paginate: false on this method")

    # Stripe calls

    def request_options(self, params: Optional[dict] = None) -> Optional[dict]:
        """Per-request Stripe options, e.g. ``{"stripe_account": "acct_..."}``."""
        return (params or {}).get("stripe")

    async def call(self, operation: str, method, *args, params=None, options=None):
        """Run a synchronous Stripe client method in the threadpool."""
        kwargs = {}
        if params is not None:
            kwargs["params"] = params
        if options:
            kwargs["options"] = options

        log.debug(
            BusinessEvents.STRIPE_REQUEST,
            resource=self.resource,
            operation=operation,
        )
        stripe_requests.labels(resource=self.resource, operation=operation).inc()

        with get_tracer().start_as_current_span(f"stripe.{self.resource}.{operation}"):
            return await run_in_threadpool(method, *args, **kwargs)
