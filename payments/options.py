from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Paginate(BaseModel):
    """Pagination policy for a service. Stripe enforces 100 max and 10 default."""

    model_config = ConfigDict(frozen=True)

    default: Optional[int] = Field(default=10, ge=0)
    max: Optional[int] = Field(default=100, ge=0)


class ServiceOptions(BaseModel):
    """Immutable configuration shared by a service instance.

    Either ``secret_key`` or a pre-built ``stripe`` client handle must be set;
    the adapter checks this when it is constructed. ``paginate=None`` turns
    limit clamping off.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    secret_key: Optional[str] = None
    stripe: Optional[Any] = None
    paginate: Optional[Paginate] = Field(default_factory=Paginate)
    max_network_retries: int = 0
