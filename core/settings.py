from typing import Any, Literal, Optional

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from payments.options import Paginate, ServiceOptions

# Load .env file automatically
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Stripe
    STRIPE_API_KEY: str
    STRIPE_MAX_NETWORK_RETRIES: int = 0

    # Pagination (Stripe enforces 100 max and 10 default)
    PAGINATE_DEFAULT: int = 10
    PAGINATE_MAX: int = 100

    # App settings
    APP_NAME: str = "Stripe Adapter Services"
    DEBUG: bool = False
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Observability (Optional)
    METRICS_ENABLED: bool = True
    DISABLE_TRACING: bool = False
    OTEL_SERVICE_NAME: str = "stripe-adapter-services"

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    def service_options(self, stripe_client: Optional[Any] = None) -> ServiceOptions:
        """Build the immutable options shared by every mounted service."""
        return ServiceOptions(
            secret_key=self.STRIPE_API_KEY,
            stripe=stripe_client,
            paginate=Paginate(default=self.PAGINATE_DEFAULT, max=self.PAGINATE_MAX),
            max_network_retries=self.STRIPE_MAX_NETWORK_RETRIES,
        )
