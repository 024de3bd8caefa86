import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

# Force-load .env (Windows-safe, reload-safe)
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
JWT_SECRET = os.getenv("JWT_SECRET", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_REDIRECT_URL = "https://paloverdeprint.netlify.app"


@dataclass(frozen=True)
class GatewayConfig:
    """Everything the Stripe checkout client needs, fixed at construction."""
    secret_key: str
    success_url: str = DEFAULT_REDIRECT_URL
    cancel_url: str = DEFAULT_REDIRECT_URL
    currency: str = "usd"
    mode: str = "payment"


def load_gateway_config() -> GatewayConfig:
    return GatewayConfig(
        secret_key=os.getenv("STRIPE_SECRET_KEY", ""),
        success_url=os.getenv("STRIPE_SUCCESS_URL", DEFAULT_REDIRECT_URL),
        cancel_url=os.getenv("STRIPE_CANCEL_URL", DEFAULT_REDIRECT_URL),
        currency=os.getenv("STRIPE_CURRENCY", "usd"),
    )
