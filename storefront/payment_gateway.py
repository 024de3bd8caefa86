from dataclasses import dataclass
from typing import Any, Dict, List

import stripe

from storefront.config import GatewayConfig, load_gateway_config


@dataclass(frozen=True)
class PaymentSession:
    id: str
    amount_total: int
    url: str


class PaymentGateway:
    """Stripe Checkout adapter. Holds its own config instead of the global api_key."""

    def __init__(self, config: GatewayConfig):
        self.config = config

    def create_checkout_session(self, line_items: List[Dict[str, Any]]) -> PaymentSession:
        # no idempotency key: a retried call opens a second session
        session = stripe.checkout.Session.create(
            api_key=self.config.secret_key,
            line_items=line_items,
            mode=self.config.mode,
            success_url=self.config.success_url,
            cancel_url=self.config.cancel_url,
        )
        return PaymentSession(
            id=session.id,
            amount_total=session.amount_total,
            url=session.url,
        )


def get_payment_gateway() -> PaymentGateway:
    return PaymentGateway(load_gateway_config())
