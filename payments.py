"""Stripe Checkout pass-through.

Creates a one-off card payment session for a single line item and hands the
session id and hosted-page URL back unchanged. Nothing is stored locally and
the amount is not checked; Stripe is the one that accepts or rejects it.
"""
import logging
from dataclasses import dataclass

import stripe

from config import Settings

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Stripe is not configured. Please add STRIPE_SECRET_KEY to environment variables."


class PaymentNotConfigured(Exception):
    def __init__(self, message: str = NOT_CONFIGURED_MESSAGE):
        self.message = message
        super().__init__(message)


class PaymentError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class CheckoutSession:
    id: str
    url: str | None


def create_checkout_session(
    settings: Settings,
    amount: int,
    currency: str = "usd",
    name: str = "Support My Work",
) -> CheckoutSession:
    """Create a Stripe Checkout Session for ``amount`` minor units of ``currency``.

    Raises PaymentNotConfigured before any network call when no secret key is
    set, and PaymentError with Stripe's own message when the call fails.
    """
    if not settings.payments_enabled:
        logger.error("Stripe not configured - STRIPE_SECRET_KEY is missing")
        raise PaymentNotConfigured()

    try:
        session = stripe.checkout.Session.create(
            api_key=settings.stripe_secret_key,
            payment_method_types=["card"],
            line_items=[
                {
                    "price_data": {
                        "currency": currency,
                        "product_data": {"name": name},
                        "unit_amount": amount,
                    },
                    "quantity": 1,
                }
            ],
            mode="payment",
            success_url=f"{settings.app_url}/?success=true",
            cancel_url=f"{settings.app_url}/?canceled=true",
        )
    except stripe.StripeError as error:
        logger.error("Stripe error: %s", error)
        raise PaymentError(error.user_message or str(error)) from error

    return CheckoutSession(id=session.id, url=session.url)
