"""Payment gateway adapters"""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from ..core.config import Settings

logger = logging.getLogger(__name__)


class PaymentOutcome(str, Enum):
    """Terminal result of a charge"""
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class PaymentResult:
    """Result of a single charge attempt"""
    outcome: PaymentOutcome
    amount: float
    reference: str
    transaction_id: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome == PaymentOutcome.SUCCEEDED


class PaymentGateway(Protocol):
    name: str

    async def charge(self, amount: float, reference: str) -> PaymentResult: ...


class MockPaymentGateway:
    """Simulated gateway: waits, then approves every charge"""

    name = "mock"

    def __init__(self, delay_seconds: float = 2.0) -> None:
        self.delay_seconds = delay_seconds

    async def charge(self, amount: float, reference: str) -> PaymentResult:
        await asyncio.sleep(self.delay_seconds)
        transaction_id = f"txn_{uuid.uuid4().hex[:10]}"
        logger.debug(f"Mock gateway approved {amount} for {reference}: {transaction_id}")
        return PaymentResult(
            outcome=PaymentOutcome.SUCCEEDED,
            amount=amount,
            reference=reference,
            transaction_id=transaction_id,
        )


def get_payment_gateway(settings: Settings) -> PaymentGateway:
    """Select a gateway by name from settings"""
    mode = settings.payment_gateway.strip().lower()

    if mode == "mock":
        return MockPaymentGateway(delay_seconds=settings.payment_delay_seconds)

    raise ValueError(f"Unknown payment gateway {mode!r}. Expected mock.")
