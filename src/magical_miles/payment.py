"""Payment of a rider's fare share.

The wallet itself is an external capability; this module only shapes the
request, talks to a provider and keeps the session's receipts.
"""

import asyncio
import logging
import time
from datetime import UTC, datetime
from enum import Enum
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from magical_miles.fare.models import GroupShare

logger = logging.getLogger(__name__)


class PaymentStatus(str, Enum):
    SUCCESS = "success"
    CANCELLED = "cancelled"
    ERROR = "error"


class PaymentResult(BaseModel):
    """Outcome reported by a payment provider."""

    status: PaymentStatus
    transaction_id: str | None = None
    amount: float = Field(ge=0)
    description: str
    timestamp: str
    mock: bool = False
    error: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @property
    def success(self) -> bool:
        return self.status == PaymentStatus.SUCCESS


class PaymentProvider(Protocol):
    async def process(self, amount: float, description: str) -> PaymentResult: ...


class MockPaymentProvider:
    """Always-approving wallet used when no real provider is configured."""

    def __init__(self, delay_seconds: float = 1.5) -> None:
        self.delay_seconds = delay_seconds

    async def process(self, amount: float, description: str) -> PaymentResult:
        await asyncio.sleep(self.delay_seconds)
        return PaymentResult(
            status=PaymentStatus.SUCCESS,
            transaction_id=f"MOCK_{int(time.time() * 1000)}",
            amount=amount,
            description=description,
            timestamp=datetime.now(UTC).isoformat(),
            mock=True,
        )


def payment_description(group_name: str, members: int) -> str:
    return f"{group_name} - Share for {members} wizards"


class PaymentService:
    def __init__(self, providers: dict[str, PaymentProvider]) -> None:
        self.providers = providers
        self._receipts: list[PaymentResult] = []

    @property
    def methods(self) -> list[str]:
        return sorted(self.providers)

    async def pay_share(
        self,
        share: GroupShare,
        group_name: str = "Travel Group",
        method: Literal["googlepay", "mock"] = "mock",
    ) -> PaymentResult:
        description = payment_description(group_name, share.member_count)
        provider = self.providers.get(method)
        if provider is None:
            logger.warning(f"Payment method {method!r} not configured")
            return PaymentResult(
                status=PaymentStatus.ERROR,
                amount=share.share_per_person,
                description=description,
                timestamp=datetime.now(UTC).isoformat(),
                error=f"Payment method {method} unavailable",
            )

        result = await provider.process(share.share_per_person, description)
        if result.success:
            self._receipts.append(result)
            logger.info(f"Payment {result.transaction_id} settled ({result.amount:.2f})")
        else:
            logger.info(f"Payment not completed: {result.status.value}")
        return result

    def history(self) -> list[PaymentResult]:
        return list(self._receipts)
