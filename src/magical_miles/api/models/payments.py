from typing import Literal

from pydantic import Field

from magical_miles.api.models.base import CamelModel
from magical_miles.trip_context import FareInfo


class PaymentRequest(CamelModel):
    fare_info: FareInfo
    method: Literal["googlepay", "mock"] = Field(default="mock")
