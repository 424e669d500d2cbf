"""Typed record of one rider's trip as it moves through the booking screens.

The web front-end keeps two session-storage entries, ``tripData`` and
``fareInfo``. TripContext reads and writes exactly those shapes so values
survive a round trip between the browser and the service unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from magical_miles.fare.models import MAX_FARE_AMOUNT, TripEndpoint, TripQuote


class FareInfo(BaseModel):
    total_fare: float = Field(ge=0, le=MAX_FARE_AMOUNT, allow_inf_nan=False)
    members: int
    share_per_person: float
    group_name: str = "Travel Group"

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TripData(BaseModel):
    origin: TripEndpoint
    destination: TripEndpoint

    model_config = ConfigDict(frozen=True)


class TripContext(BaseModel):
    trip_data: TripData
    fare_info: FareInfo | None = None
    quote: TripQuote | None = Field(default=None, exclude=True)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def start(cls, origin: TripEndpoint, destination: TripEndpoint) -> "TripContext":
        return cls(trip_data=TripData(origin=origin, destination=destination))

    def with_quote(self, quote: TripQuote, group_name: str = "Travel Group") -> "TripContext":
        fare_info = FareInfo(
            total_fare=quote.share.total_fare,
            members=quote.share.member_count,
            share_per_person=quote.share.share_per_person,
            group_name=group_name,
        )
        return self.model_copy(update={"fare_info": fare_info, "quote": quote})

    def to_session(self) -> dict[str, Any]:
        """Session-storage entries keyed as the front-end stores them."""
        session: dict[str, Any] = {"tripData": self.trip_data.model_dump(by_alias=True)}
        if self.fare_info is not None:
            session["fareInfo"] = self.fare_info.model_dump(by_alias=True)
        return session

    @classmethod
    def from_session(cls, session: dict[str, Any]) -> "TripContext":
        return cls.model_validate(
            {"tripData": session["tripData"], "fareInfo": session.get("fareInfo")}
        )
