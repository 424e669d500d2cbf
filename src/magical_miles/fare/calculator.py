"""Fare pricing and group cost sharing.

Pure functions: no I/O, no validation beyond the member-count guard. Callers
clamp negative or NaN distances/durations before pricing.
"""

from dataclasses import dataclass

from magical_miles.fare.models import FareBreakdown, GroupShare
from magical_miles.fare.rounding import round_currency


@dataclass(frozen=True)
class Tariff:
    base_fare: float = 2.0
    per_km_rate: float = 1.5
    per_min_rate: float = 0.5


DEFAULT_TARIFF = Tariff()

# Shown when either endpoint has no coordinates and no distance can be derived.
DEFAULT_FARE_BREAKDOWN = FareBreakdown(
    total_fare=20,
    base_fare=2,
    distance_charge=15,
    time_charge=3,
)


def estimate_fare(
    distance_km: float,
    duration_min: float,
    tariff: Tariff = DEFAULT_TARIFF,
) -> FareBreakdown:
    """Price a trip from its distance and duration.

    Each charge is rounded on its own, and the total is rounded from the
    unrounded sum of the components. The two orderings can differ by a cent;
    ``total_fare`` is authoritative for display and payment.

    Args:
        distance_km: Trip distance in kilometers
        duration_min: Trip duration in minutes
        tariff: Base fare and per-km/per-minute rates

    Returns:
        FareBreakdown with every amount rounded to two decimals
    """
    distance_charge = distance_km * tariff.per_km_rate
    time_charge = duration_min * tariff.per_min_rate
    total_fare = tariff.base_fare + distance_charge + time_charge

    return FareBreakdown(
        base_fare=round_currency(tariff.base_fare),
        distance_charge=round_currency(distance_charge),
        time_charge=round_currency(time_charge),
        total_fare=round_currency(total_fare),
    )


def calculate_share(total_fare: float, member_count: int) -> float:
    """Split a fare evenly between group members.

    A non-positive member count is a degenerate input: the whole fare is
    returned as the share rather than raising.
    """
    if member_count <= 0:
        return total_fare
    return round_currency(total_fare / member_count)


def build_group_share(total_fare: float, member_count: int) -> GroupShare:
    return GroupShare(
        total_fare=total_fare,
        member_count=member_count,
        share_per_person=calculate_share(total_fare, member_count),
    )
