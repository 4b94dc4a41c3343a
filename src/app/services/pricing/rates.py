"""Rate table for the three service tiers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PricingRates:
    currency_symbol: str = "₹"
    rounding_step: int = 10

    # Scheduled line route
    scheduled_base: int = 100
    scheduled_per_stop: int = 25
    scheduled_per_kg: float = 1.20
    scheduled_minimum: int = 180
    scheduled_local_threshold_km: float = 3
    scheduled_local_base: int = 100
    scheduled_local_per_kg: float = 0.50
    # Service parameters, shown in notes only
    scheduled_route_days: str = "Mon/Wed/Fri/Sat"
    scheduled_cutoff: str = "previous day 8 PM"
    scheduled_delivery_window: str = "11 AM – 3 PM"
    scheduled_max_zone_km: int = 60

    # Dedicated single drop (round trip)
    single_flat_limit_km: float = 5
    single_flat_rate: int = 200
    single_base: int = 100
    single_per_km: int = 15

    # Dedicated multi-stop: local (<3 km from hub and route)
    local_threshold_km: float = 3
    local_base: int = 200
    local_extra_stop: int = 25

    # Dedicated multi-stop: medium (3-10 km route)
    medium_upper_km: float = 10
    medium_base: int = 200
    medium_extra_stop: int = 25
    medium_per_km: int = 15

    # Dedicated multi-stop: outside (>10 km route)
    outside_base: int = 150
    outside_per_km: int = 15
    outside_free_wait_hours: float = 1
    outside_wait_per_hour: int = 200

    # Waiting for all other dedicated bands
    free_wait_hours: float = 1
    wait_per_hour: int = 200

    express_multiplier: float = 1.7


DEFAULT_RATES = PricingRates()
