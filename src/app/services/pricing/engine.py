"""Quote pricing for the scheduled, dedicated and express service tiers.

All functions here are pure: the same inputs always produce the same quote.
Inputs are trusted to have been validated by the caller.
"""

from __future__ import annotations

from dataclasses import replace

from ...models.domain import TripShape
from ..rounding import round_half_up, round_to_step
from .models import PriceBreakdown, QuoteResult
from .rates import DEFAULT_RATES, PricingRates

SCHEDULED_MODEL = "Scheduled Line Route"
EXPRESS_MODEL = "Express (Priority)"


def _hours(value: float) -> str:
    return f"{value:g}"


def _waiting(waiting_hours: float, free_hours: float, per_hour: int) -> tuple[float, int]:
    extra_hours = max(0.0, waiting_hours - free_hours)
    return extra_hours, round_half_up(extra_hours * per_hour)


def is_single_drop(stops: int, trip_shape: TripShape | None) -> bool:
    return trip_shape == TripShape.SINGLE or stops <= 1


def calculate_scheduled(
    stops: int, weight_kg: float, distance_km: float, rates: PricingRates = DEFAULT_RATES
) -> PriceBreakdown:
    cur = rates.currency_symbol
    schedule = (
        f"{rates.scheduled_route_days}, book by {rates.scheduled_cutoff}. "
        f"Delivery {rates.scheduled_delivery_window}."
    )

    if distance_km < rates.scheduled_local_threshold_km:
        weight_charge = weight_kg * rates.scheduled_local_per_kg
        return PriceBreakdown(
            base=rates.scheduled_local_base,
            stops_charge=0,
            weight_charge=round_half_up(weight_charge),
            distance_charge=0,
            waiting_charge=0,
            total=round_to_step(rates.scheduled_local_base + weight_charge, rates.rounding_step),
            model=SCHEDULED_MODEL,
            note=f"Local delivery (under {rates.scheduled_local_threshold_km:g} km) flat rate. {schedule}",
        )

    weight_charge = weight_kg * rates.scheduled_per_kg
    stops_charge = round_half_up(stops * rates.scheduled_per_stop)
    subtotal = rates.scheduled_base + stops_charge + weight_charge
    min_applied = subtotal < rates.scheduled_minimum
    total = round_to_step(max(subtotal, rates.scheduled_minimum), rates.rounding_step)

    zone = f"Max {rates.scheduled_max_zone_km} km zone."
    if min_applied:
        note = f"Minimum {cur}{rates.scheduled_minimum} applied. {schedule} {zone}"
    else:
        note = (
            f"{rates.scheduled_route_days} schedule. Book by {rates.scheduled_cutoff}. "
            f"Delivery {rates.scheduled_delivery_window}. {zone}"
        )

    return PriceBreakdown(
        base=rates.scheduled_base,
        stops_charge=stops_charge,
        weight_charge=round_half_up(weight_charge),
        distance_charge=0,
        waiting_charge=0,
        total=total,
        model=SCHEDULED_MODEL,
        note=note,
    )


def calculate_dedicated(
    one_way_km: float,
    hub_distance_km: float,
    stops: int,
    waiting_hours: float,
    trip_shape: TripShape | None,
    rates: PricingRates = DEFAULT_RATES,
) -> PriceBreakdown:
    cur = rates.currency_symbol
    single = is_single_drop(stops, trip_shape)
    # Single drops are priced as a round trip
    route_km = one_way_km * 2 if single else one_way_km
    if single:
        dist_label = f"{one_way_km:g} km × 2 (round trip) = {route_km:g} km"
    else:
        dist_label = f"{one_way_km:g} km (total route)"

    if single:
        extra_hours, waiting_charge = _waiting(waiting_hours, rates.free_wait_hours, rates.wait_per_hour)
        if waiting_charge > 0:
            wait_note = f" Waiting: {_hours(extra_hours)}h × {cur}{rates.wait_per_hour}/hr."
        else:
            wait_note = (
                f" First {_hours(rates.free_wait_hours)} hour free, {cur}{rates.wait_per_hour}/hr extra."
            )

        if one_way_km <= rates.single_flat_limit_km:
            return PriceBreakdown(
                base=rates.single_flat_rate,
                stops_charge=0,
                weight_charge=0,
                distance_charge=0,
                waiting_charge=waiting_charge,
                total=rates.single_flat_rate + waiting_charge,
                model="Dedicated - Single Drop",
                note=f"Within {rates.single_flat_limit_km:g} km, standard {cur}{rates.single_flat_rate}." + wait_note,
            )

        distance_charge = round_half_up(route_km * rates.single_per_km)
        return PriceBreakdown(
            base=rates.single_base,
            stops_charge=0,
            weight_charge=0,
            distance_charge=distance_charge,
            waiting_charge=waiting_charge,
            total=rates.single_base + distance_charge + waiting_charge,
            model="Dedicated - Single Drop",
            note=f"{dist_label} × {cur}{rates.single_per_km}/km." + wait_note,
        )

    extra_stops = max(0, stops - 1)

    if hub_distance_km < rates.local_threshold_km and one_way_km < rates.local_threshold_km:
        stops_charge = round_half_up(extra_stops * rates.local_extra_stop)
        extra_hours, waiting_charge = _waiting(waiting_hours, rates.free_wait_hours, rates.wait_per_hour)
        prefix = f"Within {rates.local_threshold_km:g} km."
        if waiting_charge > 0:
            note = f"{prefix} Waiting: {_hours(extra_hours)}h × {cur}{rates.wait_per_hour}/hr."
        else:
            note = f"{prefix} First {_hours(rates.free_wait_hours)} hour free, {cur}{rates.wait_per_hour}/hour extra."
        return PriceBreakdown(
            base=rates.local_base,
            stops_charge=stops_charge,
            weight_charge=0,
            distance_charge=0,
            waiting_charge=waiting_charge,
            total=rates.local_base + stops_charge + waiting_charge,
            model="Dedicated - Local",
            note=note,
        )

    if rates.local_threshold_km <= one_way_km <= rates.medium_upper_km:
        stops_charge = round_half_up(extra_stops * rates.medium_extra_stop)
        distance_charge = round_half_up(route_km * rates.medium_per_km)
        extra_hours, waiting_charge = _waiting(waiting_hours, rates.free_wait_hours, rates.wait_per_hour)
        if waiting_charge > 0:
            wait_note = f" Waiting: {_hours(extra_hours)}h × {cur}{rates.wait_per_hour}/hr."
        else:
            wait_note = f" First {_hours(rates.free_wait_hours)} hour free."
        return PriceBreakdown(
            base=rates.medium_base,
            stops_charge=stops_charge,
            weight_charge=0,
            distance_charge=distance_charge,
            waiting_charge=waiting_charge,
            total=rates.medium_base + stops_charge + distance_charge + waiting_charge,
            model="Dedicated - Medium",
            note=f"{dist_label} × {cur}{rates.medium_per_km}/km." + wait_note,
        )

    # Everything else, including short routes from a pickup far from the hub
    distance_charge = round_half_up(route_km * rates.outside_per_km)
    extra_hours, waiting_charge = _waiting(
        waiting_hours, rates.outside_free_wait_hours, rates.outside_wait_per_hour
    )
    if waiting_charge > 0:
        wait_note = f" Waiting: {_hours(extra_hours)}h × {cur}{rates.outside_wait_per_hour}."
    else:
        wait_note = f" First {_hours(rates.outside_free_wait_hours)} hour free."
    return PriceBreakdown(
        base=rates.outside_base,
        stops_charge=0,
        weight_charge=0,
        distance_charge=distance_charge,
        waiting_charge=waiting_charge,
        total=rates.outside_base + distance_charge + waiting_charge,
        model="Dedicated - Outside",
        note=f"{dist_label} × {cur}{rates.outside_per_km}/km." + wait_note,
    )


def calculate_express(scheduled: PriceBreakdown, rates: PricingRates = DEFAULT_RATES) -> PriceBreakdown:
    """Priority overlay on the scheduled tier; only the total and labels change."""
    return replace(
        scheduled,
        total=round_to_step(scheduled.total * rates.express_multiplier, rates.rounding_step),
        model=EXPRESS_MODEL,
        note=f"{rates.express_multiplier:g}× scheduled rate. Same-day priority delivery.",
    )


def compute_quote(
    distance_km: float,
    hub_distance_km: float,
    stops: int,
    weight_kg: float,
    waiting_hours: float,
    trip_shape: TripShape | None = None,
    rates: PricingRates = DEFAULT_RATES,
) -> QuoteResult:
    """Price a trip under all three service tiers.

    Args:
        distance_km: One-way road distance of the whole route, rounded to whole km; anything below 1 is priced as 1 km.
        hub_distance_km: Road distance from the pickup to the hub.
        stops: Delivery stops including the final destination (1 for single drops).
        weight_kg: Cargo weight.
        waiting_hours: Expected waiting time at the destination.
        trip_shape: ``single`` trips are priced as a round trip on the dedicated tier.
        rates: Rate table to price with.
    """
    distance_km = max(round_half_up(distance_km), 1)

    scheduled = calculate_scheduled(stops, weight_kg, distance_km, rates)
    dedicated = calculate_dedicated(distance_km, hub_distance_km, stops, waiting_hours, trip_shape, rates)
    express = calculate_express(scheduled, rates)

    return QuoteResult(
        scheduled=scheduled,
        dedicated=dedicated,
        express=express,
        distance=distance_km,
        pickup_radius=hub_distance_km,
        stops=stops,
        weight=weight_kg,
    )
