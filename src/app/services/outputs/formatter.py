"""Utilities to serialize quote results into JSON/CSV artifacts."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ..pricing.models import QuoteResult

TIERS = ("scheduled", "dedicated", "express")


def quote_result_to_json(quote: QuoteResult) -> dict:
    return asdict(quote)


def quote_result_to_csv(quote: QuoteResult) -> str:
    """One row per tier, for pasting quotes into spreadsheets."""
    buffer = io.StringIO()
    fieldnames = [
        "tier",
        "model",
        "base",
        "stops_charge",
        "weight_charge",
        "distance_charge",
        "waiting_charge",
        "total",
        "distance_km",
        "stops",
        "weight_kg",
        "note",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for name in TIERS:
        writer.writerow(
            {
                "tier": name,
                **asdict(quote.tier(name)),
                "distance_km": quote.distance,
                "stops": quote.stops,
                "weight_kg": quote.weight,
            }
        )
    return buffer.getvalue()
