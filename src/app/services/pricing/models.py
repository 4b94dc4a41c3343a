"""Quote domain models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    base: int
    stops_charge: int
    weight_charge: int
    distance_charge: int
    waiting_charge: int
    total: int
    model: str
    note: str


@dataclass(frozen=True, slots=True)
class QuoteResult:
    scheduled: PriceBreakdown
    dedicated: PriceBreakdown
    express: PriceBreakdown
    distance: int
    pickup_radius: float
    stops: int
    weight: float

    def tier(self, name: str) -> PriceBreakdown:
        """Look up a breakdown by tier name ("scheduled", "dedicated" or "express")."""
        if name not in ("scheduled", "dedicated", "express"):
            raise ValueError(f"Unknown service tier '{name}'.")
        return getattr(self, name)
