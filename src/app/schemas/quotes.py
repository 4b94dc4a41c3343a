"""Quote request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import TripShape, Waypoint

ServiceTier = Literal["scheduled", "dedicated", "express"]


class LatLngModel(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    def to_waypoint(self) -> Waypoint:
        return Waypoint(latitude=self.lat, longitude=self.lng)


class PriceQuoteRequest(BaseModel):
    """Price a trip whose distances are already known."""
    distance_km: float = Field(..., ge=0, description="One-way road distance of the whole route.")
    hub_distance_km: float = Field(0.0, ge=0, description="Road distance from pickup to the hub.")
    stops: int = Field(1, ge=1, description="Delivery stops including the final destination.")
    weight_kg: float = Field(0.0, ge=0)
    waiting_hours: float = Field(1.0, ge=0)
    delivery_type: Optional[TripShape] = None


class TripQuoteRequest(BaseModel):
    """Price a trip from its coordinates; distances are resolved server-side."""
    delivery_type: TripShape = TripShape.SINGLE
    pickup: Optional[LatLngModel] = None
    drop: Optional[LatLngModel] = Field(default=None, description="Destination of a single-drop trip.")
    stops: List[LatLngModel] = Field(
        default_factory=list,
        description="Intermediate stops of a multi-stop trip, in visiting order.",
    )
    end: Optional[LatLngModel] = Field(default=None, description="Final destination of a multi-stop trip.")
    weight_kg: float = Field(0.0, ge=0)
    waiting_hours: float = Field(1.0, ge=0)


class BookingMessageRequest(TripQuoteRequest):
    tier: ServiceTier
    pickup_label: str = ""
    drop_label: str = Field(default="", description="Drop location for single trips, end location otherwise.")
    stop_labels: List[str] = Field(default_factory=list)


class PriceBreakdownModel(BaseModel):
    base: int
    stops_charge: int
    weight_charge: int
    distance_charge: int
    waiting_charge: int
    total: int
    model: str
    note: str


class QuoteResultModel(BaseModel):
    scheduled: PriceBreakdownModel
    dedicated: PriceBreakdownModel
    express: PriceBreakdownModel
    distance: int
    pickup_radius: float
    stops: int
    weight: float


class TripQuoteResponse(BaseModel):
    quote: QuoteResultModel
    metadata: dict


class BookingMessageResponse(BaseModel):
    quote: QuoteResultModel
    tier: ServiceTier
    message: str
    link: str
    metadata: dict
