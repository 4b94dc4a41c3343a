"""Plain-text booking requests built from a priced quote."""

from __future__ import annotations

import string
from typing import Sequence
from urllib.parse import quote as url_quote

from ...config import settings
from ...models.domain import TripShape
from ..pricing.models import QuoteResult
from ..pricing.rates import DEFAULT_RATES


def _stop_letter(index: int) -> str:
    return string.ascii_uppercase[index] if index < 26 else str(index + 1)


def _format_hours(hours: float) -> str:
    return f"{hours:g}"


def _distance_line(quote: QuoteResult, shape: TripShape) -> str:
    distance = f"{quote.distance:g}"
    if shape == TripShape.SINGLE:
        return f"Distance: {distance} km ({distance} km × 2 = {quote.distance * 2:g} km round trip)"
    return f"Distance: {distance} km (total route)"


def build_booking_message(
    quote: QuoteResult,
    tier: str,
    pickup_label: str,
    drop_label: str,
    stop_labels: Sequence[str] = (),
    waiting_hours: float = 0,
    shape: TripShape = TripShape.SINGLE,
) -> str:
    """Render the booking request a customer sends for the selected tier.

    Raises:
        ValueError: ``tier`` is not one of the quoted tiers.
    """
    selected = quote.tier(tier)
    cur = DEFAULT_RATES.currency_symbol

    lines = ["Book Trip", "", f"Pickup: {pickup_label}"]
    if shape == TripShape.MULTIPLE and stop_labels:
        lines.append("Stops:")
        lines.extend(f"  Stop {_stop_letter(index)}: {label}" for index, label in enumerate(stop_labels))
    lines.append(f"Drop: {drop_label}")
    lines.append("")
    lines.append(_distance_line(quote, shape))
    lines.append(f"Weight: {quote.weight:g} kg")
    lines.append(f"Waiting: {_format_hours(waiting_hours or 0)} hour(s)")
    lines.append("")
    lines.append("Fare Breakdown:")
    lines.append(f"  Service: {selected.model}")

    charges = (
        ("Base Charge", selected.base),
        ("Distance", selected.distance_charge),
        ("Stops", selected.stops_charge),
        ("Weight", selected.weight_charge),
        ("Waiting", selected.waiting_charge),
    )
    lines.extend(f"  {label}: {cur}{amount}" for label, amount in charges if amount > 0)
    lines.append(f"  Total: {cur}{selected.total}")
    lines.append("")
    lines.append("Please confirm my booking. Thank you!")
    return "\n".join(lines)


def build_booking_link(message: str, phone: str | None = None) -> str:
    """Chat deep link that opens a conversation with the message pre-filled."""
    number = phone or settings.booking_phone_number
    return f"https://wa.me/{number}?text={url_quote(message, safe='')}"
