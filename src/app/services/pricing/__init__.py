"""Trip pricing helpers."""

from .engine import compute_quote
from .models import PriceBreakdown, QuoteResult
from .rates import DEFAULT_RATES, PricingRates

__all__ = [
    "compute_quote",
    "PriceBreakdown",
    "QuoteResult",
    "PricingRates",
    "DEFAULT_RATES",
]
