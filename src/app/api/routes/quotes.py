"""Quote endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from ...schemas.quotes import (
    BookingMessageRequest,
    BookingMessageResponse,
    PriceQuoteRequest,
    QuoteResultModel,
    TripQuoteRequest,
    TripQuoteResponse,
)
from ...services.outputs.booking_message import build_booking_link, build_booking_message
from ...services.outputs.formatter import quote_result_to_csv, quote_result_to_json
from ...services.quotes.service import price_quote, quote_trip

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("/price", response_model=QuoteResultModel, status_code=status.HTTP_200_OK)
def price(payload: PriceQuoteRequest) -> QuoteResultModel:
    """Price a trip whose route and hub distances the caller has already resolved."""
    return QuoteResultModel.model_validate(quote_result_to_json(price_quote(payload)))


@router.post("/price.csv", status_code=status.HTTP_200_OK)
def price_csv(payload: PriceQuoteRequest) -> Response:
    return Response(content=quote_result_to_csv(price_quote(payload)), media_type="text/csv")


@router.post("/trip", response_model=TripQuoteResponse, status_code=status.HTTP_200_OK)
def trip(payload: TripQuoteRequest) -> TripQuoteResponse:
    try:
        result = quote_trip(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error quoting trip: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to quote trip: {str(exc)}",
        ) from exc
    return TripQuoteResponse(
        quote=QuoteResultModel.model_validate(quote_result_to_json(result.quote)),
        metadata=result.metadata,
    )


@router.post("/booking-message", response_model=BookingMessageResponse, status_code=status.HTTP_200_OK)
def booking_message(payload: BookingMessageRequest) -> BookingMessageResponse:
    """Quote the trip and render the booking request for the selected tier."""
    try:
        result = quote_trip(payload)
        message = build_booking_message(
            result.quote,
            payload.tier,
            pickup_label=payload.pickup_label,
            drop_label=payload.drop_label,
            stop_labels=payload.stop_labels,
            waiting_hours=payload.waiting_hours,
            shape=payload.delivery_type,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error building booking message: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build booking message: {str(exc)}",
        ) from exc
    return BookingMessageResponse(
        quote=QuoteResultModel.model_validate(quote_result_to_json(result.quote)),
        tier=payload.tier,
        message=message,
        link=build_booking_link(message),
        metadata=result.metadata,
    )
