"""Request and response models for the HTTP API."""

from .advisor import ChatReply, ChatRequest, GroupSuggestionsRequest
from .fares import FareEstimateRequest, ShareRequest, TripQuoteRequest, TripQuoteResponse
from .health import DetailedHealthResponse, ServiceHealth
from .payments import PaymentRequest

__all__ = [
    "ChatReply",
    "ChatRequest",
    "DetailedHealthResponse",
    "FareEstimateRequest",
    "GroupSuggestionsRequest",
    "PaymentRequest",
    "ServiceHealth",
    "ShareRequest",
    "TripQuoteRequest",
    "TripQuoteResponse",
]
