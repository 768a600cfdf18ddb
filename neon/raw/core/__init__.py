"""Core types: errors, enums, time source and collaborator protocols."""

from .base import ClientLike, RequestExecutor
from .clock import Clock, SystemClock, epoch_to_datetime
from .enums import Capability, DistinguishKind, StreamEventType, ThingKind, VoteDirection
from .exceptions import (
    APIError,
    AuthError,
    CapabilityError,
    ForbiddenError,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    RedditError,
    ServerError,
    StaleStateError,
    TransportError,
)

__all__ = [
    "APIError",
    "AuthError",
    "Capability",
    "CapabilityError",
    "ClientLike",
    "Clock",
    "DistinguishKind",
    "ForbiddenError",
    "MalformedResponseError",
    "NotFoundError",
    "RateLimitError",
    "RedditError",
    "RequestExecutor",
    "ServerError",
    "StaleStateError",
    "StreamEventType",
    "SystemClock",
    "ThingKind",
    "TransportError",
    "VoteDirection",
    "epoch_to_datetime",
]
