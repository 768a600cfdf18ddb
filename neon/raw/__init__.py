"""Neon RAW - async Reddit API wrapper."""

from .auth import AccessToken, Authenticator, TokenManager
from .capability import (
    Createable,
    Editable,
    Gildable,
    Inboxable,
    Moderateable,
    Refreshable,
    Repliable,
    Saveable,
    Votable,
    capabilities_of,
    describe,
    require,
    supports,
)
from .client import Reddit
from .config import ClientConfig, Credentials
from .core import (
    APIError,
    AuthError,
    Capability,
    CapabilityError,
    Clock,
    DistinguishKind,
    ForbiddenError,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    RedditError,
    ServerError,
    StaleStateError,
    StreamEventType,
    SystemClock,
    ThingKind,
    TransportError,
    VoteDirection,
)
from .models import (
    Comment,
    Listing,
    Message,
    ModAction,
    MoreComments,
    Multireddit,
    PrivilegedUser,
    RedditObject,
    Submission,
    Subreddit,
    Thing,
    Trophy,
    User,
    WikiPage,
    WikiPageRevision,
)
from .runtime import Paginator, RESTExecutor, SeenSet, Stream, StreamEvent

__all__ = [
    # Client
    "Reddit",
    "ClientConfig",
    "Credentials",
    # Auth
    "AccessToken",
    "Authenticator",
    "TokenManager",
    # Runtime
    "Paginator",
    "RESTExecutor",
    "SeenSet",
    "Stream",
    "StreamEvent",
    "Clock",
    "SystemClock",
    # Models
    "RedditObject",
    "Thing",
    "Comment",
    "Submission",
    "Message",
    "User",
    "Subreddit",
    "MoreComments",
    "Multireddit",
    "Trophy",
    "ModAction",
    "PrivilegedUser",
    "WikiPage",
    "WikiPageRevision",
    "Listing",
    # Enums
    "Capability",
    "ThingKind",
    "VoteDirection",
    "DistinguishKind",
    "StreamEventType",
    # Capabilities
    "Votable",
    "Saveable",
    "Moderateable",
    "Repliable",
    "Gildable",
    "Createable",
    "Refreshable",
    "Inboxable",
    "Editable",
    "capabilities_of",
    "supports",
    "require",
    "describe",
    # Exceptions
    "RedditError",
    "APIError",
    "AuthError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "MalformedResponseError",
    "CapabilityError",
    "StaleStateError",
]
