"""Hydrated API entities and the Listing container."""

from .base import RedditObject, Thing
from .comment import Comment
from .hydration import KIND_MAP, fetch_by_fullname, hydrate, variant_for
from .listing import Listing
from .message import Message
from .moderation import ModAction, PrivilegedUser
from .more_comments import MoreComments
from .multireddit import Multireddit
from .submission import Submission
from .subreddit import Subreddit
from .trophy import Trophy
from .user import User
from .wiki import WikiPage, WikiPageRevision

__all__ = [
    "KIND_MAP",
    "Comment",
    "Listing",
    "Message",
    "ModAction",
    "MoreComments",
    "Multireddit",
    "PrivilegedUser",
    "RedditObject",
    "Submission",
    "Subreddit",
    "Thing",
    "Trophy",
    "User",
    "WikiPage",
    "WikiPageRevision",
    "fetch_by_fullname",
    "hydrate",
    "variant_for",
]
