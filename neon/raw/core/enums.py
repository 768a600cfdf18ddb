"""Core enumerations shared by models, capabilities and the runtime.

Architecture:
    Wire-level type tags and behavior contracts are modeled as string enums
    so they compare equal to the raw values found in API payloads and can be
    logged or serialized without conversion.

Key Types:
    - ThingKind: Type discriminator carried in every ``{"kind", "data"}`` envelope
    - Capability: Named behavior contracts an entity variant may declare
    - VoteDirection: Values accepted by the vote endpoint
    - DistinguishKind: Values accepted by the distinguish endpoint
    - StreamEventType: Event kinds produced by a Stream
"""

from enum import Enum


class ThingKind(str, Enum):
    """Type tags used by the API envelope ``kind`` field.

    The ``t<N>`` tags also prefix fullnames (``t3_abc123``).
    """

    COMMENT = "t1"
    ACCOUNT = "t2"
    LINK = "t3"
    MESSAGE = "t4"
    SUBREDDIT = "t5"
    AWARD = "t6"
    MORE = "more"
    LISTING = "Listing"
    USER_LIST = "UserList"
    WIKI_PAGE = "wikipage"
    MOD_ACTION = "modaction"
    MULTIREDDIT = "LabeledMulti"

    @property
    def is_fullname_prefix(self) -> bool:
        """Whether this kind prefixes fullnames."""
        return self.value.startswith("t") and self.value[1:].isdigit()

    def fullname(self, thing_id: str) -> str:
        """Build a fullname from a base36 id."""
        if not self.is_fullname_prefix:
            raise ValueError(f"{self.value!r} is not a fullname prefix")
        return f"{self.value}_{thing_id}"

    @classmethod
    def from_fullname(cls, fullname: str) -> "ThingKind":
        """Get the kind tag of a fullname.

        Raises:
            ValueError: If the fullname has no known prefix
        """
        prefix, sep, _ = fullname.partition("_")
        if not sep:
            raise ValueError(f"Not a fullname: {fullname!r}")
        return cls(prefix)


class Capability(str, Enum):
    """Behavior contracts an entity variant may implement."""

    VOTABLE = "votable"
    SAVEABLE = "saveable"
    MODERATEABLE = "moderateable"
    REPLIABLE = "repliable"
    GILDABLE = "gildable"
    CREATEABLE = "createable"
    REFRESHABLE = "refreshable"
    INBOXABLE = "inboxable"
    EDITABLE = "editable"


class VoteDirection(int, Enum):
    """Vote directions (``dir`` parameter of ``/api/vote``)."""

    UP = 1
    CLEAR = 0
    DOWN = -1


class DistinguishKind(str, Enum):
    """Values for the ``how`` parameter of ``/api/distinguish``."""

    YES = "yes"
    NO = "no"
    ADMIN = "admin"
    SPECIAL = "special"


class StreamEventType(str, Enum):
    """Types of stream events."""

    ITEM = "item"
    ERROR = "error"
