"""Capability contracts and discovery."""

from .contracts import (
    Createable,
    Editable,
    Gildable,
    Inboxable,
    Moderateable,
    Refreshable,
    Repliable,
    Saveable,
    Votable,
)
from .registry import capabilities_of, describe, require, supports

__all__ = [
    "Createable",
    "Editable",
    "Gildable",
    "Inboxable",
    "Moderateable",
    "Refreshable",
    "Repliable",
    "Saveable",
    "Votable",
    "capabilities_of",
    "describe",
    "require",
    "supports",
]
