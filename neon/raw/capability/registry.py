"""Capability discovery for entity variants.

Capabilities are discovered from code: a variant declares a capability by
composing the matching contract class, and each contract class names its
capability in a ``capability`` class attribute. Nothing is registered by
hand, so the registry cannot drift from the implementations.
"""

from __future__ import annotations

from functools import cache
from typing import Any

from ..core.enums import Capability
from ..core.exceptions import CapabilityError


@cache
def _capabilities_of_class(cls: type) -> frozenset[Capability]:
    found: set[Capability] = set()
    for klass in cls.__mro__:
        declared = klass.__dict__.get("capability")
        if isinstance(declared, Capability):
            found.add(declared)
    return frozenset(found)


def capabilities_of(obj_or_cls: Any) -> frozenset[Capability]:
    """Get the capabilities declared by an entity or entity class."""
    cls = obj_or_cls if isinstance(obj_or_cls, type) else type(obj_or_cls)
    return _capabilities_of_class(cls)


def supports(obj_or_cls: Any, capability: Capability | str) -> bool:
    """Check whether an entity (or class) declares ``capability``."""
    return Capability(capability) in capabilities_of(obj_or_cls)


def require(obj_or_cls: Any, capability: Capability | str) -> None:
    """Raise CapabilityError unless ``capability`` is declared.

    Raises:
        CapabilityError: If the variant does not declare the capability
    """
    capability = Capability(capability)
    if not supports(obj_or_cls, capability):
        cls = obj_or_cls if isinstance(obj_or_cls, type) else type(obj_or_cls)
        raise CapabilityError(
            f"{cls.__name__} is not {capability.value}",
            capability=capability,
        )


def describe(classes: list[type]) -> dict[str, list[str]]:
    """Map variant names to their sorted capability names."""
    return {
        cls.__name__: sorted(capability.value for capability in capabilities_of(cls))
        for cls in classes
    }
