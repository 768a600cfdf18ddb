"""Generic hydration of API payloads into typed entities.

Architecture:
    Every object the API returns arrives as a JSON mapping. RedditObject turns
    that mapping into a pydantic model with a fixed per-variant schema:
    declared fields are typed and validated, undeclared wire fields are kept
    in the model's extras bag instead of being dropped.

Design Decisions:
    - Empty strings, lists and dicts are normalized to None before validation,
      so callers never have to tell ``""`` from "no value"
    - Presence is tracked separately: ``is_present(name)`` distinguishes
      "not in the payload" from "in the payload but empty"
    - Fields that need transformation (timestamps, nested trees) are stored
      under private attribute names with the wire name as alias and exposed
      through dedicated properties
    - Aliases are class-level properties over the canonical field, so both
      names always read and write the same storage
    - Validation failures raise MalformedResponseError; no partially valid
      entity ever escapes hydrate()
    - Self-refresh replaces field state in place so the object identity
      held by callers stays valid

See Also:
    - models.hydration: kind -> variant dispatch table
    - capability: behavior contracts composed into the variants
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, model_validator

from ..core.base import ClientLike
from ..core.enums import ThingKind
from ..core.exceptions import MalformedResponseError


def is_empty(value: Any) -> bool:
    """Whether a raw value is an empty string, sequence or mapping."""
    return isinstance(value, (str, list, tuple, dict)) and len(value) == 0


def normalize(data: Mapping[str, Any]) -> dict[str, Any]:
    """Copy ``data`` with empty values replaced by None."""
    return {key: (None if is_empty(value) else value) for key, value in data.items()}


def alias(source: str, doc: str | None = None) -> property:
    """Declare a second accessor backed by the field ``source``."""

    def getter(self: Any) -> Any:
        return getattr(self, source)

    def setter(self: Any, value: Any) -> None:
        setattr(self, source, value)

    return property(getter, setter, doc=doc or f"Alias of ``{source}``.")


class RedditObject(BaseModel):
    """Base class for every hydrated API object."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    _client: Any = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def _normalize_payload(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        return cls._prepare(normalize(data))

    @classmethod
    def _prepare(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Reshape a normalized payload before validation. Override if needed."""
        return data

    @classmethod
    def hydrate(cls, client: ClientLike | None, data: Mapping[str, Any]) -> Self:
        """Build an instance from a raw ``data`` mapping owned by ``client``.

        Raises:
            MalformedResponseError: If ``data`` is not a mapping or a required
                field is missing or has the wrong type
        """
        if not isinstance(data, Mapping):
            raise MalformedResponseError(
                f"Cannot hydrate {cls.__name__} from {type(data).__name__}"
            )
        try:
            obj = cls.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Cannot hydrate {cls.__name__}: {e}") from e
        obj._client = client
        return obj

    @property
    def client(self) -> ClientLike | None:
        return self._client

    @property
    def extras(self) -> dict[str, Any]:
        """Wire fields not declared by the variant's schema."""
        return dict(self.model_extra or {})

    def is_present(self, name: str) -> bool:
        """Whether ``name`` (field or wire name) was in the hydrated payload."""
        if self.model_extra and name in self.model_extra:
            return True
        fields = type(self).model_fields
        if name in fields:
            return name in self.model_fields_set
        for field_name, info in fields.items():
            if info.alias == name:
                return field_name in self.model_fields_set
        return False

    def _replace_state(self, fresh: RedditObject) -> None:
        """Take over every field of ``fresh`` while keeping this identity."""
        if type(fresh) is not type(self):
            raise MalformedResponseError(
                f"Refresh returned {type(fresh).__name__}, expected {type(self).__name__}"
            )
        self.__dict__.update(fresh.__dict__)
        object.__setattr__(self, "__pydantic_extra__", dict(fresh.__pydantic_extra__ or {}))
        object.__setattr__(self, "__pydantic_fields_set__", set(fresh.__pydantic_fields_set__))


class Thing(RedditObject):
    """An entity identified by a fullname (``t3_abc123``).

    Attributes:
        id: Base36 id
        name: Fullname (kind tag + ``_`` + id)
    """

    id: str
    name: str

    raw_created: float | None = Field(default=None, alias="created", repr=False)
    raw_created_utc: float | None = Field(default=None, alias="created_utc", repr=False)

    @property
    def fullname(self) -> str:
        return self.name

    @property
    def kind(self) -> ThingKind:
        return ThingKind.from_fullname(self.name)
