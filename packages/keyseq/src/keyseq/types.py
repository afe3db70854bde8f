from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from keyseq.config import get_custom_key_names


class KeyEventType(IntEnum):
    """Record index of the key event a combination should be matched on."""
    KEYDOWN = 0
    KEYPRESS = 1
    KEYUP = 2


class ModifierContext(BaseModel):
    model_config = ConfigDict(frozen=True)
    shift: bool = False
    alt: bool = False


class CombinationRecord(BaseModel):
    """Keys held together at the end of a sequence.

    ``id`` is order independent, so ``"a+b"`` and ``"b+a"`` share one.
    ``key_event_type`` is whatever tag the caller asked for; it is never
    inspected here.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    id: str
    size: int
    key_dictionary: dict[str, bool] = Field(alias="keyDictionary")
    key_event_type: Any = Field(default=KeyEventType.KEYDOWN, alias="keyEventType")


class SequenceDescriptor(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    prefix: str = ""
    size: int = 1


class ParseResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    sequence: SequenceDescriptor | None = None
    combination: CombinationRecord | None = None

    @classmethod
    def failure(cls) -> ParseResult:
        return cls(sequence=None, combination=None)

    @property
    def ok(self) -> bool:
        return self.sequence is not None and self.combination is not None


class ParseOptions(BaseModel):
    """How a key sequence string is parsed.

    Unknown field names are rejected. ``custom_key_names`` is empty unless
    given; use ``from_env()`` to take it from KEYSEQ_CUSTOM_KEY_NAMES.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")
    key_event_type: Any = Field(default=KeyEventType.KEYDOWN, alias="keyEventType")
    ensure_valid_keys: bool = Field(default=False, alias="ensureValidKeys")
    custom_key_names: frozenset[str] = Field(default_factory=frozenset, alias="customKeyNames")

    @classmethod
    def from_env(cls, **values: Any) -> ParseOptions:
        if "custom_key_names" not in values and "customKeyNames" not in values:
            values["custom_key_names"] = get_custom_key_names()
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> ParseOptions:
        """
        Copy the options with some fields replaced.

        Overrides may use field names or their camelCase aliases and are
        validated like constructor arguments.

        Raises:
            ValidationError: An override names no field or has a bad value
        """
        fields = type(self).model_fields
        aliases = {field.alias: name for name, field in fields.items() if field.alias}
        values = {name: getattr(self, name) for name in fields}
        values.update({aliases.get(key, key): value for key, value in overrides.items()})
        return type(self)(**values)
