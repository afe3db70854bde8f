"""
Key sequence parsing.

A key sequence string lists one or more key combinations separated by
whitespace; the keys of a combination are joined by "+":

    "ctrl+a b shift+c"

Every combination but the last forms the sequence prefix, the last one is
the terminal combination that a matcher compares against key events.

The plus key itself is written as "+" wherever a key is expected:

    combination := key ("+" key)*
    key         := "+" | one or more non-"+" characters

so "+" is the plus key alone, "ctrl++" is control with plus and "a+++b" is
a, plus and b. "plus" may also be written out.

API:
- parse_sequence(sequence_string, options, **overrides) - Parse a full sequence
- tokenize_combination(combination) - Split one combination into raw key tokens
- detect_modifiers(combination) - Shift/alt context for key name standardization
- build_key_dictionary(combination, options) - Canonical key names of a combination
- build_combination(key_dictionary, key_event_type) - Wrap key names into a record
"""

from __future__ import annotations

import logging
from typing import Any

from keyseq.config import COMBINATION_SEPARATOR, KEY_SEPARATOR, PLUS_KEY_TOKEN
from keyseq.key_names import (
    ALT_SPELLINGS,
    SHIFT_SPELLINGS,
    InvalidKeyNameError,
    is_valid_key_name,
    standardize_key_name,
)
from keyseq.types import CombinationRecord, ModifierContext, ParseOptions, ParseResult, SequenceDescriptor
from keyseq.utils import normalized_combination_id, strip_superfluous_whitespace

logger = logging.getLogger(__name__)


# =============================================================================
# Combination Parsing
# =============================================================================

def tokenize_combination(combination: str) -> list[str]:
    """
    Split a key combination into raw key tokens.

    Splitting on "+" leaves an empty field on each side of a plus key, so
    empty fields pair up into a single ``plus`` token. An unpaired empty
    field means a key is missing and is returned as ``""``.

    Example:
        >>> tokenize_combination("ctrl++")
        ['ctrl', 'plus']
    """
    tokens: list[str] = []
    pending_empty = False

    for field in combination.split(KEY_SEPARATOR):
        if field:
            if pending_empty:
                tokens.append("")
                pending_empty = False
            tokens.append(field)
        elif pending_empty:
            tokens.append(PLUS_KEY_TOKEN)
            pending_empty = False
        else:
            pending_empty = True

    if pending_empty:
        tokens.append("")

    return tokens


def detect_modifiers(combination: str) -> ModifierContext:
    """Whether any spelling of shift or alt ("option") appears in the combination (any case)."""
    lowered = combination.lower()
    return ModifierContext(
        shift=any(spelling in lowered for spelling in SHIFT_SPELLINGS),
        alt=any(spelling in lowered for spelling in ALT_SPELLINGS),
    )


def build_key_dictionary(combination: str, options: ParseOptions) -> dict[str, bool]:
    """
    Standardize the keys of a combination into a key dictionary.

    Raises:
        InvalidKeyNameError: A key is missing, or ``options.ensure_valid_keys``
            is set and a key name is not recognized
    """
    context = detect_modifiers(combination)
    key_dictionary: dict[str, bool] = {}

    for token in tokenize_combination(combination):
        key_name = standardize_key_name(token, context)

        if not key_name:
            raise InvalidKeyNameError(token)

        if options.ensure_valid_keys and not is_valid_key_name(key_name, options.custom_key_names):
            raise InvalidKeyNameError(key_name)

        key_dictionary[key_name] = True

    return key_dictionary


def build_combination(key_dictionary: dict[str, bool], key_event_type: Any) -> CombinationRecord:
    """Wrap a key dictionary into a record tagged with key_event_type."""
    return CombinationRecord(
        id=normalized_combination_id(key_dictionary),
        size=len(key_dictionary),
        key_dictionary=key_dictionary,
        key_event_type=key_event_type,
    )


# =============================================================================
# Sequence Parsing
# =============================================================================

def parse_sequence(
    sequence_string: str,
    options: ParseOptions | None = None,
    **overrides: Any,
) -> ParseResult:
    """
    Parse a key sequence string.

    Args:
        sequence_string: Combinations separated by whitespace, e.g. "ctrl+a b"
        options: Parse options; defaults to ParseOptions()
        **overrides: ParseOptions fields applied on top of options
            (key_event_type, ensure_valid_keys, custom_key_names or their
            camelCase aliases)

    Returns:
        ParseResult with the sequence prefix and the terminal combination,
        or ParseResult.failure() when a key name is missing or invalid

    Raises:
        ValidationError: An override names no option or has a bad value
    """
    options = options or ParseOptions()
    if overrides:
        options = options.with_overrides(**overrides)

    combinations = strip_superfluous_whitespace(sequence_string).split(COMBINATION_SEPARATOR)
    non_terminal = combinations[:-1]
    terminal = combinations[-1]

    try:
        prefix = COMBINATION_SEPARATOR.join(
            normalized_combination_id(build_key_dictionary(combination, options))
            for combination in non_terminal
        )
        combination = build_combination(
            build_key_dictionary(terminal, options),
            options.key_event_type,
        )
    except InvalidKeyNameError as e:
        logger.warning(
            "Unable to parse key sequence %r (%s). Key sequence will be unavailable.",
            sequence_string,
            e,
        )
        return ParseResult.failure()

    result = ParseResult(
        sequence=SequenceDescriptor(prefix=prefix, size=len(non_terminal) + 1),
        combination=combination,
    )
    logger.debug("Parsed key sequence %r as %s", sequence_string, result)
    return result
