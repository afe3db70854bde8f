"""
keyseq: Key sequence parsing for keyboard shortcut matching

Turns shortcut definitions such as "ctrl+a b shift+c" into normalized
combination records that can be compared against live key events.
"""

from keyseq.config import VERSION
from keyseq.key_names import (
    InvalidKeyNameError,
    is_valid_key_name,
    standardize_key_name,
)
from keyseq.parser import (
    build_combination,
    build_key_dictionary,
    detect_modifiers,
    parse_sequence,
    tokenize_combination,
)
from keyseq.types import (
    CombinationRecord,
    KeyEventType,
    ModifierContext,
    ParseOptions,
    ParseResult,
    SequenceDescriptor,
)
from keyseq.utils import normalized_combination_id, strip_superfluous_whitespace

__version__ = VERSION

__all__ = [
    "parse_sequence",
    "tokenize_combination",
    "detect_modifiers",
    "build_key_dictionary",
    "build_combination",
    "standardize_key_name",
    "is_valid_key_name",
    "InvalidKeyNameError",
    "normalized_combination_id",
    "strip_superfluous_whitespace",
    "CombinationRecord",
    "KeyEventType",
    "ModifierContext",
    "ParseOptions",
    "ParseResult",
    "SequenceDescriptor",
]
