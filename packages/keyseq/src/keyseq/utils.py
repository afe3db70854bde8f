"""
String helpers for keyseq

Key functions:
- strip_superfluous_whitespace: Trim and collapse whitespace runs
- normalized_combination_id: Order independent id for a set of key names
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from keyseq.config import COMBINATION_SEPARATOR, KEY_SEPARATOR

WHITESPACE_RUN = re.compile(r"\s+")


def strip_superfluous_whitespace(text: str) -> str:
    """
    Trim both ends of text and collapse inner whitespace runs.

    Example:
        >>> strip_superfluous_whitespace("  ctrl+a \\t  b ")
        'ctrl+a b'
    """
    return WHITESPACE_RUN.sub(COMBINATION_SEPARATOR, text.strip())


def normalized_combination_id(key_names: Iterable[str]) -> str:
    """
    Build the id of a key combination from its key names.

    Names are sorted so that the id does not depend on the order the keys
    were written in. A ``+`` key may land anywhere in the id (space, ``!``
    and ``*`` sort before it, letters after); wherever it lands it is read
    back as the plus key when the id is parsed again.

    Example:
        >>> normalized_combination_id({"a": True, "Control": True})
        'Control+a'
    """
    return KEY_SEPARATOR.join(sorted(key_names))
