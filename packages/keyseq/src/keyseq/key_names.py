"""
Key name standardization and validation.

Key names follow the values browsers report in KeyboardEvent.key
("Escape", "ArrowUp", "Control", "a", "!"), so a parsed combination can be
compared directly against live key events.

API:
- standardize_key_name(key_name, context) - Canonical name for an authored key
- is_valid_key_name(key_name, custom_key_names) - Whether a canonical name is a known key
- InvalidKeyNameError - Raised when validation is requested and a key is unknown
"""

from __future__ import annotations

import string
from collections.abc import Iterable

from keyseq.config import PLUS_KEY_TOKEN
from keyseq.types import ModifierContext

# =============================================================================
# Constants
# =============================================================================

FUNCTION_KEY_NAMES = frozenset(f"F{n}" for n in range(1, 25))

NON_PRINTABLE_KEY_NAMES = frozenset({
    # Modifiers
    "Alt", "AltGraph", "CapsLock", "Control", "Fn", "FnLock", "Hyper",
    "Meta", "NumLock", "OS", "ScrollLock", "Shift", "Super", "Symbol",
    "SymbolLock",
    # Whitespace and editing
    "Enter", "Tab", "Backspace", "Clear", "Delete", "Insert",
    # Navigation
    "ArrowDown", "ArrowLeft", "ArrowRight", "ArrowUp", "End", "Home",
    "PageDown", "PageUp",
    # UI
    "ContextMenu", "Escape", "Help", "Pause", "PrintScreen",
    # Media
    "MediaPlayPause", "MediaStop", "MediaTrackNext", "MediaTrackPrevious",
    "AudioVolumeDown", "AudioVolumeMute", "AudioVolumeUp",
}) | FUNCTION_KEY_NAMES

# Authored aliases, looked up case-insensitively
KEY_ALIASES: dict[str, str] = {
    "ctrl": "Control",
    "cmd": "Meta",
    "command": "Meta",
    "option": "Alt",
    "esc": "Escape",
    "return": "Enter",
    "del": "Delete",
    "ins": "Insert",
    "left": "ArrowLeft",
    "right": "ArrowRight",
    "up": "ArrowUp",
    "down": "ArrowDown",
    "space": " ",
    "spacebar": " ",
    PLUS_KEY_TOKEN: "+",
}

KEY_SHORTHANDS: dict[str, str] = {
    **{name.lower(): name for name in NON_PRINTABLE_KEY_NAMES},
    **KEY_ALIASES,
}

# Lower-case spellings of each context modifier, aliases included
SHIFT_SPELLINGS = tuple(sorted(name for name, key in KEY_SHORTHANDS.items() if key == "Shift"))
ALT_SPELLINGS = tuple(sorted(name for name, key in KEY_SHORTHANDS.items() if key == "Alt"))

# US layout: unshifted symbol -> symbol produced while shift is held
SHIFTED_KEYS: dict[str, str] = {
    "`": "~", "1": "!", "2": "@", "3": "#", "4": "$", "5": "%",
    "6": "^", "7": "&", "8": "*", "9": "(", "0": ")", "-": "_",
    "=": "+", "[": "{", "]": "}", "\\": "|", ";": ":", "'": '"',
    ",": "<", ".": ">", "/": "?",
}


# =============================================================================
# Errors
# =============================================================================

class InvalidKeyNameError(ValueError):
    """Raised when a key combination names a key that is not recognized."""
    def __init__(self, key_name: str):
        self.key_name = key_name
        super().__init__(f"Invalid key name: {key_name!r}")


# =============================================================================
# Standardization
# =============================================================================

def standardize_key_name(key_name: str, context: ModifierContext | None = None) -> str:
    """
    Return the canonical name of an authored key.

    Named keys are matched case-insensitively ("esc", "ESCAPE" and
    "Escape" all give "Escape"). Letters follow the shift state: upper case
    while shift is held, lower case otherwise. While shift is held without
    alt, symbols become their US layout shifted form ("1" gives "!"); with
    alt also held the produced glyph is platform specific, so the symbol is
    kept as written.

    Args:
        key_name: Raw token from a key combination
        context: Modifiers present in the enclosing combination

    Returns:
        Canonical key name (unknown names are returned unchanged)
    """
    context = context or ModifierContext()

    shorthand = KEY_SHORTHANDS.get(key_name.lower())
    if shorthand is not None:
        return shorthand

    if len(key_name) == 1 and key_name in string.ascii_letters:
        return key_name.upper() if context.shift else key_name.lower()

    if context.shift and not context.alt:
        return SHIFTED_KEYS.get(key_name, key_name)

    return key_name


# =============================================================================
# Validation
# =============================================================================

def is_valid_key_name(key_name: str, custom_key_names: Iterable[str] = ()) -> bool:
    """Check whether a canonical key name is a recognized key.

    Any single character is a printable key. Longer names must be a known
    non-printable key or one of ``custom_key_names``.
    """
    if len(key_name) == 1:
        return True
    return key_name in NON_PRINTABLE_KEY_NAMES or key_name in custom_key_names
