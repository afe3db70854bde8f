"""Configuration for keyseq parsing."""

import os

VERSION = "0.1.0"

# Grammar
KEY_SEPARATOR = "+"
COMBINATION_SEPARATOR = " "
PLUS_KEY_TOKEN = "plus"

# Environment variable listing extra key names to accept as valid
ENV_CUSTOM_KEY_NAMES = "KEYSEQ_CUSTOM_KEY_NAMES"


def get_custom_key_names() -> frozenset[str]:
    """Get custom key names from ENV_CUSTOM_KEY_NAMES.

    The value is a comma separated list, e.g. ``"Hyper2,BrowserBack"``.
    Blank entries are ignored.

    Returns:
        Frozen set of the configured names (empty when unset)
    """
    raw = os.environ.get(ENV_CUSTOM_KEY_NAMES)
    if not raw:
        return frozenset()
    return frozenset(name.strip() for name in raw.split(",") if name.strip())
