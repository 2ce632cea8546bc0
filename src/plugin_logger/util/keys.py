"""Name normalization for logger keys."""

import re

_UNSAFE_KEY_CHARS = re.compile(r"[^a-z0-9_\-]")


def sanitize_key(key: str) -> str:
    """Lowercase the key and strip everything except a-z, 0-9, '_' and '-'."""
    return _UNSAFE_KEY_CHARS.sub("", str(key).lower())


def debug_flag_name(key: str) -> str:
    """Per-logger flag name, e.g. "my-plugin" -> "MY_PLUGIN_DEBUG"."""
    return f"{key.upper().replace('-', '_')}_DEBUG"
