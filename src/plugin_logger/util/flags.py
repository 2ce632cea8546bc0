"""Boolean flag lookup against the process environment and the config file."""

import os
from typing import Any, Callable, Mapping, Optional

FlagLookup = Callable[[str], Optional[bool]]

TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def parse_flag(value: Any) -> bool:
    """
    Interpret a flag value as a boolean.

    Strings are matched case-insensitively against the usual true/false
    spellings; any other non-empty string counts as set.
    """
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUE_STRINGS:
            return True
        if normalized in FALSE_STRINGS:
            return False
        return True
    return bool(value)


def env_flag_lookup(environ: Optional[Mapping[str, str]] = None) -> FlagLookup:
    """Lookup reading flags from environment variables (os.environ by default)."""
    def lookup(name: str) -> Optional[bool]:
        source = os.environ if environ is None else environ
        if name not in source:
            return None
        return parse_flag(source[name])
    return lookup


def mapping_flag_lookup(flags: Mapping[str, Any]) -> FlagLookup:
    def lookup(name: str) -> Optional[bool]:
        if name not in flags:
            return None
        return parse_flag(flags[name])
    return lookup


def chain_flag_lookups(*lookups: FlagLookup) -> FlagLookup:
    """First lookup that defines the flag wins."""
    def lookup(name: str) -> Optional[bool]:
        for candidate in lookups:
            value = candidate(name)
            if value is not None:
                return value
        return None
    return lookup
