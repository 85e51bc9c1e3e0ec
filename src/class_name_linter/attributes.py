"""
Attribute-name resolution and matching against the watched-name list.

Watched names are either literal attribute names or `/pattern/flags` strings,
the regular-expression notation used throughout ESLint rule options.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .types import Attribute

_REGEXP_SYNTAX = re.compile(r"^/(.+)/([dgimsuvy]*)$", re.DOTALL)

# Flags with no Python equivalent (global, sticky, unicode...) only change how
# JavaScript iterates matches, not whether `test()` succeeds.
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}


def attribute_name(attribute: Attribute) -> str | None:
    """
    Name an attribute is matched under.

    Plain attributes use their own name, `v-bind` directives use their static
    argument. Other directives, and `v-bind` without a static argument, have no
    name.
    """
    if not attribute.directive:
        return attribute.key
    if attribute.key == "bind":
        return attribute.argument or None
    return None


def is_regexp(text: str) -> bool:
    return _REGEXP_SYNTAX.match(text) is not None


def to_regexp(text: str) -> re.Pattern[str]:
    """
    Compile a `/pattern/flags` string.

    Strings that aren't in regexp notation match themselves literally.
    """
    match = _REGEXP_SYNTAX.match(text)
    if match is None:
        return re.compile(f"^{re.escape(text)}$")
    pattern, flags = match.groups()
    compiled_flags = 0
    for flag in flags:
        compiled_flags |= _FLAG_MAP.get(flag, 0)
    return re.compile(pattern, compiled_flags)


def matches_name_list(names: Iterable[str], item: str) -> bool:
    """True if `item` equals a listed name or matches a listed regexp."""
    names = list(names)
    if item in names:
        return True
    for regexp in (to_regexp(name) for name in names if is_regexp(name)):
        if regexp.search(item):
            return True
    return False
