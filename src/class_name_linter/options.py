"""
Rule options.

Options arrive from the host's lint configuration, either as a mapping or as an
ESLint-style options list whose first element is the mapping. They are
validated once, up front, so classification can assume well-formed input.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import StrictBool
from pydantic import StrictStr
from pydantic import ValidationError
from pydantic import field_validator

from .attributes import is_regexp
from .attributes import to_regexp

# Always watched, regardless of `classAttrNames`.
CLASS_ATTR = "class"


class InvalidRuleOptions(ValueError):
    """Raised when rule options don't match the option schema."""


class RuleOptions(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )

    class_attr_names: tuple[StrictStr, ...] = Field(
        default=(), alias="classAttrNames"
    )
    allow_conditional: StrictBool = Field(default=False, alias="allowConditional")
    allow_props: StrictBool = Field(default=False, alias="allowProps")

    @field_validator("class_attr_names")
    @classmethod
    def _unique_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        seen: set[str] = set()
        for name in value:
            if name in seen:
                raise ValueError(f"duplicate attribute name {name!r}")
            seen.add(name)
        return value

    @field_validator("class_attr_names")
    @classmethod
    def _compilable_patterns(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for name in value:
            if not is_regexp(name):
                continue
            try:
                to_regexp(name)
            except re.error as e:
                raise ValueError(f"invalid pattern {name!r}: {e}") from e
        return value


def parse_options(
    raw: RuleOptions | Mapping[str, Any] | Sequence[Any] | None,
) -> RuleOptions:
    """
    Validate raw rule options.

    Accepts `None` (all defaults), an options mapping, or a list of rule
    options as ESLint passes them (only the first entry is used).
    """
    if raw is None:
        return RuleOptions()
    if isinstance(raw, RuleOptions):
        return raw
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        if not raw:
            return RuleOptions()
        raw = raw[0]
        if raw is None:
            return RuleOptions()
    if not isinstance(raw, Mapping):
        raise InvalidRuleOptions(
            f"Rule options must be an object, got {type(raw).__name__}"
        )
    try:
        return RuleOptions.model_validate(dict(raw))
    except ValidationError as e:
        raise InvalidRuleOptions(str(e)) from e


def watched_names(options: RuleOptions) -> tuple[str, ...]:
    """Attribute names to check: configured names plus `class`."""
    names = list(options.class_attr_names)
    if CLASS_ATTR not in names:
        names.append(CLASS_ATTR)
    return tuple(names)
