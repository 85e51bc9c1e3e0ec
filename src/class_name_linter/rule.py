"""
The `no-dynamic-class-names` rule.

Ties together option parsing, attribute-name matching, prop collection and
classification. Hosts call `check_component()` once per component scope with
every attribute found in that component's template.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any

from .attributes import attribute_name
from .attributes import matches_name_list
from .classifier import MESSAGE
from .classifier import classify
from .options import RuleOptions
from .options import parse_options
from .options import watched_names
from .props import collect_allowed_names
from .types import AllowedNames
from .types import Attribute
from .types import ComponentScope
from .types import Diagnostic
from .types import ReportedNode

logger = logging.getLogger(__name__)

RULE_NAME = "no-dynamic-class-names"
RULE_ID = f"vue-kebab-class-naming/{RULE_NAME}"
DESCRIPTION = "disallow dynamic class names usage"
DOCS_URL = (
    "https://github.com/levchak0910/eslint-plugin-vue-kebab-class-naming"
    f"/rules/{RULE_NAME}.html"
)
RULE_TYPE = "problem"
DEFAULT_SEVERITY = "error"
FIXABLE = False
MESSAGES = {"dynamic": MESSAGE}

RULE_META: dict[str, Any] = {
    "type": RULE_TYPE,
    "fixable": FIXABLE,
    "messages": MESSAGES,
    "docs": {
        "description": DESCRIPTION,
        "default": DEFAULT_SEVERITY,
        "url": DOCS_URL,
        "ruleName": RULE_NAME,
        "ruleId": RULE_ID,
    },
}


def collect_rules() -> dict[str, str]:
    """Map each rule id to its default severity, for building presets."""
    return {RULE_META["docs"]["ruleId"]: RULE_META["docs"]["default"]}


class NoDynamicClassNames:
    """Reports class bindings whose value can't be known statically."""

    def __init__(
        self,
        options: RuleOptions | Mapping[str, Any] | Sequence[Any] | None = None,
    ) -> None:
        self.options = parse_options(options)
        self.names = watched_names(self.options)

    def is_watched(self, attribute: Attribute) -> bool:
        name = attribute_name(attribute)
        return name is not None and matches_name_list(self.names, name)

    def allowed_names(self, scope: ComponentScope | None) -> AllowedNames:
        return collect_allowed_names(scope, self.options.allow_props)

    def check_attribute(
        self,
        attribute: Attribute,
        allowed_names: AllowedNames,
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        if not self.is_watched(attribute):
            return diagnostics

        def report(node: ReportedNode, message: str) -> None:
            diagnostics.append(Diagnostic(node=node, message=message, rule_id=RULE_ID))

        classify(attribute, allowed_names, self.options.allow_conditional, report)
        return diagnostics

    def check_component(
        self,
        scope: ComponentScope | None,
        attributes: Iterable[Attribute],
    ) -> list[Diagnostic]:
        """
        Check every attribute of one component's template.

        The allowed-name set is built once here and shared by all attributes of
        the component.
        """
        allowed = self.allowed_names(scope)
        logger.debug("allowed names: %s", allowed.names)

        all_diagnostics: list[Diagnostic] = []
        for attribute in attributes:
            diagnostics = self.check_attribute(attribute, allowed)
            if diagnostics:
                logger.debug(
                    "%d dynamic class usage(s) in %r",
                    len(diagnostics),
                    attribute_name(attribute),
                )
            all_diagnostics.extend(diagnostics)
        return all_diagnostics


def lint_component(
    scope: ComponentScope | None,
    attributes: Iterable[Attribute],
    options: RuleOptions | Mapping[str, Any] | Sequence[Any] | None = None,
) -> list[Diagnostic]:
    """Run the rule over one component with the given options."""
    return NoDynamicClassNames(options).check_component(scope, attributes)
