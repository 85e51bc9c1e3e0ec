"""
Prop collection for a component scope.

Declared props are safe to use as bare identifiers in class bindings when the
`allowProps` option is on. Each authoring style has its own collector; their
results are concatenated behind the mandatory `"class"` entry.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterable

from .options import CLASS_ATTR
from .types import AllowedNames
from .types import ArrayExpr
from .types import ComponentScope
from .types import ExpressionNode
from .types import Identifier
from .types import ObjectExpr
from .types import PropDeclaration
from .types import Property
from .types import SpreadExpr
from .types import StringLiteral

PropCollector = Callable[[ComponentScope], Iterable[PropDeclaration]]


# ---------------------------------------------------------------------------
# Building declarations from expression trees
# ---------------------------------------------------------------------------


def _static_key_name(prop: Property) -> str | None:
    if prop.computed:
        return None
    if isinstance(prop.key, Identifier):
        return prop.key.name
    if isinstance(prop.key, StringLiteral):
        return prop.key.value
    return None


def _props_from_declaration(
    declaration: ExpressionNode | None,
) -> tuple[PropDeclaration, ...]:
    # props: ["a", "b"]
    if isinstance(declaration, ArrayExpr):
        return tuple(
            PropDeclaration(
                prop_name=el.value if isinstance(el, StringLiteral) else None,
                node=el,
            )
            for el in declaration.elements
            if el is not None and not isinstance(el, SpreadExpr)
        )
    # props: { a: String, b: { type: Number } }
    if isinstance(declaration, ObjectExpr):
        return tuple(
            PropDeclaration(prop_name=_static_key_name(p), node=p)
            for p in declaration.properties
            if isinstance(p, Property)
        )
    return ()


def props_from_options(component: ObjectExpr) -> tuple[PropDeclaration, ...]:
    """Props declared in the `props` field of an options-style component."""
    for prop in component.properties:
        if not isinstance(prop, Property):
            continue
        if _static_key_name(prop) == "props":
            return _props_from_declaration(prop.value)
    return ()


def props_from_define_props(
    argument: ExpressionNode | None,
) -> tuple[PropDeclaration, ...]:
    """
    Props declared by the runtime argument of `defineProps(...)`.

    Type-only declarations (`defineProps<{...}>()`) have no argument; hosts that
    resolve the type should pass the names to `props_from_names()` instead.
    """
    return _props_from_declaration(argument)


def props_from_names(names: Iterable[str]) -> tuple[PropDeclaration, ...]:
    return tuple(PropDeclaration(prop_name=name) for name in names)


# ---------------------------------------------------------------------------
# Allowed-name collection
# ---------------------------------------------------------------------------


def collect_setup_props(scope: ComponentScope) -> Iterable[PropDeclaration]:
    return scope.setup_props or ()


def collect_options_props(scope: ComponentScope) -> Iterable[PropDeclaration]:
    return scope.options_props or ()


PROP_COLLECTORS: tuple[PropCollector, ...] = (
    collect_setup_props,
    collect_options_props,
)


def collect_allowed_names(
    scope: ComponentScope | None,
    allow_props: bool,
) -> AllowedNames:
    """
    Build the allowed-name set for one component scope.

    With `allow_props` off the scope isn't inspected at all. Non-string prop
    names (computed or symbol keys) are dropped.
    """
    names = [CLASS_ATTR]
    if not allow_props or scope is None:
        return AllowedNames(tuple(names))

    for collector in PROP_COLLECTORS:
        names.extend(
            decl.prop_name
            for decl in collector(scope)
            if isinstance(decl.prop_name, str)
        )
    return AllowedNames(tuple(names))
