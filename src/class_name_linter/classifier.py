"""
Static/dynamic classification of class binding expressions.

A class value is static when every leaf reachable from it is a string literal
or a name the configuration allows. Everything else is reported, including
shapes this module doesn't know about.

Object literals are special: their *keys* are the emitted class names, so a
property with an identifier or string key is static no matter what its value
is. Only properties whose key is neither get their value inspected.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterator

from .types import AllowedNames
from .types import ArrayExpr
from .types import Attribute
from .types import ConditionalExpr
from .types import ExpressionContainer
from .types import ExpressionNode
from .types import Identifier
from .types import MemberAccess
from .types import ObjectExpr
from .types import ReportedNode
from .types import SpreadExpr
from .types import StringLiteral

MESSAGE = "No dynamic class."

# Receivers whose members are props/attrs of the current component.
PROPS_RECEIVERS = frozenset({"$props", "$attrs"})

Reporter = Callable[[ReportedNode, str], None]


def _is_allowed_member(expr: MemberAccess, allowed_names: AllowedNames) -> bool:
    return (
        isinstance(expr.object, Identifier)
        and expr.object.name in PROPS_RECEIVERS
        # `$props[name]` reads a runtime variable, unlike `$props.name`.
        and not expr.computed
        and isinstance(expr.property, Identifier)
        and expr.property.name in allowed_names
    )


def _iter_spread(
    spread: SpreadExpr,
    allowed_names: AllowedNames,
    allow_conditional: bool,
) -> Iterator[ReportedNode]:
    argument = spread.argument
    if isinstance(argument, ArrayExpr):
        yield from _iter_array(argument, allowed_names, allow_conditional)
    elif isinstance(argument, ObjectExpr):
        yield from _iter_object(argument, allowed_names, allow_conditional)
    else:
        yield argument


def _iter_object(
    obj: ObjectExpr,
    allowed_names: AllowedNames,
    allow_conditional: bool,
) -> Iterator[ReportedNode]:
    for prop in obj.properties:
        if isinstance(prop, SpreadExpr):
            yield from _iter_spread(prop, allowed_names, allow_conditional)
            continue
        if prop.shorthand:
            continue
        if prop.computed or prop.method:
            yield prop
            continue
        if isinstance(prop.key, (Identifier, StringLiteral)):
            continue
        yield from iter_dynamic_expressions(
            prop.value, allowed_names, allow_conditional
        )


def _iter_array(
    array: ArrayExpr,
    allowed_names: AllowedNames,
    allow_conditional: bool,
) -> Iterator[ReportedNode]:
    for element in array.elements:
        if element is None:
            continue
        if isinstance(element, SpreadExpr):
            yield from _iter_spread(element, allowed_names, allow_conditional)
            continue
        yield from iter_dynamic_expressions(element, allowed_names, allow_conditional)


def iter_dynamic_expressions(
    expression: ExpressionNode | None,
    allowed_names: AllowedNames,
    allow_conditional: bool = False,
) -> Iterator[ReportedNode]:
    """
    Yield every dynamic sub-expression of `expression`, in source order.

    Each node is yielded at most once. A yielded node is never descended into.
    """
    if expression is None:
        return
    if isinstance(expression, StringLiteral):
        return
    if isinstance(expression, Identifier):
        if expression.name not in allowed_names:
            yield expression
        return
    if isinstance(expression, MemberAccess):
        if not _is_allowed_member(expression, allowed_names):
            yield expression
        return
    if isinstance(expression, ObjectExpr):
        yield from _iter_object(expression, allowed_names, allow_conditional)
        return
    if isinstance(expression, ArrayExpr):
        yield from _iter_array(expression, allowed_names, allow_conditional)
        return
    if isinstance(expression, ConditionalExpr) and allow_conditional:
        yield from iter_dynamic_expressions(
            expression.consequent, allowed_names, allow_conditional
        )
        yield from iter_dynamic_expressions(
            expression.alternate, allowed_names, allow_conditional
        )
        return
    yield expression


def classify(
    attribute: Attribute,
    allowed_names: AllowedNames,
    allow_conditional: bool,
    report: Reporter,
) -> None:
    """
    Report each dynamic part of an attribute's bound value.

    Attributes without a value, with literal text, or with an unparsable
    binding have nothing to classify.
    """
    value = attribute.value
    if not isinstance(value, ExpressionContainer):
        return
    if value.expression is None:
        return
    for node in iter_dynamic_expressions(
        value.expression, allowed_names, allow_conditional
    ):
        report(node, MESSAGE)
