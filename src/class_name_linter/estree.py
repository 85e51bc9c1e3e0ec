"""
Conversion from ESTree / vue-eslint-parser JSON into the typed node model.

Hosts that already run `vue-eslint-parser` can serialize `VAttribute` nodes
(with their ESTree expressions) as JSON and hand them over here. Node types
the classifier has no rule for become `OtherExpr`, keeping their `type` as
`kind`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .types import ArrayExpr
from .types import Attribute
from .types import AttributeValue
from .types import ConditionalExpr
from .types import ExpressionContainer
from .types import ExpressionNode
from .types import Identifier
from .types import LiteralValue
from .types import MemberAccess
from .types import ObjectExpr
from .types import OtherExpr
from .types import Property
from .types import SourceLocation
from .types import SpreadExpr
from .types import StringLiteral

Node = Mapping[str, Any]


class UnsupportedNode(ValueError):
    """Raised for input that isn't an ESTree node at all."""


def _node_type(data: Any) -> str:
    if not isinstance(data, Mapping) or not isinstance(data.get("type"), str):
        raise UnsupportedNode(f"Expected an ESTree node, got {data!r:.80}")
    return data["type"]


def location_from_estree(data: Node) -> SourceLocation | None:
    loc = data.get("loc")
    if not loc:
        return None
    start = loc["start"]
    end = loc.get("end", start)
    return SourceLocation(
        line=start["line"],
        column=start["column"],
        end_line=end["line"],
        end_column=end["column"],
    )


def _spread_from_estree(data: Node) -> SpreadExpr:
    return SpreadExpr(
        expression_from_estree(data["argument"]),
        loc=location_from_estree(data),
    )


def _property_from_estree(data: Node) -> Property | SpreadExpr:
    if _node_type(data) in {"SpreadElement", "ExperimentalSpreadProperty"}:
        return _spread_from_estree(data)
    return Property(
        key=expression_from_estree(data["key"]),
        value=expression_from_estree(data["value"]),
        computed=bool(data.get("computed", False)),
        shorthand=bool(data.get("shorthand", False)),
        method=bool(data.get("method", False)),
        loc=location_from_estree(data),
    )


def _element_from_estree(data: Node | None) -> ExpressionNode | SpreadExpr | None:
    if data is None:
        return None
    if _node_type(data) == "SpreadElement":
        return _spread_from_estree(data)
    return expression_from_estree(data)


def expression_from_estree(data: Node) -> ExpressionNode:
    """Convert one ESTree expression node (recursively)."""
    node_type = _node_type(data)
    loc = location_from_estree(data)

    if node_type == "Literal":
        value = data.get("value")
        if isinstance(value, str):
            return StringLiteral(value, loc=loc)
        return OtherExpr(node_type, loc=loc)
    if node_type == "Identifier":
        return Identifier(data["name"], loc=loc)
    if node_type == "MemberExpression":
        return MemberAccess(
            object=expression_from_estree(data["object"]),
            property=expression_from_estree(data["property"]),
            computed=bool(data.get("computed", False)),
            loc=loc,
        )
    if node_type == "ObjectExpression":
        return ObjectExpr(
            tuple(_property_from_estree(p) for p in data.get("properties", ())),
            loc=loc,
        )
    if node_type == "ArrayExpression":
        return ArrayExpr(
            tuple(_element_from_estree(el) for el in data.get("elements", ())),
            loc=loc,
        )
    if node_type == "ConditionalExpression":
        return ConditionalExpr(
            test=expression_from_estree(data["test"]),
            consequent=expression_from_estree(data["consequent"]),
            alternate=expression_from_estree(data["alternate"]),
            loc=loc,
        )
    if node_type == "SpreadElement":
        return _spread_from_estree(data)
    return OtherExpr(node_type, loc=loc)


def _value_from_estree(data: Node | None) -> AttributeValue | None:
    if data is None:
        return None
    node_type = _node_type(data)
    loc = location_from_estree(data)
    if node_type == "VLiteral":
        return LiteralValue(data.get("value", ""), loc=loc)
    if node_type == "VExpressionContainer":
        expression = data.get("expression")
        return ExpressionContainer(
            expression_from_estree(expression) if expression is not None else None,
            loc=loc,
        )
    raise UnsupportedNode(f"Unexpected attribute value type {node_type!r}")


def _directive_argument(argument: Node | None) -> str | None:
    # `:[name]` arguments are expression containers, never static names.
    if argument is None or _node_type(argument) != "VIdentifier":
        return None
    return argument.get("name") or None


def attribute_from_estree(data: Node) -> Attribute:
    """Convert a vue-eslint-parser `VAttribute` node."""
    if _node_type(data) != "VAttribute":
        raise UnsupportedNode(f"Expected a VAttribute, got {data['type']!r}")

    key = data["key"]
    value = _value_from_estree(data.get("value"))
    loc = location_from_estree(data)

    if not data.get("directive", False):
        return Attribute(key=key["name"], value=value, loc=loc)

    name = key["name"]
    directive_name = name["name"] if isinstance(name, Mapping) else name
    return Attribute(
        key=directive_name,
        value=value,
        directive=True,
        argument=_directive_argument(key.get("argument")),
        loc=loc,
    )
