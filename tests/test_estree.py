from __future__ import annotations

import pytest

from class_name_linter.estree import UnsupportedNode
from class_name_linter.estree import attribute_from_estree
from class_name_linter.estree import expression_from_estree
from class_name_linter.rule import lint_component
from class_name_linter.types import ArrayExpr
from class_name_linter.types import ConditionalExpr
from class_name_linter.types import ExpressionContainer
from class_name_linter.types import Identifier
from class_name_linter.types import LiteralValue
from class_name_linter.types import MemberAccess
from class_name_linter.types import ObjectExpr
from class_name_linter.types import OtherExpr
from class_name_linter.types import Property
from class_name_linter.types import SourceLocation
from class_name_linter.types import SpreadExpr
from class_name_linter.types import StringLiteral


def _loc(line: int, column: int, end_column: int) -> dict:
    return {
        "start": {"line": line, "column": column},
        "end": {"line": line, "column": end_column},
    }


def _ident(name: str, column: int = 0) -> dict:
    return {
        "type": "Identifier",
        "name": name,
        "loc": _loc(1, column, column + len(name)),
    }


def _bind(argument: str | None, expression: dict | None) -> dict:
    return {
        "type": "VAttribute",
        "directive": True,
        "key": {
            "type": "VDirectiveKey",
            "name": {"type": "VIdentifier", "name": "bind"},
            "argument": (
                {"type": "VIdentifier", "name": argument} if argument else None
            ),
        },
        "value": {"type": "VExpressionContainer", "expression": expression},
    }


class TestExpressions:
    def test_string_literal(self):
        node = expression_from_estree({"type": "Literal", "value": "a"})
        assert node == StringLiteral("a")

    def test_non_string_literal(self):
        node = expression_from_estree({"type": "Literal", "value": 1})
        assert node == OtherExpr("Literal")

    def test_location(self):
        node = expression_from_estree(_ident("foo", column=4))
        assert node == Identifier("foo")
        assert node.loc == SourceLocation(line=1, column=4, end_line=1, end_column=7)

    def test_member(self):
        node = expression_from_estree(
            {
                "type": "MemberExpression",
                "object": _ident("$props"),
                "property": _ident("active"),
                "computed": False,
            }
        )
        assert node == MemberAccess(Identifier("$props"), Identifier("active"))

    def test_object(self):
        node = expression_from_estree(
            {
                "type": "ObjectExpression",
                "properties": [
                    {
                        "type": "Property",
                        "key": _ident("active"),
                        "value": _ident("isOpen"),
                        "computed": False,
                        "shorthand": False,
                        "method": False,
                        "kind": "init",
                    },
                    {"type": "SpreadElement", "argument": _ident("rest")},
                ],
            }
        )
        assert node == ObjectExpr(
            (
                Property(Identifier("active"), Identifier("isOpen")),
                SpreadExpr(Identifier("rest")),
            )
        )

    def test_array_with_holes(self):
        node = expression_from_estree(
            {
                "type": "ArrayExpression",
                "elements": [
                    {"type": "Literal", "value": "a"},
                    None,
                    {"type": "SpreadElement", "argument": _ident("more")},
                ],
            }
        )
        assert node == ArrayExpr(
            (StringLiteral("a"), None, SpreadExpr(Identifier("more")))
        )

    def test_conditional(self):
        node = expression_from_estree(
            {
                "type": "ConditionalExpression",
                "test": _ident("ok"),
                "consequent": {"type": "Literal", "value": "a"},
                "alternate": {"type": "Literal", "value": "b"},
            }
        )
        assert node == ConditionalExpr(
            Identifier("ok"), StringLiteral("a"), StringLiteral("b")
        )

    @pytest.mark.parametrize(
        "node_type",
        ["CallExpression", "TemplateLiteral", "BinaryExpression", "ChainExpression"],
    )
    def test_unknown_shapes(self, node_type):
        assert expression_from_estree({"type": node_type}) == OtherExpr(node_type)

    @pytest.mark.parametrize("data", [None, {}, {"type": 3}, "Identifier"])
    def test_not_a_node(self, data):
        with pytest.raises(UnsupportedNode):
            expression_from_estree(data)


class TestAttributes:
    def test_plain_attribute(self):
        attribute = attribute_from_estree(
            {
                "type": "VAttribute",
                "directive": False,
                "key": {"type": "VIdentifier", "name": "class"},
                "value": {"type": "VLiteral", "value": "static-name"},
            }
        )
        assert attribute.key == "class"
        assert not attribute.directive
        assert attribute.value == LiteralValue("static-name")

    def test_valueless_attribute(self):
        attribute = attribute_from_estree(
            {
                "type": "VAttribute",
                "directive": False,
                "key": {"type": "VIdentifier", "name": "class"},
                "value": None,
            }
        )
        assert attribute.value is None

    def test_bind_directive(self):
        attribute = attribute_from_estree(_bind("class", _ident("x")))
        assert attribute.key == "bind"
        assert attribute.directive
        assert attribute.argument == "class"
        assert attribute.value == ExpressionContainer(Identifier("x"))

    def test_dynamic_argument(self):
        data = _bind(None, _ident("x"))
        data["key"]["argument"] = {
            "type": "VExpressionContainer",
            "expression": _ident("name"),
        }
        assert attribute_from_estree(data).argument is None

    def test_empty_binding(self):
        attribute = attribute_from_estree(_bind("class", None))
        assert attribute.value == ExpressionContainer(None)

    def test_rejects_other_nodes(self):
        with pytest.raises(UnsupportedNode):
            attribute_from_estree({"type": "VElement"})


def test_lint_parsed_attributes() -> None:
    attributes = [
        attribute_from_estree(_bind("class", _ident("dynamicVar", column=9))),
        attribute_from_estree(
            _bind(
                "class",
                {
                    "type": "ObjectExpression",
                    "properties": [
                        {
                            "type": "Property",
                            "key": _ident("active"),
                            "value": _ident("isOpen"),
                        }
                    ],
                },
            )
        ),
    ]
    diagnostics = lint_component(None, attributes)
    assert len(diagnostics) == 1
    assert diagnostics[0].loc == SourceLocation(1, 9, 1, 19)
