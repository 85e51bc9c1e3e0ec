"""
Shared types for attribute matching, prop collection, and classification.

Expression nodes are a closed set of frozen dataclasses covering only the
shapes that matter for class-name analysis. Anything else a host parser
produces is represented as `OtherExpr`, which always classifies as dynamic.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from typing import Union


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of a node in the template. Lines are 1-based, columns 0-based."""

    line: int
    column: int
    end_line: int
    end_column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


# ---------------------------------------------------------------------------
# Expression nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StringLiteral:
    value: str
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class Identifier:
    name: str
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class MemberAccess:
    """`object.property` (or `object[property]` when computed)."""

    object: ExpressionNode
    property: ExpressionNode
    computed: bool = False
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class SpreadExpr:
    """`...argument` inside an array or object literal."""

    argument: ExpressionNode
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class Property:
    """
    A single `key: value` member of an object literal.

    `computed` marks `[key]: value`, `shorthand` marks `{ key }`, and `method`
    marks `{ key() {} }`.
    """

    key: ExpressionNode
    value: ExpressionNode
    computed: bool = False
    shorthand: bool = False
    method: bool = False
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class ObjectExpr:
    properties: tuple[Property | SpreadExpr, ...] = ()
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class ArrayExpr:
    # `None` entries are elisions (`[a, , b]`).
    elements: tuple[ExpressionNode | SpreadExpr | None, ...] = ()
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class ConditionalExpr:
    test: ExpressionNode
    consequent: ExpressionNode
    alternate: ExpressionNode
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class OtherExpr:
    """Any expression shape not modelled above (calls, templates, numbers...)."""

    kind: str
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


ExpressionNode = Union[
    StringLiteral,
    Identifier,
    MemberAccess,
    ObjectExpr,
    ArrayExpr,
    ConditionalExpr,
    SpreadExpr,
    OtherExpr,
]

# Anything the classifier may report: an expression or an object property.
ReportedNode = Union[ExpressionNode, Property]


# ---------------------------------------------------------------------------
# Template attributes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LiteralValue:
    """Plain attribute text, e.g. the `"a b"` in `class="a b"`."""

    text: str
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class ExpressionContainer:
    """
    A bound value, e.g. the `"x"` in `:class="x"`.

    `expression` is `None` when the host could not parse the binding (empty
    `:class=""` or a syntax error).
    """

    expression: ExpressionNode | None
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


AttributeValue = Union[LiteralValue, ExpressionContainer]


@dataclass(frozen=True)
class Attribute:
    """
    One attribute or directive on a template element.

    For plain attributes `key` is the attribute name. For directives `key` is
    the directive name without the `v-` prefix (`"bind"` for both `v-bind:x`
    and `:x`) and `argument` is its static argument, or `None` when the
    argument is missing or dynamic (`:[name]`).
    """

    key: str
    value: AttributeValue | None = None
    directive: bool = False
    argument: str | None = None
    loc: SourceLocation | None = field(default=None, kw_only=True, compare=False)


# ---------------------------------------------------------------------------
# Component scope
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PropDeclaration:
    """A declared component prop. `prop_name` is `None` for computed keys."""

    prop_name: str | None
    node: ExpressionNode | Property | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ComponentScope:
    """
    Props declared by one component, grouped by authoring style.

    `setup_props` comes from `defineProps(...)` in `<script setup>`;
    `options_props` comes from the `props` field of an options object. `None`
    means the style is not used by this component.
    """

    setup_props: tuple[PropDeclaration, ...] | None = None
    options_props: tuple[PropDeclaration, ...] | None = None


@dataclass(frozen=True)
class AllowedNames:
    """
    Names that may appear as bare identifiers in a class binding.

    Built once per component scope; the first entry is always `"class"`.
    """

    names: tuple[str, ...] = ("class",)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


@dataclass
class Diagnostic:
    """A dynamic class usage found in a template."""

    node: ReportedNode
    message: str
    rule_id: str = ""

    @property
    def loc(self) -> SourceLocation | None:
        return self.node.loc

    def __str__(self) -> str:
        where = f"line {self.loc}" if self.loc else "unknown location"
        return f"{where}: {self.message}"
