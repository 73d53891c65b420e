# topmark:header:start
#
#   project      : DocMark
#   file         : values.py
#   file_relpath : src/docmark/ast/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag value variants.

A `TagNode` carries exactly one value. Structured variants (param, return, var,
throws) are produced by the built-in grammars; `AnnotationValue` by the nested
annotation grammar when the tag name resolves to a fully-qualified name;
`GenericValue` keeps any other payload verbatim. ``str(value)`` renders the text
printed after the tag name when the tag has to be synthesized.

Values are mutable on purpose: collaborators may edit them in place, and the
printer detects the edit by comparing against the baseline snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

if TYPE_CHECKING:
    from docmark.ast.types import TypeNode


class ValueKind(Enum):
    """Discriminator of the tag value variants."""

    GENERIC = "generic"
    PARAM = "param"
    RETURN = "return"
    VAR = "var"
    THROWS = "throws"
    ANNOTATION = "annotation"
    EMPTY = "empty"

    @property
    def is_structural(self) -> bool:
        """True for the variants produced by the built-in type grammars."""
        return self in (ValueKind.PARAM, ValueKind.RETURN, ValueKind.VAR, ValueKind.THROWS)


def _join(*parts: str) -> str:
    return " ".join(p for p in parts if p)


@dataclass
class GenericValue:
    """Unparsed payload, kept exactly as written."""

    kind: ClassVar[ValueKind] = ValueKind.GENERIC

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class EmptyValue:
    """A tag without payload (``@required``)."""

    kind: ClassVar[ValueKind] = ValueKind.EMPTY

    def __str__(self) -> str:
        return ""


@dataclass
class ParamValue:
    """``@param Type [&][...]$name description``."""

    kind: ClassVar[ValueKind] = ValueKind.PARAM

    type: TypeNode
    parameter_name: str
    description: str = ""
    is_variadic: bool = False
    is_reference: bool = False

    def __str__(self) -> str:
        prefix: str = ("&" if self.is_reference else "") + ("..." if self.is_variadic else "")
        return _join(str(self.type), prefix + self.parameter_name, self.description)


@dataclass
class ReturnValue:
    """``@return Type description``."""

    kind: ClassVar[ValueKind] = ValueKind.RETURN

    type: TypeNode
    description: str = ""

    def __str__(self) -> str:
        return _join(str(self.type), self.description)


@dataclass
class VarValue:
    """``@var Type [$name] description``."""

    kind: ClassVar[ValueKind] = ValueKind.VAR

    type: TypeNode
    variable_name: str = ""
    description: str = ""

    def __str__(self) -> str:
        return _join(str(self.type), self.variable_name, self.description)


@dataclass
class ThrowsValue:
    """``@throws Type description``."""

    kind: ClassVar[ValueKind] = ValueKind.THROWS

    type: TypeNode
    description: str = ""

    def __str__(self) -> str:
        return _join(str(self.type), self.description)


@dataclass(frozen=True)
class ConstantReference:
    """A class constant or bare constant used as an annotation argument (``Foo::BAR``)."""

    expression: str

    def __str__(self) -> str:
        return self.expression


class PositionalArguments(list[Any]):
    """Values of repeated positional arguments; printed spread, not as ``{...}``."""


ArgumentValue: TypeAlias = Any
"""str | int | float | bool | None | ConstantReference | list | dict | AnnotationValue"""


@dataclass
class AnnotationValue:
    """Nested annotation payload (``@ORM\\Column(type="string", length=10)``).

    Attributes:
        fqn (str): Fully-qualified name the tag (or nested name) resolved to.
        name (str): The name as written, without the ``@`` marker.
        raw (str): Original payload text (``(type="string")``), empty when synthesized.
        values (dict[str, ArgumentValue]): Arguments in source order.
        silent_key (str | None): Key receiving positional arguments, if configured.
    """

    kind: ClassVar[ValueKind] = ValueKind.ANNOTATION

    fqn: str
    name: str = ""
    raw: str = ""
    values: dict[str, ArgumentValue] = field(default_factory=dict)
    silent_key: str | None = None

    def get(self, key: str, default: ArgumentValue = None) -> ArgumentValue:
        """Return argument ``key`` (or ``default``)."""
        return self.values.get(key, default)

    def get_silent_value(self) -> ArgumentValue:
        """Return the positional argument, looked up under the silent key or ``value``."""
        return self.values.get(self.silent_key or "value")

    def __str__(self) -> str:
        if not self.values:
            return "()" if self.raw.strip() else ""
        positional_key: str = self.silent_key or "value"
        args: list[str] = []
        for key, val in self.values.items():
            if key == positional_key and not args:
                if isinstance(val, PositionalArguments) and len(val) > 1:
                    args.extend(render_argument(v) for v in val)
                else:
                    args.append(render_argument(val))
            else:
                args.append(f"{key}={render_argument(val)}")
        return f"({', '.join(args)})"


def render_argument(value: ArgumentValue) -> str:
    """Render an annotation argument value in annotation syntax.

    Args:
        value (ArgumentValue): Scalar, constant, collection or nested annotation.

    Returns:
        str: The synthesized argument text.
    """
    if isinstance(value, AnnotationValue):
        return f"@{value.name or value.fqn}{value}"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return '"' + value.replace('"', '\\"') + '"'
    if isinstance(value, list):
        return "{" + ", ".join(render_argument(v) for v in value) + "}"
    if isinstance(value, dict):
        items: list[str] = [
            f"{render_argument(k) if isinstance(k, str) else k}: {render_argument(v)}"
            for k, v in value.items()
        ]
        return "{" + ", ".join(items) + "}"
    return str(value)


ValueNode: TypeAlias = (
    GenericValue | EmptyValue | ParamValue | ReturnValue | VarValue | ThrowsValue | AnnotationValue
)


def description_of(value: ValueNode) -> str | None:
    """Return the description component of a structured value, or None if it has none."""
    description: str | None = getattr(value, "description", None)
    return description


def default_separator(value: ValueNode) -> str:
    """Separator between a tag name and a synthesized value when the source offers none.

    Structured kinds get one space. Annotation values and generic payloads that
    open their own parenthesis get none, as do empty values. Any other payload gets
    one space.
    """
    if value.kind.is_structural:
        return " "
    if value.kind in (ValueKind.ANNOTATION, ValueKind.EMPTY):
        return ""
    text: str = str(value).lstrip()
    if not text or text.startswith("("):
        return ""
    return " "
