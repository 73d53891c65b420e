# topmark:header:start
#
#   project      : DocMark
#   file         : types.py
#   file_relpath : src/docmark/ast/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type expression nodes produced by the type grammar.

All nodes are frozen dataclasses; ``str(node)`` renders the compact canonical
form used when a structured tag value has to be synthesized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class IdentifierType:
    """A plain or namespaced type name (``int``, ``\\Foo\\Bar``)."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ThisType:
    """The ``$this`` type."""

    def __str__(self) -> str:
        return "$this"


@dataclass(frozen=True)
class ConstType:
    """A constant expression used as a type (``'foo'``, ``42``, ``Foo::BAR``)."""

    expression: str

    def __str__(self) -> str:
        return self.expression


@dataclass(frozen=True)
class NullableType:
    """``?T``."""

    inner: TypeNode

    def __str__(self) -> str:
        return f"?{self.inner}"


@dataclass(frozen=True)
class UnionType:
    """``A|B|C``."""

    types: tuple[TypeNode, ...]

    def __str__(self) -> str:
        return "|".join(_wrap_compound(t) for t in self.types)


@dataclass(frozen=True)
class IntersectionType:
    """``A&B``."""

    types: tuple[TypeNode, ...]

    def __str__(self) -> str:
        return "&".join(_wrap_compound(t) for t in self.types)


@dataclass(frozen=True)
class ArrayType:
    """``T[]``."""

    inner: TypeNode

    def __str__(self) -> str:
        inner: TypeNode = self.inner
        if isinstance(inner, (UnionType, IntersectionType, NullableType, CallableType)):
            return f"({inner})[]"
        return f"{inner}[]"


@dataclass(frozen=True)
class GenericType:
    """``base<T1, T2>``."""

    base: IdentifierType
    parameters: tuple[TypeNode, ...]

    def __str__(self) -> str:
        return f"{self.base}<{', '.join(str(p) for p in self.parameters)}>"


@dataclass(frozen=True)
class ArrayShapeItem:
    """One ``key?: type`` entry of an array shape (key may be absent)."""

    key: str | None
    optional: bool
    value: TypeNode

    def __str__(self) -> str:
        if self.key is None:
            return str(self.value)
        return f"{self.key}{'?' if self.optional else ''}: {self.value}"


@dataclass(frozen=True)
class ArrayShapeType:
    """``array{a: int, b?: string}`` (or ``list{...}``)."""

    kind: str
    items: tuple[ArrayShapeItem, ...]

    def __str__(self) -> str:
        return f"{self.kind}{{{', '.join(str(i) for i in self.items)}}}"


@dataclass(frozen=True)
class CallableParameter:
    """One parameter of a callable type."""

    type: TypeNode
    is_reference: bool = False
    is_variadic: bool = False
    name: str = ""
    is_optional: bool = False

    def __str__(self) -> str:
        out: str = str(self.type)
        modifiers: str = ("&" if self.is_reference else "") + ("..." if self.is_variadic else "")
        if modifiers or self.name:
            out += f" {modifiers}{self.name}"
        if self.is_optional:
            out += "="
        return out


@dataclass(frozen=True)
class CallableType:
    """``callable(int, string): void`` / ``Closure(): mixed``."""

    identifier: IdentifierType
    parameters: tuple[CallableParameter, ...]
    return_type: TypeNode

    def __str__(self) -> str:
        params: str = ", ".join(str(p) for p in self.parameters)
        ret: str = _wrap_compound(self.return_type)
        return f"{self.identifier}({params}): {ret}"


TypeNode: TypeAlias = (
    IdentifierType
    | ThisType
    | ConstType
    | NullableType
    | UnionType
    | IntersectionType
    | ArrayType
    | GenericType
    | ArrayShapeType
    | CallableType
)


def _wrap_compound(node: TypeNode) -> str:
    if isinstance(node, (UnionType, IntersectionType, CallableType)):
        return f"({node})"
    return str(node)
