# topmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/ast/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docblock tree, tag value variants and type expression nodes."""

from __future__ import annotations

from docmark.ast.nodes import ChildNode, DocblockTree, PositionRange, TagNode, TextNode
from docmark.ast.values import (
    AnnotationValue,
    ConstantReference,
    EmptyValue,
    GenericValue,
    ParamValue,
    ReturnValue,
    ThrowsValue,
    ValueKind,
    ValueNode,
    VarValue,
)

__all__ = [
    "AnnotationValue",
    "ChildNode",
    "ConstantReference",
    "DocblockTree",
    "EmptyValue",
    "GenericValue",
    "ParamValue",
    "PositionRange",
    "ReturnValue",
    "TagNode",
    "TextNode",
    "ThrowsValue",
    "ValueKind",
    "ValueNode",
    "VarValue",
]
