# topmark:header:start
#
#   project      : DocMark
#   file         : spacing.py
#   file_relpath : src/docmark/printer/spacing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Separator between a tag name and its synthesized value.

Resolution order:
    1. The separator the original text used for this tag, found with a pattern
       anchored at the tag's character offset. Structural tags look for the name,
       whitespace and (when present) the variable name later on the line; other
       tags look for the name, optional whitespace and the first line of the
       original payload. An empty separator is only accepted for payloads that
       open with ``(``.
    2. One space for structural tags.
    3. The value's own default: nothing for annotations, empty values and
       parenthesised payloads, one space otherwise.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from docmark.ast.values import AnnotationValue, ParamValue, VarValue, default_separator
from docmark.config.logging import DocmarkLogger, get_logger

if TYPE_CHECKING:
    from docmark.ast.nodes import TagNode

logger: DocmarkLogger = get_logger(__name__)


def _variable_of(tag: TagNode) -> str:
    value = tag.value
    if isinstance(value, ParamValue):
        return value.parameter_name
    if isinstance(value, VarValue):
        return value.variable_name
    return ""


def _original_payload(baseline_tag: TagNode) -> str:
    value = baseline_tag.value
    if isinstance(value, AnnotationValue):
        return value.raw
    return str(value)


def _pattern_for(tag: TagNode, baseline_tag: TagNode | None) -> re.Pattern[str] | None:
    name: str = re.escape(tag.name)
    if tag.value.kind.is_structural:
        variable: str = _variable_of(tag)
        tail: str = rf"[^\r\n]*?{re.escape(variable)}" if variable else ""
        return re.compile(rf"{name}(?P<space>[ \t]+){tail}", re.IGNORECASE)
    if baseline_tag is None:
        return None
    payload: str = _original_payload(baseline_tag).lstrip()
    if not payload:
        return None
    first_line: str = payload.split("\n", 1)[0]
    return re.compile(rf"{name}(?P<space>[ \t]*){re.escape(first_line)}", re.IGNORECASE)


def resolve_separator(
    tag: TagNode,
    *,
    original_text: str = "",
    offset: int | None = None,
    baseline_tag: TagNode | None = None,
) -> str:
    """Return the text to place between ``tag.name`` and its synthesized value.

    Args:
        tag (TagNode): The tag being synthesized.
        original_text (str): Full original docblock text.
        offset (int | None): Character offset of the tag in ``original_text``; None
            for tags that do not come from the original text.
        baseline_tag (TagNode | None): The tag as originally parsed, if any.

    Returns:
        str: The separator.
    """
    if offset is not None and original_text:
        pattern: re.Pattern[str] | None = _pattern_for(tag, baseline_tag)
        if pattern is not None:
            match: re.Match[str] | None = pattern.match(original_text, offset)
            if match is not None:
                space: str = match.group("space")
                if space or str(tag.value).lstrip().startswith("("):
                    logger.trace("Reusing separator %r for %s", space, tag.name)
                    return space

    if tag.value.kind.is_structural:
        return " "
    return default_separator(tag.value)
