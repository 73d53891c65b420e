# topmark:header:start
#
#   project      : DocMark
#   file         : nodes.py
#   file_relpath : src/docmark/ast/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docblock tree nodes.

Nodes derived from parsed input carry a `PositionRange` tying them back to their
exact source tokens. Synthesized nodes carry none. The position range is also the
node's identity when the printer diffs a working tree against its baseline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from docmark.ast.values import default_separator
from docmark.errors import ShouldNotHappenError

if TYPE_CHECKING:
    from docmark.ast.values import ValueNode


@dataclass(frozen=True)
class PositionRange:
    """Half-open token interval ``[start, end)``.

    Raises:
        ShouldNotHappenError: If ``start`` is negative or greater than ``end``.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise ShouldNotHappenError(f"Invalid position range [{self.start}, {self.end})")

    def check_within(self, token_count: int) -> None:
        """Raise `ShouldNotHappenError` if the range extends past ``token_count``."""
        if self.end > token_count:
            raise ShouldNotHappenError(
                f"Position range [{self.start}, {self.end}) exceeds {token_count} tokens"
            )

    def __len__(self) -> int:
        return self.end - self.start


@dataclass
class TextNode:
    """A free-text line (or an empty line) of a docblock."""

    text: str
    position: PositionRange | None = None

    def __str__(self) -> str:
        return self.text


@dataclass
class TagNode:
    """An ``@name value`` entry.

    Attributes:
        name (str): Tag name including the ``@`` marker.
        value (ValueNode): The parsed payload.
        position (PositionRange | None): Source tokens of the whole tag, if parsed.
        original_description (str | None): Verbatim description text, recorded when it
            differs from the whitespace-normalized description held by the value.
    """

    name: str
    value: ValueNode
    position: PositionRange | None = None
    original_description: str | None = None

    def __str__(self) -> str:
        return f"{self.name}{default_separator(self.value)}{str(self.value).lstrip()}"


ChildNode: TypeAlias = TextNode | TagNode


@dataclass
class DocblockTree:
    """Root of a parsed (or synthesized) docblock.

    Attributes:
        children (list[ChildNode]): Children in rendering order.
        single_line (bool): Render as ``/** ... */`` on one physical line.
    """

    children: list[ChildNode] = field(default_factory=list)
    single_line: bool = False

    def is_effectively_empty(self) -> bool:
        """Return True if the tree has no children or only empty text lines."""
        return all(isinstance(c, TextNode) and c.text == "" for c in self.children)

    def tags(self) -> list[TagNode]:
        """Return the tag children in order."""
        return [c for c in self.children if isinstance(c, TagNode)]
