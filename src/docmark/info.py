# topmark:header:start
#
#   project      : DocMark
#   file         : info.py
#   file_relpath : src/docmark/info.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsed docblock: working tree, baseline snapshot and original tokens.

`DocblockInfo` is what collaborators hold between parsing and printing. The working
tree may be mutated any number of times; the baseline snapshot and token stream are
never modified, so the docblock can be printed again at any point.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from docmark.ast.nodes import DocblockTree, TagNode
from docmark.ast.values import AnnotationValue, ParamValue, ValueKind, description_of
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.errors import DocmarkError

if TYPE_CHECKING:
    from docmark.ast.nodes import ChildNode
    from docmark.ast.values import ValueNode
    from docmark.core.diagnostics import Diagnostic
    from docmark.lexer.stream import TokenStream

logger: DocmarkLogger = get_logger(__name__)


class DocblockInfo:
    """A docblock tree together with what is needed to print it faithfully.

    Args:
        tree (DocblockTree): Working tree.
        tokens (TokenStream): Original tokens (empty for synthesized docblocks).
        baseline (DocblockTree | None): Snapshot of the tree as parsed; a deep copy of
            ``tree`` is taken when omitted.
        diagnostics (list[Diagnostic] | None): Recoverable problems found while parsing.
        host_node (Any | None): Host node the docblock is attached to.
    """

    def __init__(
        self,
        tree: DocblockTree,
        tokens: TokenStream,
        baseline: DocblockTree | None = None,
        diagnostics: list[Diagnostic] | None = None,
        host_node: Any | None = None,
    ) -> None:
        self._tree: DocblockTree = tree
        self._baseline: DocblockTree = baseline if baseline is not None else copy.deepcopy(tree)
        self._tokens: TokenStream = tokens
        self._diagnostics: list[Diagnostic] = list(diagnostics or [])
        self._host_node: Any | None = host_node

    # ---- accessors -----------------------------------------------------------------------

    @property
    def tree(self) -> DocblockTree:
        """The working tree."""
        return self._tree

    @property
    def baseline(self) -> DocblockTree:
        """The tree as originally parsed (never mutated)."""
        return self._baseline

    @property
    def tokens(self) -> TokenStream:
        """The original token stream."""
        return self._tokens

    @property
    def original_text(self) -> str:
        """The original docblock text."""
        return self._tokens.full_text()

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Recoverable problems found while parsing."""
        return list(self._diagnostics)

    @property
    def host_node(self) -> Any | None:
        """Host node the docblock is attached to, if any."""
        return self._host_node

    def as_tuple(self) -> tuple[DocblockTree, DocblockTree, TokenStream]:
        """Return ``(tree, baseline, tokens)``, the inputs of `DocblockPrinter.print`."""
        return self._tree, self._baseline, self._tokens

    # ---- mutations -----------------------------------------------------------------------

    def add_child(self, child: ChildNode) -> None:
        """Append ``child`` to the working tree."""
        self._tree.children.append(child)

    def add_tag(self, name: str, value: ValueNode) -> TagNode:
        """Append a new ``@name value`` tag and return it."""
        tag = TagNode(name="@" + name.lstrip("@"), value=value)
        self.add_child(tag)
        return tag

    def insert_child(self, index: int, child: ChildNode) -> None:
        """Insert ``child`` before position ``index`` of the working tree."""
        self._tree.children.insert(index, child)

    def remove_child(self, child: ChildNode) -> None:
        """Remove ``child`` (matched by identity) from the working tree.

        Raises:
            DocmarkError: If ``child`` is not part of the working tree.
        """
        self.remove_at(self._index_of(child))

    def remove_at(self, index: int) -> ChildNode:
        """Remove and return the child at ``index``."""
        child: ChildNode = self._tree.children.pop(index)
        logger.debug("Removed child %d (%s)", index, type(child).__name__)
        return child

    def remove_by_name(self, name: str) -> int:
        """Remove every tag named ``name`` (``@`` optional); return how many were removed."""
        wanted: str = "@" + name.lstrip("@").lower()
        before: int = len(self._tree.children)
        self._tree.children[:] = [
            c
            for c in self._tree.children
            if not (isinstance(c, TagNode) and c.name.lower() == wanted)
        ]
        return before - len(self._tree.children)

    def replace_child(self, old: ChildNode, new: ChildNode) -> None:
        """Replace ``old`` (matched by identity) with ``new``."""
        self._tree.children[self._index_of(old)] = new

    def replace_value(self, tag: TagNode, value: ValueNode, keep_position: bool = True) -> None:
        """Replace the value of ``tag`` in place.

        Args:
            tag (TagNode): A tag of the working tree.
            value (ValueNode): The new value.
            keep_position (bool): Keep the tag's position range so that it is
                re-synthesized where it stands; when False the tag is treated as new
                and printed on a line of its own.
        """
        if description_of(value) != description_of(tag.value):
            tag.original_description = None
        tag.value = value
        if not keep_position:
            tag.position = None

    def make_single_line(self) -> None:
        """Flag the tree to be printed in the inline ``/** ... */`` form."""
        self._tree.single_line = True

    def _index_of(self, child: ChildNode) -> int:
        for index, candidate in enumerate(self._tree.children):
            if candidate is child:
                return index
        raise DocmarkError(f"Child is not part of this docblock: {child!r}")

    # ---- queries -------------------------------------------------------------------------

    def get_tags_by_name(self, name: str) -> list[TagNode]:
        """Return the tags named ``name`` (``@`` optional, case-insensitive)."""
        wanted: str = "@" + name.lstrip("@").lower()
        return [t for t in self._tree.tags() if t.name.lower() == wanted]

    def has_by_name(self, name: str) -> bool:
        """Return True if a tag named ``name`` exists."""
        return bool(self.get_tags_by_name(name))

    def get_by_type(self, value_type: type | ValueKind) -> ValueNode | None:
        """Return the first tag value of the given class or `ValueKind`, or None."""
        for tag in self._tree.tags():
            value: ValueNode = tag.value
            if isinstance(value_type, ValueKind):
                if value.kind == value_type:
                    return value
            elif isinstance(value, value_type):
                return value
        return None

    def get_param_by_name(self, name: str) -> ParamValue | None:
        """Return the ``@param`` value of parameter ``name`` (``$`` optional), or None."""
        wanted: str = "$" + name.lstrip("$")
        for tag in self._tree.tags():
            if isinstance(tag.value, ParamValue) and tag.value.parameter_name == wanted:
                return tag.value
        return None

    def get_by_annotation_class(self, fqn: str) -> AnnotationValue | None:
        """Return the first annotation resolving to ``fqn``, or None."""
        wanted: str = fqn.strip("\\").lower()
        for tag in self._tree.tags():
            value: ValueNode = tag.value
            if isinstance(value, AnnotationValue) and value.fqn.strip("\\").lower() == wanted:
                return value
        return None

    def has_by_annotation_class(self, fqn: str) -> bool:
        """Return True if a tag resolves to the annotation class ``fqn``."""
        return self.get_by_annotation_class(fqn) is not None

    def is_empty(self) -> bool:
        """Return True if the tree has no children or only empty text lines."""
        return self._tree.is_effectively_empty()

    def has_changed(self) -> bool:
        """Return True if the working tree differs from the baseline."""
        return self._tree != self._baseline
