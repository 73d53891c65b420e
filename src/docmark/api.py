# topmark:header:start
#
#   project      : DocMark
#   file         : api.py
#   file_relpath : src/docmark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for parsing, editing and printing docblocks.

`DocblockEngine` wires the lexer, parser, value resolver and printer from a
`Config`. The module-level helpers use a cached engine built from the default
configuration::

    from docmark import api

    info = api.parse("/**\\n * @var int $a\\n */")
    info.remove_by_name("var")
    text = api.print_format_preserving(info)

Round-trip guarantee: for any well-formed docblock ``X``,
``print_format_preserving(parse(X)) == X`` as long as the tree is not mutated.
"""

from __future__ import annotations

import copy
import functools
from typing import TYPE_CHECKING, Any

from docmark.ast.nodes import DocblockTree
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.config.model import Config, MutableConfig
from docmark.info import DocblockInfo
from docmark.lexer.lexer import Lexer
from docmark.lexer.stream import TokenStream
from docmark.parser.docblock import DocblockParser, ParseResult
from docmark.parser.matchers import FlagTagMatcher, TagMatcher
from docmark.parser.tags import StructuralKind
from docmark.parser.values import StructuredValueResolver
from docmark.printer.printer import DocblockPrinter
from docmark.resolution.names import AliasNameResolver, NameResolver
from docmark.resolution.nodes import CurrentNodeProvider
from docmark.resolution.silent_keys import SilentKeyMap

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: DocmarkLogger = get_logger(__name__)


class DocblockEngine:
    """Parse, query and print docblocks.

    Args:
        config (Config | None): Runtime configuration; defaults when omitted.
        name_resolver (NameResolver | None): Annotation name resolution; an
            `AliasNameResolver` over the configured aliases when omitted.
        matchers (Sequence[TagMatcher] | None): String matchers in priority order; a
            `FlagTagMatcher` over the configured flag tags when omitted.
        node_provider (CurrentNodeProvider | None): Source of the host node used when
            `parse` is called without one.
    """

    def __init__(
        self,
        config: Config | None = None,
        name_resolver: NameResolver | None = None,
        matchers: Sequence[TagMatcher] | None = None,
        node_provider: CurrentNodeProvider | None = None,
    ) -> None:
        self.config: Config = config or MutableConfig.from_defaults().freeze()
        self.name_resolver: NameResolver = name_resolver or AliasNameResolver(self.config.aliases)
        if matchers is None:
            matchers = [FlagTagMatcher(self.config.flag_tags)] if self.config.flag_tags else []
        self.matchers: tuple[TagMatcher, ...] = tuple(matchers)
        self.node_provider: CurrentNodeProvider = node_provider or CurrentNodeProvider()

        lexer = Lexer()
        resolver = StructuredValueResolver(
            structural_tags={
                name: StructuralKind(key) for name, key in self.config.structural_tag_map().items()
            },
            name_resolver=self.name_resolver,
            silent_keys=SilentKeyMap(self.config.silent_keys),
            lexer=lexer,
        )
        self._parser: DocblockParser = DocblockParser(resolver, self.matchers, lexer)
        self._printer: DocblockPrinter = DocblockPrinter(newline=self.config.newline)

    def parse(self, text: str, host_node: Any | None = None) -> DocblockInfo:
        """Parse docblock ``text``.

        Args:
            text (str): Docblock text starting with ``/**``.
            host_node (Any | None): Host node for annotation name resolution; the
                node provider's current node when omitted.

        Returns:
            DocblockInfo: Working tree, baseline snapshot and tokens.

        Raises:
            ParserError: If ``text`` is not a docblock.
        """
        host: Any | None = host_node if host_node is not None else self.node_provider.node
        result: ParseResult = self._parser.parse(text, host)
        return DocblockInfo(
            tree=result.tree,
            tokens=result.stream,
            baseline=copy.deepcopy(result.tree),
            diagnostics=result.diagnostics,
            host_node=host,
        )

    def create_empty(self) -> DocblockInfo:
        """Return a docblock with no children and no original text."""
        return DocblockInfo(tree=DocblockTree(), tokens=TokenStream([]))

    def print(self, tree: DocblockTree, baseline: DocblockTree, tokens: TokenStream) -> str:
        """Render ``tree`` against its baseline and original tokens."""
        return self._printer.print(tree, baseline, tokens)

    def print_format_preserving(self, info: DocblockInfo) -> str:
        """Render ``info``, keeping untouched text byte-identical."""
        return self._printer.print_format_preserving(info)

    def print_new(self, info: DocblockInfo) -> str:
        """Render ``info`` from its model alone."""
        return self._printer.print_new(info)


@functools.lru_cache(maxsize=1)
def default_engine() -> DocblockEngine:
    """Return the shared engine built from the default configuration."""
    logger.debug("Creating default DocblockEngine")
    return DocblockEngine()


def parse(text: str, host_node: Any | None = None) -> DocblockInfo:
    """Parse ``text`` with the default engine."""
    return default_engine().parse(text, host_node)


def create_empty() -> DocblockInfo:
    """Return an empty docblock."""
    return default_engine().create_empty()


def print_docblock(tree: DocblockTree, baseline: DocblockTree, tokens: TokenStream) -> str:
    """Render ``tree`` against ``baseline`` and ``tokens`` with the default engine."""
    return default_engine().print(tree, baseline, tokens)


def print_format_preserving(info: DocblockInfo) -> str:
    """Render ``info`` with the default engine."""
    return default_engine().print_format_preserving(info)
