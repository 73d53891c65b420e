# topmark:header:start
#
#   project      : DocMark
#   file         : names.py
#   file_relpath : src/docmark/resolution/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag name resolution.

A resolver returns the fully-qualified name of an annotation class for a tag name
such as ``@ORM\\Column``, or None when the name is unknown in the current context.
An unknown name is not an error: the payload stays generic.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from docmark.config.logging import DocmarkLogger, get_logger

logger: DocmarkLogger = get_logger(__name__)


class NameResolver(Protocol):
    """Capability used by the parser to resolve annotation names."""

    def resolve(self, tag_name: str, host_node: Any | None) -> str | None:
        """Return the fully-qualified name for ``tag_name``, or None."""
        ...


class NullNameResolver:
    """Resolver that knows no names; every payload stays generic."""

    def resolve(self, tag_name: str, host_node: Any | None) -> str | None:
        """Always return None."""
        return None


class AliasNameResolver:
    """Resolve names through namespace aliases (``use`` imports).

    The first namespace segment of the tag name is looked up in the alias table:
    with ``ORM = Doctrine\\ORM\\Mapping``, ``@ORM\\Column`` resolves to
    ``Doctrine\\ORM\\Mapping\\Column``. A single-segment name resolves when it is
    itself an alias (``Route = Symfony\\Component\\Routing\\Annotation\\Route``).

    When the host node exposes an ``imports`` mapping, its entries are merged over
    the configured aliases for that lookup.

    Args:
        aliases (Mapping[str, str]): Alias to namespace (or class) table.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases: dict[str, str] = {
            k.lower(): v.strip("\\") for k, v in (aliases or {}).items()
        }

    @property
    def aliases(self) -> dict[str, str]:
        """Configured aliases, keyed by lowercase alias."""
        return dict(self._aliases)

    def resolve(self, tag_name: str, host_node: Any | None) -> str | None:
        """Resolve ``tag_name`` (with or without ``@``) to a fully-qualified name.

        Args:
            tag_name (str): Tag name as written.
            host_node (Any | None): Host node; its ``imports`` mapping, if any,
                takes precedence over the configured aliases.

        Returns:
            str | None: The fully-qualified name, or None if unknown.
        """
        name: str = tag_name.lstrip("@").strip("\\")
        if not name:
            return None

        table: dict[str, str] = self._aliases
        imports: Any = getattr(host_node, "imports", None)
        if isinstance(imports, Mapping) and imports:
            table = {**table, **{k.lower(): v.strip("\\") for k, v in imports.items()}}

        head, sep, rest = name.partition("\\")
        target: str | None = table.get(head.lower())
        if target is None:
            return None
        fqn: str = f"{target}\\{rest}" if sep else target
        logger.trace("Resolved %s to %s", tag_name, fqn)
        return fqn
