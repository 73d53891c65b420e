# topmark:header:start
#
#   project      : DocMark
#   file         : nodes.py
#   file_relpath : src/docmark/resolution/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accessor for the host node a docblock is attached to."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class CurrentNodeProvider:
    """Holds the host node currently being processed by the caller."""

    def __init__(self) -> None:
        self._node: Any | None = None

    @property
    def node(self) -> Any | None:
        """The current host node, or None."""
        return self._node

    def set(self, node: Any | None) -> None:
        """Replace the current host node."""
        self._node = node

    @contextmanager
    def scoped(self, node: Any | None) -> Iterator[Any | None]:
        """Make ``node`` current for the duration of a ``with`` block."""
        previous: Any | None = self._node
        self._node = node
        try:
            yield node
        finally:
            self._node = previous
