# topmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/resolution/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semantic context consumed by the parser.

Whether a tag payload is parsed as a nested annotation depends on the code the
docblock is attached to, not on the comment text alone. This package defines the
collaborator boundary for that decision:

    - `NameResolver`: maps a tag name (in the context of a host node) to a
      fully-qualified annotation name.
    - `SilentKeyMap`: static table of the argument key receiving positional values.
    - `CurrentNodeProvider`: exposes the host node currently being processed.
"""

from __future__ import annotations

from docmark.resolution.names import AliasNameResolver, NameResolver, NullNameResolver
from docmark.resolution.nodes import CurrentNodeProvider
from docmark.resolution.silent_keys import SilentKeyMap

__all__ = [
    "AliasNameResolver",
    "CurrentNodeProvider",
    "NameResolver",
    "NullNameResolver",
    "SilentKeyMap",
]
