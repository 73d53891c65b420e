# topmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark package.

DocMark is a format-preserving docblock engine. It parses ``/** ... */`` comments
into a mutable tree of text and tag nodes, lets callers edit that tree, and prints
it back so that every untouched byte of the original comment is reproduced
verbatim while edited or new content is synthesized with consistent formatting.
"""

from __future__ import annotations
