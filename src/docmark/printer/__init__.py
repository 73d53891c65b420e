# topmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/printer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-preserving rendering of docblock trees."""

from __future__ import annotations

from docmark.printer.printer import DocblockPrinter

__all__ = ["DocblockPrinter"]
