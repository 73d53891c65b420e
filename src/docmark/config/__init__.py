# topmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark configuration: TOML loading, layered merging and logging setup.

Typical use::

    config = MutableConfig.load_merged(Path("docmark.toml")).freeze()
"""

from __future__ import annotations

from docmark.config.io import ConfigLoadError
from docmark.config.model import Config, MutableConfig

__all__ = ["Config", "ConfigLoadError", "MutableConfig"]
