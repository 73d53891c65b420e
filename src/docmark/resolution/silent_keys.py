# topmark:header:start
#
#   project      : DocMark
#   file         : silent_keys.py
#   file_relpath : src/docmark/resolution/silent_keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Static table of silent (default) argument keys per annotation class."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class SilentKeyMap(Mapping[str, str]):
    """Read-only FQN to silent-key table.

    Lookups ignore a leading backslash and letter case of the FQN. Nothing is
    inferred: an FQN without an entry has no silent key.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = {
            self._normalize(k): v for k, v in (entries or {}).items()
        }

    @staticmethod
    def _normalize(fqn: str) -> str:
        return fqn.strip("\\").lower()

    def lookup(self, fqn: str) -> str | None:
        """Return the silent key configured for ``fqn``, or None."""
        return self._entries.get(self._normalize(fqn))

    def __getitem__(self, fqn: str) -> str:
        return self._entries[self._normalize(fqn)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
