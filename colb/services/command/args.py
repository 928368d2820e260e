"""
Append-only argument list shared by every command builder stage.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class ArgStack:
    """
    Ordered command-line tokens.

    Tokens are only ever appended; insertion order is the order they
    appear on the final command line.
    """

    def __init__(self) -> None:
        self._args: list[str] = []

    def arg(self, arg: str) -> ArgStack:
        """Append a single token and return self for chaining."""
        self._args.append(str(arg))
        return self

    def args(self, args: Iterable[str]) -> ArgStack:
        """Append each token of ``args`` in order."""
        for arg in args:
            self.arg(arg)
        return self

    def to_list(self) -> list[str]:
        return list(self._args)

    def __iter__(self) -> Iterator[str]:
        return iter(self._args)

    def __len__(self) -> int:
        return len(self._args)

    def __getitem__(self, index):
        return self._args[index]

    def __repr__(self) -> str:
        return f"ArgStack({self._args!r})"
