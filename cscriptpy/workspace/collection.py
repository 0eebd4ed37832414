"""Diagnostic sink contract and an in-memory implementation."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from typing import Protocol

from cscriptpy.diagnostics import Diagnostic


class DiagnosticSink(Protocol):
    """Receives whole diagnostic sets keyed by document identity."""

    def set(self, identity: Hashable, diagnostics: Sequence[Diagnostic]) -> None:
        """Replace every diagnostic shown for `identity`."""
        ...

    def delete(self, identity: Hashable) -> None:
        """Forget every diagnostic shown for `identity`."""
        ...


class DiagnosticCollection:
    """Diagnostics per document, where each `set` replaces the previous set."""

    def __init__(self, name: str = "cscript") -> None:
        self._name = name
        self._entries: dict[Hashable, tuple[Diagnostic, ...]] = {}

    @property
    def name(self) -> str:
        return self._name

    def set(self, identity: Hashable, diagnostics: Sequence[Diagnostic]) -> None:
        self._entries[identity] = tuple(diagnostics)

    def delete(self, identity: Hashable) -> None:
        self._entries.pop(identity, None)

    def get(self, identity: Hashable) -> tuple[Diagnostic, ...]:
        return self._entries.get(identity, ())

    def has(self, identity: Hashable) -> bool:
        return identity in self._entries

    def identities(self) -> tuple[Hashable, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[tuple[Hashable, tuple[Diagnostic, ...]]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)
