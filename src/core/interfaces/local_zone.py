"""Contrato de las fuentes de zona horaria local.

Cada plataforma (variable de entorno, symlink POSIX, registro de Windows)
implementa este Protocol; el resolver las recorre en orden.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class LocalZoneSource(Protocol):
    """A single way of discovering the host's zone identifier.

    Rules:
    - `candidates` yields zero or more identifiers, most specific first.
    - Discovery failures are not errors: the source just yields nothing.
    - Candidates are not validated here; the resolver checks them against the
      timezone database.
    """

    name: str

    def candidates(self) -> Iterator[str]:
        ...


@runtime_checkable
class LocalZoneLookup(Protocol):
    """Returns the host's zone id, or `None` when it cannot be discovered."""

    def resolve(self) -> str | None:
        ...
