"""Extracción de identificadores de zona desde rutas de ficheros tz."""

from __future__ import annotations

from pathlib import PurePath

ZONEINFO_MARKER = "zoneinfo"


def zone_candidates_from_path(path: str | PurePath) -> list[str]:
    """Candidate zone ids encoded in a path into a zoneinfo tree.

    Order:
    1) everything after the last `zoneinfo` component
       (`/usr/share/zoneinfo/America/Argentina/Salta` -> `America/Argentina/Salta`)
    2) the last two components (`.../Europe/Paris` -> `Europe/Paris`)
    3) the last component (`.../UTC` -> `UTC`)
    """

    parts = [p for p in PurePath(path).parts if p not in ("/", "\\", "", ".", "..")]
    candidates: list[str] = []

    if ZONEINFO_MARKER in parts:
        idx = len(parts) - 1 - parts[::-1].index(ZONEINFO_MARKER)
        tail = parts[idx + 1 :]
        if tail:
            candidates.append("/".join(tail))

    if len(parts) >= 2:
        candidates.append("/".join(parts[-2:]))
    if parts:
        candidates.append(parts[-1])

    seen: set[str] = set()
    unique: list[str] = []
    for candidate in candidates:
        if candidate not in seen:
            seen.add(candidate)
            unique.append(candidate)
    return unique
