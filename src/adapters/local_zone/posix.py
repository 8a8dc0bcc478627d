"""Fuente POSIX: el destino del symlink `/etc/localtime`.

Linux, macOS y los BSD enlazan `/etc/localtime` a un fichero dentro de un
árbol zoneinfo; el identificador de zona se deduce de esa ruta.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from adapters.local_zone.paths import zone_candidates_from_path
from core.interfaces.local_zone import LocalZoneSource

logger = logging.getLogger(__name__)

DEFAULT_LOCALTIME_PATH = Path("/etc/localtime")


class SymlinkZoneSource(LocalZoneSource):
    """Derives the zone id from the target of the localtime symlink."""

    name = "posix:localtime"

    def __init__(self, path: Path = DEFAULT_LOCALTIME_PATH) -> None:
        self.path = Path(path)

    def candidates(self) -> Iterator[str]:
        try:
            # readlink, not resolve
            target = os.readlink(self.path)
        except OSError as exc:
            logger.debug("cannot read symlink %s: %s", self.path, exc)
            return
        logger.debug("%s -> %s", self.path, target)
        yield from zone_candidates_from_path(target)
