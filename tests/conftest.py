from __future__ import annotations

from pathlib import Path

import pytest

from adapters.zoneinfo_database import ZoneInfoDatabase

_ENV_VARS = (
    "TZ",
    "LOG_LEVEL",
    "DATEZ_LOCAL_ZONE",
    "DATEZ_LOCAL_ZONE_ENV_VAR",
    "DATEZ_SHOW_LOCAL",
    "DATEZ_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_host(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A host whose local zone cannot be discovered unless a test sets one."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("DATEZ_LOCALTIME_PATH", str(tmp_path / "missing-localtime"))
    return tmp_path


@pytest.fixture
def database() -> ZoneInfoDatabase:
    return ZoneInfoDatabase()


@pytest.fixture
def localtime_link(tmp_path: Path):
    """Factory: create a localtime symlink pointing into a fake zoneinfo tree."""

    def _make(zone_id: str) -> Path:
        target = tmp_path / "usr" / "share" / "zoneinfo" / zone_id
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"TZif")
        link = tmp_path / "localtime"
        link.symlink_to(target)
        return link

    return _make
