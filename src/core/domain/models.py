"""Modelos del dominio (Pydantic v2).

Qué contiene:
- `NaiveTimestamp`: campos de reloj de pared tal como llegan por la CLI.
- `Instant`: el punto absoluto en el tiempo (UTC) del que derivan todas las
  proyecciones.
- `ZonedTime`: un `Instant` visto desde una zona concreta, solo para mostrar.

Todos son inmutables (`frozen=True`): un valor fluye por el pipeline una
única vez y no se modifica.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import AwareDatetime, BaseModel, Field, NaiveDatetime, field_validator, model_validator
from pydantic.config import ConfigDict

UTC_ZONE = "UTC"
# tz database links to Etc/UTC; a local zone with one of these names repeats the UTC line.
UTC_ALIASES = frozenset(
    {"UTC", "Etc/UTC", "Etc/UCT", "Etc/Zulu", "Etc/Universal", "UCT", "Universal", "Zulu"}
)


class NaiveTimestamp(BaseModel):
    """Wall-clock fields without any UTC offset attached."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)
    microsecond: int = Field(default=0, ge=0, le=999_999)
    precision: int = Field(
        default=0,
        ge=0,
        le=6,
        description="Number of fractional-second digits given in the input.",
    )

    @model_validator(mode="after")
    def _check_calendar_date(self) -> "NaiveTimestamp":
        # Raises ValueError for e.g. February 30th.
        self.to_datetime()
        return self

    @classmethod
    def from_datetime(cls, value: datetime, precision: int = 0) -> "NaiveTimestamp":
        if value.tzinfo is not None:
            raise ValueError("naive timestamps cannot carry a tzinfo")
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            microsecond=value.microsecond,
            precision=precision,
        )

    def to_datetime(self) -> datetime:
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.microsecond,
        )


class Instant(BaseModel):
    """Absolute point in time, independent of any zone.

    `moment` is always normalized to UTC, so two instants built from different
    zones compare equal when they denote the same point in time.
    """

    model_config = ConfigDict(frozen=True)

    moment: AwareDatetime = Field(..., description="The instant as a UTC-aware datetime.")
    precision: int = Field(default=0, ge=0, le=6)

    @field_validator("moment")
    @classmethod
    def _normalize_to_utc(cls, value: datetime) -> datetime:
        return value.astimezone(timezone.utc)


class ZonedTime(BaseModel):
    """An `Instant` projected into a zone: offset plus local wall clock."""

    model_config = ConfigDict(frozen=True)

    instant: Instant
    zone_id: str = Field(..., min_length=1)
    offset: timedelta
    local: NaiveDatetime = Field(..., description="Wall-clock fields in `zone_id`.")

    @property
    def label(self) -> str:
        return UTC_ZONE if self.zone_id == UTC_ZONE else self.zone_id

    @property
    def precision(self) -> int:
        return self.instant.precision
