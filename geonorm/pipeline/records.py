"""Row-level data carried from parsed input to the output CSV."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from geonorm.config import DD_OUTPUT_DECIMALS, OUTPUT_COLUMNS
from geonorm.distance import Distance
from geonorm.geo import AngleValue, CoordinatePair
from geonorm.notation import format_as_dms
from geonorm.proximity import Nearly
from geonorm.rounding import round_half_away


@dataclass(frozen=True)
class NormalizedCoord:
    """One coordinate field as read, as decimal degrees and as DMS."""

    input: str
    dd: float
    dms: str

    @classmethod
    def from_angle(cls, raw: str, angle: AngleValue) -> NormalizedCoord:
        return cls(
            input=raw,
            dd=round_half_away(angle.degrees, DD_OUTPUT_DECIMALS),
            dms=format_as_dms(angle),
        )


@dataclass(frozen=True)
class NormalizedPoint:
    name: str
    lat: NormalizedCoord
    lon: NormalizedCoord

    @classmethod
    def from_pair(cls, pair: CoordinatePair, lat_raw: str, lon_raw: str) -> NormalizedPoint:
        return cls(
            name=pair.name,
            lat=NormalizedCoord.from_angle(lat_raw, pair.latitude),
            lon=NormalizedCoord.from_angle(lon_raw, pair.longitude),
        )


@dataclass(frozen=True)
class OutputRecord:
    """Fully normalized output row."""

    id: int
    a: NormalizedPoint
    b: NormalizedPoint
    distance: Distance
    nearly: Nearly

    def to_row(self) -> dict[str, Any]:
        """Flatten into a mapping keyed by ``OUTPUT_COLUMNS``.

        Booleans are written lowercase (``true``/``false``).
        """
        row: dict[str, Any] = {"id": self.id}
        for prefix, point in (("a", self.a), ("b", self.b)):
            row[f"name_{prefix}"] = point.name
            row[f"lat_{prefix}_in"] = point.lat.input
            row[f"lon_{prefix}_in"] = point.lon.input
            row[f"lat_{prefix}_dd"] = point.lat.dd
            row[f"lon_{prefix}_dd"] = point.lon.dd
            row[f"lat_{prefix}_dms"] = point.lat.dms
            row[f"lon_{prefix}_dms"] = point.lon.dms
        row["distance_km"] = self.distance.km
        row["distance_miles"] = self.distance.miles
        row["nearly_lat"] = _flag(self.nearly.lat)
        row["nearly_lon"] = _flag(self.nearly.lon)
        row["nearly_both"] = _flag(self.nearly.both)
        return {column: row[column] for column in OUTPUT_COLUMNS}


def _flag(value: bool) -> str:
    return "true" if value else "false"
