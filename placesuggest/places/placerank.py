"""Place Ranking
-------------

Orders match candidates under one of two explicit modes:
  - DistanceMode(latitude, longitude): nearest first, by haversine distance
  - PopulationMode(): most populous first

Ties (equal distance or equal population) are broken by normalized name,
then by catalog order, so the result is fully deterministic.

API:
  ranking_mode(point) -> DistanceMode | PopulationMode
  rank(candidates, mode) -> list[Candidate]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from placesuggest.places.placegazetteer import PlaceRecord
from placesuggest.places.placematch import Candidate
from placesuggest.utils.geo import haversine_km, is_valid_coordinate

Point = Tuple[float, float]


@dataclass(frozen=True)
class DistanceMode:
    """Rank by great-circle distance from a reference point, ascending."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not is_valid_coordinate(self.latitude, self.longitude):
            raise ValueError(f"Invalid reference point: ({self.latitude}, {self.longitude})")

    def distance_km(self, record: PlaceRecord) -> float:
        return haversine_km(self.latitude, self.longitude, record.latitude, record.longitude)


@dataclass(frozen=True)
class PopulationMode:
    """Rank by population, descending."""


RankingMode = Union[DistanceMode, PopulationMode]


def ranking_mode(point: Optional[Point]) -> RankingMode:
    """DistanceMode for a (latitude, longitude) point, PopulationMode for None."""
    if point is None:
        return PopulationMode()
    latitude, longitude = point
    return DistanceMode(float(latitude), float(longitude))


def rank(candidates: Iterable[Candidate], mode: RankingMode) -> list[Candidate]:
    """
    Order candidates for the given ranking mode.

    Args:
        candidates: Output of placematch.match
        mode: DistanceMode or PopulationMode

    Returns:
        New list, nearest-first or most-populous-first

    Raises:
        TypeError: If mode is not a known ranking mode

    Examples:
        >>> [c.record.country_code for c in rank(cands, PopulationMode())]
        ['GB', 'CA']
        >>> [c.record.country_code for c in rank(cands, DistanceMode(43.0, -81.0))]
        ['CA', 'GB']
    """
    if isinstance(mode, DistanceMode):
        def sort_key(c: Candidate):
            return (mode.distance_km(c.record), c.record.name_norm, c.record_id)
    elif isinstance(mode, PopulationMode):
        def sort_key(c: Candidate):
            return (-c.record.population, c.record.name_norm, c.record_id)
    else:
        raise TypeError(f"Unknown ranking mode: {mode!r}")

    return sorted(candidates, key=sort_key)


__all__ = [
    "Point",
    "DistanceMode",
    "PopulationMode",
    "RankingMode",
    "ranking_mode",
    "rank",
]
