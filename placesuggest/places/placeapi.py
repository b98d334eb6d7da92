"""Place suggestion API.

Public API for autocomplete-style place suggestions. The pipeline is:

    normalize query -> match -> rank -> top-K -> score -> Suggestion

Everything here is pure and synchronous. The Gazetteer is passed in (or
held by a PlaceSuggester), never kept in module state, so one loaded
catalog can serve any number of concurrent callers.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Optional, Sequence

from placesuggest.config import DEFAULT_MAX_RESULTS, Settings, get_settings
from placesuggest.places.placegazetteer import Gazetteer, load_gazetteer
from placesuggest.places.placematch import match
from placesuggest.places.placenormalize import normalize_place_name
from placesuggest.places.placerank import Point, rank, ranking_mode
from placesuggest.places.placescoring import score

logger = logging.getLogger(__name__)

MISSING_REQUIRED_QUERY_PARAMETER = "MissingRequiredQueryParameter"
INVALID_QUERY_PARAMETER_VALUE = "InvalidQueryParameterValue"


class ValidationError(ValueError):
    """Caller-supplied request parameters are missing or invalid.

    ``code`` is MISSING_REQUIRED_QUERY_PARAMETER or
    INVALID_QUERY_PARAMETER_VALUE, for hosts that map it to a response.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class Suggestion:
    name: str
    latitude: float
    longitude: float
    score: float

    def to_dict(self) -> dict:
        return asdict(self)


def suggest(
    gazetteer: Gazetteer,
    query: str,
    point: Optional[Point] = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[Suggestion]:
    """Return up to ``max_results`` ranked suggestions for a partial query.

    Ranking is nearest-first when ``point`` is given, most-populous-first
    otherwise. Each suggestion's score is the share of the matched name the
    query covers, rounded to two decimals.

    Args:
        gazetteer: Loaded catalog
        query: Raw query text; empty or blank gives []
        point: Optional (latitude, longitude) reference point
        max_results: Maximum suggestions to return; 0 gives []

    Returns:
        List of Suggestion, ordered by the active ranking mode. An empty list
        means nothing matched.

    Raises:
        ValueError: If max_results is negative or point is out of range

    Examples:
        >>> [(s.name, s.score) for s in suggest(gaz, "Londo", max_results=2)]
        [('London', 0.83), ('London', 0.83)]

        >>> suggest(gaz, "Zzzyzx")
        []
    """
    if max_results < 0:
        raise ValueError(f"max_results must be >= 0, got {max_results}")

    mode = ranking_mode(point)
    query_norm = normalize_place_name(query or "")
    if not query_norm or max_results == 0:
        return []

    candidates = match(gazetteer, query_norm)
    ranked = rank(candidates, mode)
    logger.debug(f"Ranked {len(ranked)} candidates for {query_norm!r} using {mode}")

    return [
        Suggestion(
            name=c.record.name,
            latitude=c.record.latitude,
            longitude=c.record.longitude,
            score=score(c),
        )
        for c in ranked[:max_results]
    ]


def is_found(suggestions: Sequence[Suggestion]) -> bool:
    """True when a host should report "found" rather than "not found"."""
    return len(suggestions) > 0


def _parse_coordinate(value, label: str, low: float, high: float) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(
            INVALID_QUERY_PARAMETER_VALUE, f"{label} must be numeric, got {value!r}"
        ) from None
    if not math.isfinite(number) or not low <= number <= high:
        raise ValidationError(
            INVALID_QUERY_PARAMETER_VALUE, f"{label} must be between {low} and {high}, got {value!r}"
        )
    return number


def parse_suggestion_request(
    query: Optional[str],
    latitude=None,
    longitude=None,
) -> tuple[str, Optional[Point]]:
    """Validate raw request parameters for a host.

    A point is produced only when both coordinates are supplied; a lone
    latitude or longitude is validated and then ignored, which leaves the
    request in population mode.

    Args:
        query: The ``q`` parameter
        latitude: Optional latitude (str or number)
        longitude: Optional longitude (str or number)

    Returns:
        (query, point) where point is (latitude, longitude) or None

    Raises:
        ValidationError: code MISSING_REQUIRED_QUERY_PARAMETER if query is
            missing or empty, INVALID_QUERY_PARAMETER_VALUE if a coordinate
            is not a number in range

    Examples:
        >>> parse_suggestion_request("Londo", "43.0", "-81.0")
        ('Londo', (43.0, -81.0))

        >>> parse_suggestion_request("Londo")
        ('Londo', None)
    """
    if query is None or query == "":
        raise ValidationError(
            MISSING_REQUIRED_QUERY_PARAMETER, "A required query parameter was not specified: q"
        )

    lat = _parse_coordinate(latitude, "latitude", -90.0, 90.0)
    lon = _parse_coordinate(longitude, "longitude", -180.0, 180.0)

    point = (lat, lon) if lat is not None and lon is not None else None
    return query, point


class PlaceSuggester:
    """A loaded Gazetteer bound to a configured result limit.

    Hosts build one of these at startup (a LoadError there should stop the
    host from serving) and call ``suggest`` per request.

    Examples:
        >>> suggester = PlaceSuggester.from_settings()
        >>> suggester.suggest("Montr", point=(45.5, -73.6))
        [Suggestion(name='Montréal', ...)]
    """

    def __init__(self, gazetteer: Gazetteer, max_results: int = DEFAULT_MAX_RESULTS):
        if max_results < 0:
            raise ValueError(f"max_results must be >= 0, got {max_results}")
        self.gazetteer = gazetteer
        self.max_results = max_results

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PlaceSuggester":
        """Load the configured gazetteer once.

        Raises:
            LoadError: If the configured data source cannot be read
        """
        settings = settings if settings is not None else get_settings()
        gazetteer = load_gazetteer(settings.data_source)
        return cls(gazetteer, max_results=settings.max_results)

    def suggest(
        self,
        query: str,
        point: Optional[Point] = None,
        max_results: Optional[int] = None,
    ) -> list[Suggestion]:
        limit = self.max_results if max_results is None else max_results
        return suggest(self.gazetteer, query, point=point, max_results=limit)

    def __repr__(self) -> str:
        return (
            f"PlaceSuggester(places={len(self.gazetteer)}, "
            f"source={self.gazetteer.source!r}, max_results={self.max_results})"
        )


__all__ = [
    "MISSING_REQUIRED_QUERY_PARAMETER",
    "INVALID_QUERY_PARAMETER_VALUE",
    "ValidationError",
    "Suggestion",
    "suggest",
    "is_found",
    "parse_suggestion_request",
    "PlaceSuggester",
]
