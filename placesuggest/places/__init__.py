"""Place name autocomplete: gazetteer loading, matching, ranking, scoring."""

from placesuggest.places.placeapi import (
    PlaceSuggester,
    Suggestion,
    ValidationError,
    is_found,
    parse_suggestion_request,
    suggest,
)
from placesuggest.places.placegazetteer import (
    Gazetteer,
    LoadError,
    PlaceRecord,
    build_gazetteer,
    load_gazetteer,
)
from placesuggest.places.placerank import DistanceMode, PopulationMode

__all__ = [
    "PlaceSuggester",
    "Suggestion",
    "ValidationError",
    "is_found",
    "parse_suggestion_request",
    "suggest",
    "Gazetteer",
    "LoadError",
    "PlaceRecord",
    "build_gazetteer",
    "load_gazetteer",
    "DistanceMode",
    "PopulationMode",
]
