"""placesuggest - autocomplete suggestions for place names

Public API for loading a gazetteer once and answering partial-name queries,
ranked by distance from a point or by population.

Usage:
    from placesuggest import load_gazetteer, suggest, PlaceSuggester

    # Load the catalog once at startup (raises LoadError if unreadable)
    gazetteer = load_gazetteer("data/cities_canada-usa.tsv")

    # Most populous first
    suggest(gazetteer, "Londo")
    # [Suggestion(name='London', latitude=42.98339, longitude=-81.23304, score=0.83), ...]

    # Nearest first
    suggest(gazetteer, "Londo", point=(37.1, -84.1))

    # Or let configuration pick the source and the result limit
    suggester = PlaceSuggester.from_settings()
    suggester.suggest("Montr")
"""

__version__ = "0.1.0"

# ============================================================================
# Suggestion API
# ============================================================================

from .places.placeapi import (
    suggest,                   # Primary API - ranked, scored suggestions
    PlaceSuggester,            # Gazetteer bound to a configured result limit
    Suggestion,                # name, latitude, longitude, score
    parse_suggestion_request,  # Host-side request validation
    is_found,                  # Found / not-found decision for hosts
    ValidationError,
)

# ============================================================================
# Gazetteer API
# ============================================================================

from .places.placegazetteer import (
    load_gazetteer,    # Parse a place file into an immutable Gazetteer
    build_gazetteer,   # Build a Gazetteer from PlaceRecords
    Gazetteer,
    PlaceRecord,
    LoadError,
)

# ============================================================================
# Building blocks
# ============================================================================

from .places.placenormalize import normalize_place_name
from .places.placematch import Candidate, match
from .places.placerank import DistanceMode, PopulationMode, rank
from .places.placescoring import score
from .config import Settings, get_settings

__all__ = [
    "__version__",
    # Suggestion API
    "suggest",
    "PlaceSuggester",
    "Suggestion",
    "parse_suggestion_request",
    "is_found",
    "ValidationError",
    # Gazetteer API
    "load_gazetteer",
    "build_gazetteer",
    "Gazetteer",
    "PlaceRecord",
    "LoadError",
    # Building blocks
    "normalize_place_name",
    "Candidate",
    "match",
    "DistanceMode",
    "PopulationMode",
    "rank",
    "score",
    "Settings",
    "get_settings",
]
