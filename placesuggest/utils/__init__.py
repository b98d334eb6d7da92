"""Shared utilities for the placesuggest package."""

from placesuggest.utils.dataloader import (
    find_data_file,
    read_place_table,
    format_not_found_error,
)
from placesuggest.utils.normalize import (
    normalize_name,
    strip_diacritics,
    word_starts,
)
from placesuggest.utils.geo import (
    EARTH_RADIUS_KM,
    haversine_km,
    is_valid_coordinate,
)

__all__ = [
    # Data loading
    "find_data_file",
    "read_place_table",
    "format_not_found_error",
    # Normalization
    "normalize_name",
    "strip_diacritics",
    "word_starts",
    # Geography
    "EARTH_RADIUS_KM",
    "haversine_km",
    "is_valid_coordinate",
]
