"""Place Gazetteer
---------------

Loads a delimited place-record file into an immutable in-memory catalog:
  1. Read the table (tab separated GeoNames layout, or .csv/.parquet)
  2. Resolve header spellings to logical columns
  3. Validate each row; malformed rows are logged and skipped
  4. Build a prefix index over normalized names and aliases

The Gazetteer is built once and never mutated afterwards, so any number of
concurrent queries can share it without locking.

API:
  load_gazetteer(source=None) -> Gazetteer       (raises LoadError)
  build_gazetteer(records, source=None) -> Gazetteer
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from placesuggest.places.placenormalize import (
    normalize_place_name,
    split_alternate_names,
)
from placesuggest.utils.dataloader import (
    find_data_file,
    format_not_found_error,
    read_place_table,
)
from placesuggest.utils.geo import is_valid_coordinate
from placesuggest.utils.normalize import word_starts

logger = logging.getLogger(__name__)

# Longest prefix stored in the index; longer queries are verified after lookup
INDEX_PREFIX_LENGTH = 3

DEFAULT_DATA_FILENAMES = ["cities_sample.tsv"]

# Logical column -> accepted header spellings (lower-cased)
_COLUMN_ALIASES = {
    "name": ("name",),
    "aliases": ("alt_name", "alternatenames", "alternate_names", "aliases"),
    "latitude": ("lat", "latitude"),
    "longitude": ("long", "lon", "lng", "longitude"),
    "population": ("population",),
    "country_code": ("country", "country_code"),
    "admin_region": ("admin1", "admin_region"),
}
_REQUIRED_COLUMNS = ("name", "latitude", "longitude")


class LoadError(Exception):
    """The gazetteer source could not be read at all."""


class MalformedRecordError(ValueError):
    """A single catalog row failed validation."""


@dataclass(frozen=True)
class PlaceRecord:
    """One place in the catalog.

    ``name_norm`` and ``aliases_norm`` are derived at construction and are
    what the matcher compares against. ``aliases_norm`` drops aliases that
    normalize to the name or to an earlier alias.
    """

    name: str
    latitude: float
    longitude: float
    aliases: tuple[str, ...] = ()
    population: int = 0
    country_code: str = ""
    admin_region: str = ""
    name_norm: str = field(init=False, repr=False, compare=False)
    aliases_norm: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        name_norm = normalize_place_name(self.name)
        if not name_norm:
            raise MalformedRecordError("empty name")
        if not is_valid_coordinate(self.latitude, self.longitude):
            raise MalformedRecordError(
                f"coordinates out of range: ({self.latitude}, {self.longitude})"
            )
        if self.population < 0:
            raise MalformedRecordError(f"negative population: {self.population}")

        seen = {name_norm}
        aliases_norm = []
        for alias in self.aliases:
            alias_norm = normalize_place_name(alias)
            if alias_norm and alias_norm not in seen:
                seen.add(alias_norm)
                aliases_norm.append(alias_norm)

        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(self, "name_norm", name_norm)
        object.__setattr__(self, "aliases_norm", tuple(aliases_norm))

    @property
    def match_keys(self) -> tuple[str, ...]:
        """Normalized name followed by normalized aliases."""
        return (self.name_norm,) + self.aliases_norm


@dataclass(frozen=True)
class Gazetteer:
    """Immutable catalog of places plus its prefix index.

    A record's identifier is its position in ``records``. ``index`` maps a
    normalized prefix (1 to INDEX_PREFIX_LENGTH chars, taken at every word
    start of every match key) to the identifiers that contain it.
    """

    records: tuple[PlaceRecord, ...]
    index: Mapping[str, frozenset[int]]
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.records)

    def lookup(self, query_norm: str) -> frozenset[int]:
        """Identifiers of records that may match ``query_norm``."""
        if not query_norm:
            return frozenset()
        return self.index.get(query_norm[:INDEX_PREFIX_LENGTH], frozenset())


def _build_index(records: tuple[PlaceRecord, ...]) -> Mapping[str, frozenset[int]]:
    buckets: dict[str, set[int]] = {}
    for record_id, record in enumerate(records):
        for key in record.match_keys:
            for start in word_starts(key):
                for length in range(1, INDEX_PREFIX_LENGTH + 1):
                    piece = key[start:start + length]
                    if len(piece) < length:
                        break
                    buckets.setdefault(piece, set()).add(record_id)

    return MappingProxyType({k: frozenset(v) for k, v in buckets.items()})


def build_gazetteer(
    records: Iterable[PlaceRecord],
    source: Optional[str] = None,
) -> Gazetteer:
    """Freeze records into a Gazetteer and build its index.

    Args:
        records: Validated PlaceRecords, in catalog order
        source: Optional description of where the records came from

    Returns:
        Gazetteer ready to be shared by concurrent queries
    """
    frozen = tuple(records)
    return Gazetteer(records=frozen, index=_build_index(frozen), source=source)


# ---- Row parsing ----

def _resolve_columns(columns: list[str]) -> dict[str, Optional[str]]:
    resolved = {}
    for logical, spellings in _COLUMN_ALIASES.items():
        resolved[logical] = next((s for s in spellings if s in columns), None)
    return resolved


def _parse_float(value: str, label: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise MalformedRecordError(f"non-numeric {label}: {value!r}") from None
    if not math.isfinite(number):
        raise MalformedRecordError(f"non-numeric {label}: {value!r}")
    return number


def _parse_population(value: str) -> int:
    if not value.strip():
        return 0
    number = _parse_float(value, "population")
    if not number.is_integer():
        raise MalformedRecordError(f"non-integer population: {value!r}")
    return int(number)


def _parse_row(row: dict, columns: dict[str, Optional[str]]) -> PlaceRecord:
    """Build a PlaceRecord from one table row, raising MalformedRecordError."""

    def cell(logical: str) -> str:
        column = columns[logical]
        return row.get(column, "").strip() if column else ""

    return PlaceRecord(
        name=cell("name"),
        latitude=_parse_float(cell("latitude"), "latitude"),
        longitude=_parse_float(cell("longitude"), "longitude"),
        aliases=tuple(split_alternate_names(cell("aliases"))),
        population=_parse_population(cell("population")),
        country_code=cell("country_code"),
        admin_region=cell("admin_region"),
    )


def default_data_path() -> Path:
    """Path of the bundled sample catalog.

    Raises:
        LoadError: If the bundled file is missing from the installation
    """
    found_path = find_data_file(__file__, DEFAULT_DATA_FILENAMES)
    if found_path is None:
        raise LoadError(format_not_found_error(
            subdirectory="places",
            searched_locations=[("Module-local data", Path(__file__).parent / "data")],
            fix_instructions=[
                "Set PLACESUGGEST_DATA_SOURCE to a GeoNames-style cities .tsv file.",
                "Or reinstall placesuggest so that places/data/cities_sample.tsv is present.",
            ],
        ))
    return found_path


def load_gazetteer(source: Optional[Union[str, Path]] = None) -> Gazetteer:
    """Load a place file into an immutable Gazetteer.

    Rows with an empty name, non-numeric or out-of-range coordinates, or an
    invalid population are skipped with a warning. Lines with too many
    fields are skipped the same way. Warnings name skipped rows by data row
    number, counting from 1 over the rows left once blank and over-long
    lines are dropped.

    Args:
        source: Path to a .tsv (GeoNames cities layout), .csv or .parquet
                file. If None, the bundled sample catalog is used.

    Returns:
        Gazetteer with every valid row, in file order

    Raises:
        LoadError: If the file cannot be opened or parsed, or its header
                   lacks the name, latitude or longitude column
    """
    path = Path(source) if source is not None else default_data_path()

    dropped_lines = []

    def _on_bad_line(fields: list[str]) -> None:
        dropped_lines.append(fields)
        logger.warning(
            f"Skipping malformed line in {path}: {len(fields)} fields, starts with {fields[:2]!r}"
        )

    try:
        df = read_place_table(path, on_bad_line=_on_bad_line)
    except (OSError, ValueError) as e:
        raise LoadError(f"Unable to read place data from {path}: {e}") from e

    columns = _resolve_columns(list(df.columns))
    missing = [logical for logical in _REQUIRED_COLUMNS if columns[logical] is None]
    if missing:
        raise LoadError(
            f"Place data {path} is missing required columns {missing}; "
            f"header was {list(df.columns)}"
        )

    records = []
    skipped = len(dropped_lines)
    for position, row in enumerate(df.to_dict("records")):
        try:
            records.append(_parse_row(row, columns))
        except MalformedRecordError as e:
            skipped += 1
            logger.warning(f"Skipping data row {position + 1} of {path}: {e}")

    gazetteer = build_gazetteer(records, source=str(path))
    logger.info(f"Loaded {len(gazetteer)} places from {path} ({skipped} malformed rows skipped)")
    return gazetteer


__all__ = [
    "INDEX_PREFIX_LENGTH",
    "LoadError",
    "MalformedRecordError",
    "PlaceRecord",
    "Gazetteer",
    "build_gazetteer",
    "default_data_path",
    "load_gazetteer",
]
