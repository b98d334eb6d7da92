"""Shared test fixtures and utilities for placesuggest tests."""

import pytest

from placesuggest.places.placegazetteer import PlaceRecord, build_gazetteer

GEONAMES_HEADER = [
    "id", "name", "ascii", "alt_name", "lat", "long", "feat_class", "feat_code",
    "country", "cc2", "admin1", "admin2", "admin3", "admin4", "population",
    "elevation", "dem", "tz", "modified_at",
]


def geonames_row(geoname_id, name, alt_name, lat, lon, country, admin1, population):
    """One GeoNames cities line as a list of 19 string fields."""
    return [
        str(geoname_id), name, name, alt_name, str(lat), str(lon), "P", "PPL",
        country, "", admin1, "", "", "", str(population), "", "0", "UTC", "2016-06-22",
    ]


@pytest.fixture
def sample_records():
    """Hand-built records covering name, alias and word-start matches.

    Catalog order (record ids):
      0 London (GB)          3 New London (US)      6 Springfield (US, IL)
      1 London (CA, ON)      4 Montréal (CA)        7 Springfield (US, MA)
      2 Londonderry (GB)     5 Mont-Royal (CA)      8 Unknownville (pop 0)
    """
    return [
        PlaceRecord("London", 51.5, -0.1, population=8_000_000, country_code="GB", admin_region="ENG"),
        PlaceRecord("London", 42.9, -81.2, aliases=("Forest City",), population=400_000,
                    country_code="CA", admin_region="08"),
        PlaceRecord("Londonderry", 54.9966, -7.3086, aliases=("Derry",), population=83_652,
                    country_code="GB", admin_region="NIR"),
        PlaceRecord("New London", 41.35565, -72.09952, population=27_179, country_code="US", admin_region="CT"),
        PlaceRecord("Montréal", 45.50884, -73.58781, aliases=("Montreal", "MTL"), population=3_268_513,
                    country_code="CA", admin_region="10"),
        PlaceRecord("Mont-Royal", 45.51675, -73.64918, population=20_276, country_code="CA", admin_region="10"),
        PlaceRecord("Springfield", 39.80172, -89.64371, population=116_250, country_code="US", admin_region="IL"),
        PlaceRecord("Springfield", 42.10148, -72.58981, population=153_703, country_code="US", admin_region="MA"),
        PlaceRecord("Unknownville", 10.0, 10.0),
    ]


@pytest.fixture
def gazetteer(sample_records):
    """In-memory Gazetteer over sample_records."""
    return build_gazetteer(sample_records, source="fixture")


@pytest.fixture
def write_places(tmp_path):
    """Factory writing rows to a tab-separated file under tmp_path.

    Example:
        path = write_places([["name", "lat", "long"], ["Ottawa", "45.4", "-75.7"]])
    """
    def _write(rows, filename="places.tsv", sep="\t"):
        path = tmp_path / filename
        lines = [sep.join(row) for row in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def geonames_file(write_places):
    """A GeoNames-layout file with the two Londons from the README example."""
    rows = [
        GEONAMES_HEADER,
        geonames_row(2643743, "London", "Londres,Londra,London", 51.5, -0.1, "GB", "ENG", 8000000),
        geonames_row(6058560, "London", "Forest City", 42.9, -81.2, "CA", "08", 400000),
        geonames_row(6077243, "Montréal", "Montreal,MTL", 45.50884, -73.58781, "CA", "10", 3268513),
    ]
    return write_places(rows, filename="cities.tsv")


@pytest.fixture
def geonames_rows():
    """(header, row builder) pair for writing GeoNames-layout files in tests."""
    return GEONAMES_HEADER, geonames_row
