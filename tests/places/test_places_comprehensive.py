"""Comprehensive test suite for place suggestions.

Runs against the bundled GeoNames-layout sample (places/data/cities_sample.tsv)
and checks the ranking, scoring and truncation guarantees across many queries,
plus the worked scenarios from the README.

Run with: pytest tests/places/test_places_comprehensive.py -v --cov=placesuggest.places
"""

import itertools

import pytest

from placesuggest.places.placeapi import suggest
from placesuggest.places.placegazetteer import PlaceRecord, build_gazetteer, load_gazetteer
from placesuggest.places.placematch import match
from placesuggest.places.placerank import DistanceMode, PopulationMode, rank
from placesuggest.places.placescoring import round_score, score
from placesuggest.utils.geo import haversine_km

QUERIES = ["l", "lo", "londo", "london", "new", "s", "san", "st", "mont", "q", "o", "v", "t", "zzz"]
POINTS = [(43.0, -81.0), (45.5, -73.6), (37.7, -122.4), (51.5, -0.1), (-33.9, 151.2), (0.0, 0.0)]


# ---- Fixtures ----

@pytest.fixture(scope="module")
def sample_gazetteer():
    """Load the bundled sample catalog once for all tests."""
    return load_gazetteer()


@pytest.fixture
def two_londons():
    """The two-London catalog from the README example."""
    return build_gazetteer([
        PlaceRecord("London", 51.5, -0.1, population=8_000_000, country_code="GB"),
        PlaceRecord("London", 42.9, -81.2, population=400_000, country_code="CA", admin_region="ON"),
    ])


# ============================================================================
# SAMPLE CATALOG
# ============================================================================

def test_sample_population_ranking(sample_gazetteer):
    """London, Ontario leads the sample by population"""
    results = suggest(sample_gazetteer, "Londo")

    assert [(s.name, s.score) for s in results] == [
        ("London", 0.83),        # Ontario
        ("New London", 0.5),
        ("Londonderry", 0.45),
        ("London", 0.83),        # Kentucky
    ]
    assert results[0].latitude == 42.98339


def test_sample_distance_ranking(sample_gazetteer):
    """Near Lexington, London KY comes first"""
    results = suggest(sample_gazetteer, "Londo", point=(38.0, -84.5), max_results=1)
    assert [(s.name, s.latitude) for s in results] == [("London", 37.12898)]


def test_sample_accented_names(sample_gazetteer):
    """Accented catalog names match unaccented queries and vice versa"""
    assert [s.name for s in suggest(sample_gazetteer, "montre")] == ["Montréal"]
    assert [s.name for s in suggest(sample_gazetteer, "MONTRÉ")] == ["Montréal"]
    assert [s.name for s in suggest(sample_gazetteer, "quebec")] == ["Québec"]
    assert [s.name for s in suggest(sample_gazetteer, "jerome")] == ["Saint-Jérôme"]


def test_sample_alias_matches(sample_gazetteer):
    """Common abbreviations resolve through aliases"""
    assert [s.name for s in suggest(sample_gazetteer, "NYC")] == ["New York City"]
    assert [s.name for s in suggest(sample_gazetteer, "bytown")] == ["Ottawa"]
    (la,) = suggest(sample_gazetteer, "L.A.")
    assert la.name == "Los Angeles"
    assert la.score == 1.0


# ============================================================================
# PROPERTIES
# ============================================================================

def test_every_prefix_finds_its_place(sample_gazetteer):
    """Each prefix P of a normalized name N yields N with score |P| / |N|"""
    for record_id, record in enumerate(sample_gazetteer.records):
        name_norm = record.name_norm
        for length in range(1, len(name_norm) + 1):
            prefix = name_norm[:length]
            by_id = {c.record_id: c for c in match(sample_gazetteer, prefix)}
            assert record_id in by_id, prefix
            assert by_id[record_id].matched_key == name_norm
            assert score(by_id[record_id]) == round_score(length / len(name_norm))


def test_scores_in_unit_interval(sample_gazetteer):
    """All scores fall in [0, 1]"""
    for query in QUERIES:
        for s in suggest(sample_gazetteer, query, max_results=100):
            assert 0.0 <= s.score <= 1.0


def test_distance_ranking_is_monotonic(sample_gazetteer):
    """Distance from the point never decreases along the results"""
    for query, point in itertools.product(QUERIES, POINTS):
        results = suggest(sample_gazetteer, query, point=point, max_results=100)
        distances = [haversine_km(point[0], point[1], s.latitude, s.longitude) for s in results]
        assert distances == sorted(distances), (query, point)


def test_population_ranking_is_monotonic(sample_gazetteer):
    """Population never increases along the ranked candidates"""
    for query in QUERIES:
        ranked = rank(match(sample_gazetteer, query), PopulationMode())
        populations = [c.record.population for c in ranked]
        assert populations == sorted(populations, reverse=True), query


@pytest.mark.parametrize("max_results", [0, 1, 2, 3, 4, 7, 50])
def test_never_more_than_max_results(sample_gazetteer, max_results):
    """Result length is bounded by max_results for any candidate count"""
    for query in QUERIES:
        for point in (None, (45.0, -75.0)):
            results = suggest(sample_gazetteer, query, point=point, max_results=max_results)
            assert len(results) <= max_results
            expected = min(max_results, len(match(sample_gazetteer, query)))
            assert len(results) == expected


def test_suggestions_keep_record_coordinates(sample_gazetteer):
    """Every suggestion's coordinates are a catalog record's own"""
    coordinates = {(r.name, r.latitude, r.longitude) for r in sample_gazetteer.records}
    for query in QUERIES:
        for s in suggest(sample_gazetteer, query, point=(40.0, -100.0), max_results=100):
            assert (s.name, s.latitude, s.longitude) in coordinates


def test_loading_twice_gives_identical_results():
    """Two loads of the same source answer identically"""
    first = load_gazetteer()
    second = load_gazetteer()

    assert first.records == second.records
    for query, point in itertools.product(QUERIES, [None] + POINTS):
        assert suggest(first, query, point=point) == suggest(second, query, point=point)


def test_ranking_does_not_change_scores(sample_gazetteer):
    """Scores depend on the match only, not on the ranking mode"""
    for query in QUERIES:
        by_population = suggest(sample_gazetteer, query, max_results=100)
        by_distance = suggest(sample_gazetteer, query, point=(0.0, 0.0), max_results=100)
        assert sorted(by_population, key=repr) == sorted(by_distance, key=repr)


# ============================================================================
# SCENARIOS
# ============================================================================

def test_scenario_population_mode(two_londons):
    """'Londo' without a point: England first, both scored 5/6"""
    results = suggest(two_londons, "Londo", max_results=2)
    assert [(s.latitude, s.longitude, s.score) for s in results] == [
        (51.5, -0.1, 0.83),
        (42.9, -81.2, 0.83),
    ]


def test_scenario_distance_mode(two_londons):
    """'Londo' near (43.0, -81.0): Ontario first"""
    results = suggest(two_londons, "Londo", point=(43.0, -81.0), max_results=2)
    assert [s.latitude for s in results] == [42.9, 51.5]


def test_scenario_empty_query(two_londons):
    """An empty query is not an error inside the core"""
    assert suggest(two_londons, "") == []


def test_scenario_no_match(two_londons):
    """An unmatched query gives an empty list"""
    assert suggest(two_londons, "Zzzyzx") == []


def test_scenario_zero_max_results(two_londons):
    """max_results=0 always gives an empty list"""
    assert suggest(two_londons, "Londo", max_results=0) == []
    assert suggest(two_londons, "Londo", point=(43.0, -81.0), max_results=0) == []


def test_scenario_out_of_range_latitude(write_places):
    """A row with latitude 200 is skipped; the rest load and answer queries"""
    path = write_places([
        ["name", "alt_name", "lat", "long", "population", "country", "admin1"],
        ["London", "", "51.5", "-0.1", "8000000", "GB", "ENG"],
        ["Atlantis", "", "200", "-30.0", "1000", "", ""],
        ["London", "", "42.9", "-81.2", "400000", "CA", "08"],
    ])
    gaz = load_gazetteer(path)

    assert len(gaz) == 2
    assert suggest(gaz, "Atlan") == []
    assert len(suggest(gaz, "Londo")) == 2
