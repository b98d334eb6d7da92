"""Place Matching
--------------

Candidate retrieval for autocomplete queries:
  1. Prefix index lookup (first 3 normalized chars) - narrows the catalog
  2. Verification against every normalized name and alias
       - prefix: the key starts with the query
       - word-start: the query begins at a word boundary inside the key

When several keys of one record match, the best match is kept in this
order: name prefix, name word-start, alias prefix, alias word-start.
Shorter aliases win among alias matches, since they give higher coverage.

API:
  match(gazetteer, query_norm) -> list[Candidate]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from placesuggest.places.placegazetteer import Gazetteer, PlaceRecord
from placesuggest.utils.normalize import word_starts

logger = logging.getLogger(__name__)

MATCH_NAME = "name"
MATCH_ALIAS = "alias"


@dataclass(frozen=True)
class Candidate:
    """A place record paired with how it matched one query."""

    record: PlaceRecord
    record_id: int
    matched_key: str
    match_kind: str
    position: int
    query_length: int

    @property
    def matched_length(self) -> int:
        """Length of the normalized key the query was matched against."""
        return len(self.matched_key)

    @property
    def is_prefix(self) -> bool:
        return self.position == 0


def _find_in_key(key: str, query_norm: str) -> Optional[int]:
    """Offset of the first word-start occurrence of query_norm in key, or None."""
    if key.startswith(query_norm):
        return 0
    for start in word_starts(key)[1:]:
        if key.startswith(query_norm, start):
            return start
    return None


def _best_match(record: PlaceRecord, record_id: int, query_norm: str) -> Optional[Candidate]:
    position = _find_in_key(record.name_norm, query_norm)
    if position is not None:
        return Candidate(record, record_id, record.name_norm, MATCH_NAME, position, len(query_norm))

    best = None
    # Rank alias hits: prefix before word-start, then shortest alias
    for alias_norm in record.aliases_norm:
        position = _find_in_key(alias_norm, query_norm)
        if position is None:
            continue
        rank_key = (position != 0, len(alias_norm))
        if best is None or rank_key < best[0]:
            best = (rank_key, alias_norm, position)

    if best is None:
        return None
    _, alias_norm, position = best
    return Candidate(record, record_id, alias_norm, MATCH_ALIAS, position, len(query_norm))


def match(gazetteer: Gazetteer, query_norm: str) -> list[Candidate]:
    """
    Retrieve every record whose name or alias matches a normalized query.

    Args:
        gazetteer: Loaded catalog
        query_norm: Query already passed through normalize_place_name

    Returns:
        Candidates in catalog order; [] for an empty query or no match

    Examples:
        >>> [c.record.name for c in match(gaz, "londo")]
        ['London', 'London']
    """
    if not query_norm:
        return []

    candidates = []
    for record_id in sorted(gazetteer.lookup(query_norm)):
        candidate = _best_match(gazetteer.records[record_id], record_id, query_norm)
        if candidate is not None:
            candidates.append(candidate)

    logger.debug(f"Query {query_norm!r} matched {len(candidates)} places")
    return candidates


__all__ = [
    "MATCH_NAME",
    "MATCH_ALIAS",
    "Candidate",
    "match",
]
