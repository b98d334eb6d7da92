"""Confidence scoring for matched places.

Score is how much of the matched key the query covers: an exact match is
1.0 and a prefix of length L on a key of length N is L / N. Scoring never
looks at distance or population; ranking and scoring are independent.

Scores are rounded half up on their shortest decimal form, so 1/8 shows as
0.13 and 3/8 as 0.38 rather than following binary round-half-even.
"""

from decimal import ROUND_HALF_UP, Decimal

from placesuggest.places.placematch import Candidate

SCORE_PRECISION = 2

_QUANTUM = Decimal(1).scaleb(-SCORE_PRECISION)


def coverage(candidate: Candidate) -> float:
    """Unrounded share of the matched key covered by the query, in [0, 1]."""
    if candidate.matched_length == 0:
        return 0.0
    ratio = candidate.query_length / candidate.matched_length
    return min(1.0, max(0.0, ratio))


def round_score(value: float) -> float:
    """Round a coverage value half up to SCORE_PRECISION decimals."""
    return float(Decimal(repr(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


def score(candidate: Candidate) -> float:
    """
    Display confidence for a candidate.

    Args:
        candidate: A Candidate produced by placematch.match

    Returns:
        Coverage clamped to [0, 1] and rounded half up to two decimals

    Examples:
        >>> score(londo_vs_london)   # 5 / 6
        0.83
    """
    return round_score(coverage(candidate))


__all__ = [
    "SCORE_PRECISION",
    "coverage",
    "round_score",
    "score",
]
