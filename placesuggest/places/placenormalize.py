"""
Place Name Normalization Functions
-----------------------------------

Two functions used on both sides of matching:
  1. normalize_place_name: canonical form for catalog names, aliases and queries
  2. split_alternate_names: parse a GeoNames-style comma separated alias cell

The same normalization must run at load time and at query time, otherwise
accented catalog names stop matching unaccented queries (and vice versa).

Examples:
  >>> normalize_place_name("Montréal")
  'montreal'

  >>> normalize_place_name("  Saint-Jérôme ")
  'saint-jerome'

  >>> split_alternate_names("Londres,London,Londra")
  ['Londres', 'London', 'Londra']
"""

from placesuggest.utils.normalize import normalize_name as _normalize_name


def normalize_place_name(s: str) -> str:
    """
    Normalization for prefix and word-start matching.

    Transformations:
      - Normalize Unicode (NFKD) and drop combining marks
      - Lowercase
      - Collapse multiple spaces to single space
      - Strip whitespace

    Punctuation is kept so that match lengths agree with the displayed
    name ("St. John's" keeps its period and apostrophe).

    Args:
        s: Raw place name or query text

    Returns:
        Normalized string for matching, "" for empty input

    Examples:
        >>> normalize_place_name("Québec")
        'quebec'

        >>> normalize_place_name("SAN  JOSÉ")
        'san jose'
    """
    if not s:
        return ""

    return _normalize_name(s)


def split_alternate_names(cell: str) -> list[str]:
    """
    Split a comma separated alternate-names cell into display strings.

    Empty pieces are dropped; order is preserved.

    Examples:
        >>> split_alternate_names("Montreal, Montréal,,MTL")
        ['Montreal', 'Montréal', 'MTL']

        >>> split_alternate_names("")
        []
    """
    if not cell:
        return []

    return [part.strip() for part in cell.split(",") if part.strip()]


__all__ = [
    "normalize_place_name",
    "split_alternate_names",
]
