#!/usr/bin/env python3
"""
CLI tool for querying place suggestions.

Usage:
    python suggest_places.py <query> [--latitude LAT --longitude LON] [--k K] [--source PATH] [--json]

Examples:
    python suggest_places.py "Londo"
    python suggest_places.py "Londo" --latitude 43.0 --longitude -81.0
    python suggest_places.py "san" --k 10 --source data/cities_canada-usa.tsv
    python suggest_places.py "Montr" --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from placesuggest import (
    LoadError,
    PlaceSuggester,
    Settings,
    ValidationError,
    get_settings,
    is_found,
    parse_suggestion_request,
)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Autocomplete suggestions for place names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("query", help="Partial place name")
    parser.add_argument("--latitude", help="Reference latitude (ranks nearest first)")
    parser.add_argument("--longitude", help="Reference longitude (ranks nearest first)")
    parser.add_argument("--k", type=int, default=None, help="Maximum suggestions (default: configured)")
    parser.add_argument("--source", default=None, help="Gazetteer file (default: configured)")
    parser.add_argument("--json", action="store_true", help="Print suggestions as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log at DEBUG level")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        query, point = parse_suggestion_request(args.query, args.latitude, args.longitude)
    except ValidationError as e:
        print(f"❌ {e.code}: {e}", file=sys.stderr)
        return 1

    try:
        settings = get_settings()
        if args.source is not None or args.k is not None:
            settings = Settings(
                data_source=args.source if args.source is not None else settings.data_source,
                max_results=args.k if args.k is not None else settings.max_results,
            )
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        suggester = PlaceSuggester.from_settings(settings)
    except LoadError as e:
        print(f"❌ Unable to load place data: {e}", file=sys.stderr)
        return 1

    suggestions = suggester.suggest(query, point=point)

    if args.json:
        print(json.dumps({"suggestions": [s.to_dict() for s in suggestions]}, ensure_ascii=False, indent=2))
        return 0 if is_found(suggestions) else 1

    if not is_found(suggestions):
        print(f"No suggestions found for '{query}'")
        return 1

    mode = f"nearest to {point[0]}, {point[1]}" if point else "by population"
    print(f"✅ {len(suggestions)} suggestions for '{query}' ({mode})")
    print("-" * 60)
    for i, s in enumerate(suggestions, 1):
        print(f"{i}. {s.name:<30} {s.latitude:>10.5f} {s.longitude:>11.5f}  score={s.score:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
