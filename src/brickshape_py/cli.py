"""Brick schema explorer command line.

Usage:
    brickshape --input Brick.ttl describe brick:Setpoint
    brickshape --input Brick.ttl subclasses brick:Point
    brickshape --input Brick.ttl properties brick:Location --max-depth 16
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

from brickshape_py.brick import Brick, load_brick
from brickshape_py.errors import BrickError
from brickshape_py.parser.shape_parser import MAX_SHAPE_DEPTH
from brickshape_py.serializer.json_serializer import serialize_json

log = logging.getLogger(__name__)

QUERIES = {
    "subclasses": Brick.subclasses_of,
    "superclasses": Brick.superclasses_of,
    "tags": Brick.tags_of,
    "properties": Brick.properties_of,
    "describe": Brick.describe,
}


def run_query(brick: Brick, query: str, cls: str) -> str:
    """Run one named query and return its JSON rendering."""
    if query not in QUERIES:
        raise ValueError(f"Unknown query: {query!r}")
    result = QUERIES[query](brick, cls)
    if query in ("subclasses", "superclasses"):
        result = [str(c) for c in result]
    return serialize_json(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brickshape",
        description="Query class hierarchy, tags and property shapes of a Brick ontology",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Ontology file path",
    )
    parser.add_argument(
        "--format", "-f",
        default="turtle",
        help="rdflib input format (default: turtle)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_SHAPE_DEPTH,
        help=f"Maximum nesting of logical constraints (default: {MAX_SHAPE_DEPTH})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "query",
        choices=sorted(QUERIES),
        help="Query to run",
    )
    parser.add_argument(
        "cls",
        metavar="CLASS",
        help="Class CURIE, e.g. brick:Setpoint",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not os.path.isfile(args.input):
        parser.error(f"input file not found: {args.input}")

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    try:
        brick = load_brick(args.input, format=args.format, max_depth=args.max_depth)
        print(run_query(brick, args.query, args.cls))
    except BrickError as e:
        log.error("%s %s failed: %s", args.query, args.cls, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
