#!/usr/bin/env python3
"""
Talk Starters command line.

Examples:
  # Run the API server
  talk-starters serve --port 8000

  # List category ids and names
  talk-starters categories

  # Run the query endpoint locally, three draws in one session
  talk-starters query "c=1&2" --repeat 3

  # Three debate topics from categories 1 and 4
  talk-starters generate --kind debate --count 3 -c 1 -c 4

  # Build an endpoint URL
  talk-starters endpoint -c 3 -p 4 7
  talk-starters endpoint --multi 5 --multi 7:2,3
  talk-starters endpoint -s space -s ocean -c 1 -c 2
"""

import argparse
import json
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from talk_engine import (
    PoolAssembler,
    SelectionError,
    TopicKind,
    UniqueSampler,
    endpoint_url,
    generate_topics,
    select_point,
)
from talk_engine.models import (
    MultiCategoryWithPoints,
    RandomAny,
    RandomCategories,
    RandomCategory,
    RandomFromPoints,
    Search,
    SelectionIntent,
    SpecificPoint,
)
from talk_engine.stages import to_int

from .config import get_config
from .services import InMemorySessionStore, JsonContentLoader


def _loader(args) -> JsonContentLoader:
    config = get_config()
    data_dir = Path(args.data_dir) if args.data_dir else config.data_dir
    return JsonContentLoader(data_dir, categories_file=config.categories_file)


def _print_json(payload) -> None:
    """One JSON object per line."""
    print(json.dumps(payload, ensure_ascii=False))


def cmd_serve(args) -> int:
    import uvicorn

    config = get_config()
    uvicorn.run(
        "talk_api.app:app",
        host=args.host or config.host,
        port=args.port or config.port,
        reload=args.reload,
    )
    return 0


def cmd_categories(args) -> int:
    loader = _loader(args)
    categories = loader.list_categories()
    if not categories:
        print("No categories found", file=sys.stderr)
        return 1
    for category in categories:
        print(f"{category.id:>4}  {category.name} ({len(loader.load_points(category))} starters)")
    return 0


def cmd_query(args) -> int:
    rng = random.Random(args.seed)
    assembler = PoolAssembler(_loader(args), rng=rng)
    sampler = UniqueSampler(rng=rng)
    store = InMemorySessionStore()
    status = 0
    for _ in range(max(args.repeat, 1)):
        try:
            point = select_point(args.query, assembler, sampler, store.history("cli"))
            _print_json(point.to_payload())
        except SelectionError as e:
            _print_json(e.to_payload())
            status = 1
            break
    return status


def cmd_generate(args) -> int:
    loader = _loader(args)
    wanted = set(args.category or [])
    points = []
    for category in loader.list_categories():
        if wanted and category.id not in wanted:
            continue
        points.extend(p.decorate(category) for p in loader.load_points(category))
    topics = generate_topics(points, TopicKind(args.kind), args.count, random.Random(args.seed))
    if not topics:
        print("No topics found matching your criteria.", file=sys.stderr)
        return 1
    for point in topics:
        print(point.name)
        print(f"  {point.summary}")
        print(f"  {point.context} • {point.category}")
    return 0


def _parse_multi(specs: List[str]) -> Dict[int, Tuple[int, ...]]:
    """["5", "7:2,3"] -> {5: (), 7: (2, 3)}"""
    out: Dict[int, Tuple[int, ...]] = {}
    for spec in specs:
        category, _, points = spec.partition(":")
        out[to_int(category)] = tuple(to_int(p) for p in points.split(",") if p.strip())
    return out


def intent_from_args(args) -> SelectionIntent:
    """Translate endpoint flags into an intent."""
    categories = args.category or []
    if args.talk:
        return RandomAny()
    if args.search:
        return Search(keywords=tuple(args.search), category_ids=tuple(categories) or None)
    if args.multi:
        return MultiCategoryWithPoints(category_points=_parse_multi(args.multi))
    if args.points:
        if len(categories) != 1:
            raise ValueError("--points needs exactly one --category")
        if len(args.points) == 1:
            return SpecificPoint(category_id=categories[0], point_id=args.points[0])
        return RandomFromPoints(category_id=categories[0], point_ids=tuple(args.points))
    if len(categories) > 1:
        return RandomCategories(category_ids=tuple(categories))
    if categories:
        return RandomCategory(category_id=categories[0])
    raise ValueError("nothing to build: pass --talk, --category, --multi or --search")


def cmd_endpoint(args) -> int:
    try:
        intent = intent_from_args(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(endpoint_url(args.base_url, intent))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="talk-starters",
        description="Talk Starters: conversation starters API and tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Content directory (default: DATA_DIR or ./data)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--reload", action="store_true", help="Auto-reload on code changes")
    serve.set_defaults(func=cmd_serve)

    categories = sub.add_parser("categories", help="List categories")
    categories.set_defaults(func=cmd_categories)

    query = sub.add_parser("query", help="Run one query locally, as the endpoint would")
    query.add_argument("query", help='Raw query string, e.g. "c=1&&p=2&3"')
    query.add_argument("--repeat", "-n", type=int, default=1, help="Draws within the same session")
    query.add_argument("--seed", type=int, default=None)
    query.set_defaults(func=cmd_query)

    generate = sub.add_parser("generate", help="Pick a batch of distinct topics")
    generate.add_argument(
        "--kind",
        choices=[k.value for k in TopicKind],
        default=TopicKind.ANY.value,
    )
    generate.add_argument("--count", type=int, default=3)
    generate.add_argument("--category", "-c", type=int, action="append", help="Repeatable; default all")
    generate.add_argument("--seed", type=int, default=None)
    generate.set_defaults(func=cmd_generate)

    endpoint = sub.add_parser("endpoint", help="Build an endpoint URL")
    endpoint.add_argument("--base-url", default="http://localhost:8000")
    endpoint.add_argument("--talk", action="store_true", help="Random topic from any category")
    endpoint.add_argument("--category", "-c", type=int, action="append")
    endpoint.add_argument("--points", "-p", type=int, nargs="+")
    endpoint.add_argument("--multi", "-m", action="append", help='"<cat>" or "<cat>:<p>,<p>"')
    endpoint.add_argument("--search", "-s", action="append", help="Keyword; repeat for OR")
    endpoint.set_defaults(func=cmd_endpoint)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
