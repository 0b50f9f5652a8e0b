"""Main entry point for proscenium."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import configure_logging
from .directors import DIRECTORS, get_director
from .errors import ProsceniumError
from .layout import ProductionLoader, ProductionSpec, parse_stage
from .negotiation import run
from .render import format_screen, make_screen, perform, save_screen

logger = logging.getLogger(__name__)


def _parse_floats(value: str, count: int, label: str) -> list[float]:
    parts = value.split(",")
    if len(parts) != count:
        raise argparse.ArgumentTypeError(f"{label} needs {count} comma-separated numbers, got {value!r}")
    try:
        return [float(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"{label} must be numeric, got {value!r}") from None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    loader = ProductionLoader()
    parser = argparse.ArgumentParser(
        prog="proscenium",
        description="Proscenium - Sequential Layout Negotiator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-s", "--scene",
        choices=loader.available(),
        default="buttons",
        help="Built-in production to stage (default: buttons)",
    )
    parser.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="Production YAML file (overrides --scene)",
    )
    parser.add_argument(
        "-d", "--director",
        choices=list(DIRECTORS.keys()),
        help="Stacking director (default: from the production)",
    )
    parser.add_argument(
        "--margins",
        metavar="H,V",
        type=lambda value: _parse_floats(value, 2, "--margins"),
        help="Horizontal and vertical margins",
    )
    parser.add_argument(
        "--stage",
        metavar="L,R,T,B",
        type=lambda value: _parse_floats(value, 4, "--stage"),
        help="Stage edges: left, right, top, bottom",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an item is placed past the stage edges",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render the screen to an image file instead of printing it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Log JSON lines to stderr")
    return parser.parse_args(argv)


def load_production(args: argparse.Namespace) -> ProductionSpec:
    """Load the requested production and apply command line overrides."""
    loader = ProductionLoader()
    if args.file:
        production = loader.load(Path(args.file))
    else:
        production = loader.load_named(args.scene)

    if args.director:
        production.director = get_director(args.director)
    if args.margins:
        horizontal, vertical = args.margins
        production.cursor = replace(
            production.cursor,
            horizontal_margin=horizontal,
            vertical_margin=vertical,
        )
    if args.stage:
        production.stage = parse_stage(args.stage)
    return production


def main(argv: list[str] | None = None) -> int:
    """Run a production and show the result."""
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)

    try:
        production = load_production(args)
        logger.debug("Loaded production %s with %d items", production.name, len(production.items))
        result = run(
            production.stage,
            production.cursor,
            production.director,
            production.performer,
            production.items,
            check_overflow=args.strict,
        )
        screen = perform(result, make_screen(production.stage.right, production.stage.bottom))
    except (ProsceniumError, ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Proscenium - {production.name}")
    print("=" * 40)
    print(f"Placed {len(result)} items with the {production.director.name} director")

    if args.render:
        output_path = save_screen(screen, args.render)
        print(f"Saved render to {output_path}")
    else:
        print(format_screen(screen))
    return 0


if __name__ == "__main__":
    sys.exit(main())
