"""Command line entry point for svglayout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .core.errors import LayoutError
from .diagrams import (
    create_columns_diagram,
    create_construction_diagram,
    create_flow_diagram,
    create_grid_diagram,
    create_spread_diagram,
    create_stack_diagram,
)
from .layout import Artboard, DiagramLoader
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


# Diagram registry - maps diagram names to factory functions
DIAGRAMS = {
    "stack": create_stack_diagram,
    "grid": create_grid_diagram,
    "columns": create_columns_diagram,
    "spread": create_spread_diagram,
    "construction": create_construction_diagram,
    "flow": create_flow_diagram,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="svglayout",
        description="svglayout - box-model layout engine for SVG diagrams",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-d", "--diagram",
        choices=list(DIAGRAMS.keys()),
        default="stack",
        help="Pre-built diagram to render (default: stack)",
    )
    source.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="Render a YAML diagram definition instead",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Write the SVG document to a file (default: stdout)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Print the node tree; repeat for debug logging",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write the log to a file",
    )
    return parser.parse_args(argv)


def print_tree(board: Artboard) -> None:
    """Print the node tree with sizes to stderr."""
    print(f"Diagram contains {len(list(board.iter_nodes()))} nodes:", file=sys.stderr)
    for node in board.iter_nodes():
        indent = "  " * node.depth
        width, height = node.size()
        mode = " [absolute]" if node.is_absolute and node.parent is not None else ""
        print(f"{indent}- {node.name} ({width:g}x{height:g}){mode}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Render a diagram to SVG."""
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING
    setup_logging(level, args.log_file)

    try:
        board = DiagramLoader().load(args.file) if args.file else DIAGRAMS[args.diagram]()
        svg = board.render()
    except (LayoutError, FileNotFoundError, yaml.YAMLError) as exc:
        logger.error("%s", exc)
        return 1

    if args.verbose:
        print_tree(board)

    if args.output:
        Path(args.output).write_text(svg, encoding="utf-8")
        logger.info("Saved %s", args.output)
    else:
        sys.stdout.write(svg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
