#!/usr/bin/env python3
"""Entry point for generating a constrained synthetic directed graph.

Builds a chain of the requested depth, samples additional edges (acyclic,
or with at least one guaranteed cycle), optionally shuffles vertex labels,
and writes the result as a plain-text edge list.

Usage:
    python run_generator.py 10 4 6 false true graph.txt
    python run_generator.py 10 4 6 true false graph.txt --seed 42
    python run_generator.py 10 4 6 true false graph.txt --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path

from depthgraph.config import GeneratorConfig, GraphConfig, MAX_RETRIES
from depthgraph.config.serialization import config_to_json
from depthgraph.graph import GraphGenerationError, generate_graph, save_edge_list

log = logging.getLogger(__name__)

USAGE = (
    "Usage: run_generator.py num_vertices min_graph_depth additional_edges "
    "has_cycles shuffle output_path [--seed N] [--max-retries N] "
    "[--dry-run] [--verbose]"
)
POSITIONAL = (
    "num_vertices",
    "min_graph_depth",
    "additional_edges",
    "has_cycles",
    "shuffle",
    "output_path",
)


def parse_flag(token: str) -> bool:
    """Boolean flags are true only for the exact token ``true``."""
    return token == "true"


def parse_int(name: str, token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {token!r}") from None


def build_config(
    params: list[str], seed: int | None = None, max_retries: int = MAX_RETRIES
) -> GeneratorConfig:
    """Turn the positional CLI parameters into a validated GeneratorConfig.

    Raises:
        ValueError: Naming the parameter or constraint that was violated.
    """
    values = dict(zip(POSITIONAL, params))
    graph = GraphConfig(
        num_vertices=parse_int("num_vertices", values["num_vertices"]),
        min_graph_depth=parse_int("min_graph_depth", values["min_graph_depth"]),
        additional_edges=parse_int(
            "additional_edges", values["additional_edges"]
        ),
        has_cycles=parse_flag(values["has_cycles"]),
        shuffle=parse_flag(values["shuffle"]),
    )
    return GeneratorConfig(graph=graph, seed=seed, max_retries=max_retries)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a constrained synthetic directed graph",
        usage=USAGE,
    )
    parser.add_argument("params", nargs="*", help="; ".join(POSITIONAL))
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: derived from the current time)",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=MAX_RETRIES,
        help="Consecutive rejected samples tolerated per edge",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the resolved configuration without generating",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if len(args.params) != len(POSITIONAL):
        print(USAGE)
        return 0

    # Validate everything before the output file is touched
    try:
        config = build_config(args.params, args.seed, args.max_retries)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    output_path = Path(args.params[-1])

    if args.dry_run:
        print(config_to_json(config))
        print(f"\nOutput: {output_path}")
        print("[dry-run] Config validated successfully. Exiting.")
        return 0

    try:
        result = generate_graph(config)
    except GraphGenerationError as e:
        log.error("Generation failed: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    save_edge_list(result.graph, result.labels, output_path)
    print(
        f"Wrote {result.graph.vertex_count} vertices, "
        f"{result.graph.edge_count} edges to {output_path} "
        f"(seed {result.seed})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
