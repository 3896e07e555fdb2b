"""
CLI for the brute-force cosine search demo.

Commands:
  demo - Build the sample index, run top-k queries and show a rejected insert
"""

import argparse
import sys
from typing import List, Optional

from cosine_ann.config import DEMO_BAD_VECTOR, DEMO_QUERY, DEMO_VECTORS
from cosine_ann.exceptions import DimensionMismatch
from cosine_ann.index import VectorIndex, SearchResult
from cosine_ann.utils import get_logger, load_config, setup_logger

logger = get_logger(__name__)


def parse_vector(text: str) -> List[float]:
    """Parse ``"1,3,5"`` into a list of floats."""
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid vector {text!r}: expected comma-separated numbers")


def format_vector(vec) -> str:
    return str([float(x) for x in vec])


def print_results(results: List[SearchResult], precision: int) -> None:
    for i, (vec, score) in enumerate(results, start=1):
        print(f"Result {i}:")
        print(f"  Vector: {format_vector(vec)}")
        print(f"  Score: {score:.{precision}f}")


def cmd_demo(args, config):
    """Run the fixed demo dataset."""
    index = VectorIndex()
    print("Brute force ANN search using cosine similarity")
    for vec in DEMO_VECTORS:
        index.insert(vec)
    logger.info(f"Built demo index: {index!r}")

    query = args.query if args.query is not None else DEMO_QUERY
    top_k = args.top_k if args.top_k is not None else config["top_k"]
    precision = config["precision"]

    for k in (top_k, 1):
        print(f"Top {k} most similar vectors to {format_vector(query)}")
        print_results(index.query_top_k(query, k), precision)

    print(f"Now inserting a wrong-sized vector {format_vector(DEMO_BAD_VECTOR)}:")
    try:
        index.insert(DEMO_BAD_VECTOR)
    except DimensionMismatch as e:
        print(f"  Rejected: {e}")
    print(f"Index still holds {len(index)} vectors")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Cosine ANN CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--log-level", help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    parser_demo = subparsers.add_parser("demo", help="Run the sample top-k search")
    parser_demo.add_argument("--query", type=parse_vector, help="Comma-separated query vector")
    parser_demo.add_argument("--top-k", type=int, help="Number of results to show")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        setup_logger(log_file=config["log_file"], level=args.log_level or config["log_level"])

        if args.command == "demo":
            cmd_demo(args, config)
    except ValueError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
