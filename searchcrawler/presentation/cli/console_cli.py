"""
Interactive command-line interface for the search crawler
"""
import os
import sys
import json
import logging
import argparse
from typing import Any, Dict, List, Optional

from ...core import ConsoleInputHandler, OutputHandler, SearchResult
from ...infrastructure import load_config, configure_logging

logger = logging.getLogger(__name__)


def print_json(data: Dict[str, Any], pretty: bool = True) -> None:
    """Print data as formatted JSON"""
    if pretty:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print(json.dumps(data, ensure_ascii=False))


def load_results(path: str) -> List[SearchResult]:
    """
    Load search results produced by the crawler from a JSON file

    Args:
        path: File holding a JSON list of result objects

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a list of results
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of results in {path}")
    try:
        return [SearchResult.from_dict(item) for item in data]
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed result in {path}: {str(e)}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Search Crawler Console')
    parser.add_argument('--output-dir', help='Directory for the CSV files')
    parser.add_argument('--all-data-file', help='File name for all results')
    parser.add_argument('--top-data-file', help='File name for the top results')
    parser.add_argument('--top', type=int, help='Number of top results to write')
    parser.add_argument('--results', help='JSON file with crawl results to write as CSV')
    parser.add_argument('--json', action='store_true', help='Print the crawl request as JSON')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show verbose output')
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Run the console CLI"""
    args = build_parser().parse_args(argv)

    app_config = load_config()
    output = app_config.output
    if args.output_dir:
        output.output_dir = args.output_dir
    if args.all_data_file:
        output.all_data_file = args.all_data_file
    if args.top_data_file:
        output.top_data_file = args.top_data_file
    if args.top is not None:
        output.top_entries = args.top

    configure_logging(logging.DEBUG if args.verbose or app_config.debug else logging.INFO)

    outcome = ConsoleInputHandler().collect()
    if not outcome.requests:
        logger.error("No usable crawl parameters were entered")
        return 1

    search_input = outcome.requests[0]
    if args.json:
        print_json(search_input.to_dict())
    else:
        print(f"Seed: {search_input.seed}")
        print(f"Search terms: {', '.join(search_input.search_terms)}")
        print(f"Link depth: {search_input.link_depth}")
        print(f"Max pages limit: {search_input.max_pages_limit}")

    if not args.results:
        return 0

    try:
        results = load_results(args.results)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load results from {args.results}: {str(e)}")
        return 1

    handler = OutputHandler(output.all_data_path, output.top_data_path, output.top_entries)
    writes = handler.write_results(results)
    for write in writes:
        if write.ok:
            print(f"{write.rows_written} rows written to {os.path.abspath(write.path)}")
    return 0 if all(write.ok for write in writes) else 1


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
