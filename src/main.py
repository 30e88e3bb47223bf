"""
City Path Finder - Main entry point.

Usage:
    python -m src.main Paris Nice --algorithm astar --show-path
    cat queries.csv | python -m src.main
    python -m src.main queries.csv
    python -m src.main --help

Batch input is CSV with columns: id, start, end[, algorithm]
"""

import argparse
import csv
import sys
from pathlib import Path

from src import config
from src.geo import CityMap
from src.pathfinding import available_algorithms
from src.query import CityPathFinder, QueryResult, build_graph, format_path


def load_path_finder(
    roads_file: Path | None,
    cities_file: Path | None,
    use_sample: bool = False,
) -> CityPathFinder:
    """
    Build a path finder from map files, or from the sample graph.

    The sample graph is used when use_sample is set or when the roads file
    does not exist.
    """
    if use_sample or roads_file is None or not roads_file.exists():
        return CityPathFinder(build_graph())

    city_map = CityMap()
    if cities_file is not None and cities_file.exists():
        city_map.load_cities(cities_file)
    city_map.load_roads(roads_file)
    if city_map.rows_skipped:
        print(f"Warning: skipped {city_map.rows_skipped} invalid map rows", file=sys.stderr)
    return CityPathFinder.from_city_map(city_map)


def format_result(result: QueryResult, show_path: bool = False) -> str:
    """Format a query result as a human readable line."""
    if not result.found:
        return result.message

    line = (
        f"Shortest distance from {result.source} to {result.destination} "
        f"using {result.algorithm}: {result.distance}"
    )
    if show_path:
        line += f" ({format_path(result.path)})"
    return line


def format_csv_row(query_id: str, result: QueryResult) -> list[str]:
    """Format a query result as a batch output row."""
    route = format_path(result.path, separator="→") if result.found else result.status.value.upper()
    return [
        query_id,
        result.source or "",
        result.destination or "",
        result.algorithm,
        str(result.display_distance),
        route,
    ]


def run_batch(finder: CityPathFinder, input_file, default_algorithm: str) -> None:
    """Answer one query per CSV row and print one CSV row per answer."""
    reader = csv.reader(input_file)
    writer = csv.writer(sys.stdout)
    for row in reader:
        if len(row) < 3:
            continue

        query_id = row[0].strip()

        # Skip header
        if query_id.lower() == "id":
            continue

        algorithm = row[3].strip() if len(row) > 3 and row[3].strip() else default_algorithm
        result = finder.run_query(algorithm, row[1], row[2])
        writer.writerow(format_csv_row(query_id, result))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="City Path Finder - shortest distance between two places"
    )
    parser.add_argument(
        "start",
        nargs="?",
        help="Starting place, or batch CSV file when END is omitted (default: stdin)",
    )
    parser.add_argument(
        "end",
        nargs="?",
        help="Destination place",
    )
    parser.add_argument(
        "--algorithm",
        default=config.DEFAULT_ALGORITHM,
        help=f"Search algorithm: {', '.join(available_algorithms())} (default: {config.DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--roads",
        type=Path,
        default=config.ROADS_FILE,
        help="Path to roads CSV",
    )
    parser.add_argument(
        "--cities",
        type=Path,
        default=config.CITIES_FILE,
        help="Path to cities CSV (coordinates for A*)",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use the built-in sample graph (A-E) instead of the map files",
    )
    parser.add_argument(
        "--show-path",
        action="store_true",
        help="Also print the path",
    )

    args = parser.parse_args(argv)

    # Explicitly requested map files must exist
    if not args.sample and args.roads != config.ROADS_FILE and not args.roads.exists():
        print(f"Error: Roads file not found: {args.roads}", file=sys.stderr)
        return 1
    if not args.sample and args.cities != config.CITIES_FILE and not args.cities.exists():
        print(f"Error: Cities file not found: {args.cities}", file=sys.stderr)
        return 1

    finder = load_path_finder(args.roads, args.cities, use_sample=args.sample)

    if args.start is not None and args.end is not None:
        result = finder.run_query(args.algorithm, args.start, args.end)
        print(format_result(result, show_path=args.show_path))
        return 0

    if args.start:
        if not Path(args.start).exists():
            print(f"Error: Queries file not found: {args.start}", file=sys.stderr)
            return 1
        input_file = open(args.start, encoding="utf-8")
    else:
        input_file = sys.stdin

    try:
        run_batch(finder, input_file, args.algorithm)
    finally:
        if args.start:
            input_file.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
