# Main script to batch-compute driving distances for every route in a CSV file.

import argparse
import sys

from api_adapters import DistanceLookup, GoogleDistanceMatrixAdapter, load_api_key
from api_structures import LookupFailure, LookupResult, MalformedInput, Row, SetupError
from route_files import read_routes, write_results

DEFAULT_INPUT = "routes.csv"
DEFAULT_OUTPUT = "output.csv"


# --- Core Logic ---

def compute_distances(rows: list[Row], lookup: DistanceLookup) -> list[LookupResult]:
    """
    Looks up every row in order. The result list is index-aligned with `rows`;
    a failed lookup is recorded as the 0 km / "N/A" sentinel and the loop moves on.
    """
    results = []
    total = len(rows)
    for number, row in enumerate(rows, start=1):
        print(f"Processing route {number}/{total}: {row.site_code} ({row.origin} -> {row.destination})")
        try:
            result = lookup.lookup(row.origin, row.destination)
        except LookupFailure as e:
            print(
                f"   ! Error fetching distance matrix for origin {row.origin} and destination {row.destination}: {e}")
            result = LookupResult.unavailable()
        results.append(result)
    return results


def run_batch(input_path: str, output_path: str, lookup: DistanceLookup) -> list[LookupResult]:
    """Reads the routes, looks each one up, and writes the results file once at the end."""
    rows = read_routes(input_path)
    print(f"Read {len(rows)} routes from {input_path}.")

    results = compute_distances(rows, lookup)

    write_results(
        output_path,
        [row.site_code for row in rows],
        [row.site_name for row in rows],
        [row.terminal_code for row in rows],
        [result.distance_km for result in results],
        [result.duration for result in results],
    )
    print(f"Results have been written to {output_path}")
    return results


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Route Distance Batch: driving distance and time for each route in a CSV file.")
    parser.add_argument('-i', '--input', default=DEFAULT_INPUT,
                        help=f"Routes CSV to read (default: {DEFAULT_INPUT}).")
    parser.add_argument('-o', '--output', default=DEFAULT_OUTPUT,
                        help=f"Results CSV to write (default: {DEFAULT_OUTPUT}).")
    parser.add_argument('--env-file', default=None,
                        help="Path of the .env file holding GOOGLE_API_KEY (default: search for .env).")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Enable verbose mode to see the exact API calls being made.")
    args = parser.parse_args(argv)

    try:
        api_key = load_api_key(args.env_file)
        adapter = GoogleDistanceMatrixAdapter(api_key, verbose=args.verbose)
    except SetupError as e:
        print(e)
        return 1

    try:
        run_batch(args.input, args.output, adapter)
    except (SetupError, MalformedInput) as e:
        print(f"Error reading coordinates from CSV: {e}")
        return 1
    except OSError as e:
        print(f"Error writing results to CSV: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
