# Reads the routes input file and writes the distance results file.

import csv
from collections.abc import Sequence

from api_structures import MalformedInput, Row, SetupError

MIN_COLUMNS = 7
OUTPUT_HEADER = ["SITE_CODE", "SITE_NAME", "TERMINAL_CODE", "DISTANCE_KM", "DURATION"]

# Input column positions (0-based)
SITE_CODE = 0
SITE_NAME = 1
DEST_LAT = 2
DEST_LNG = 3
TERMINAL_CODE = 4
ORIGIN_LAT = 5
ORIGIN_LNG = 6


def _read_records(path) -> list[tuple[int, list[str]]]:
    """Returns (file line number, fields) for every non-blank CSV record."""
    records = []
    try:
        with open(path, newline='', encoding='utf-8-sig') as f:
            reader = csv.reader(f)
            for record in reader:
                if not record:
                    continue
                records.append((reader.line_num, record))
    except OSError as e:
        raise SetupError(f"Could not read input file '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise SetupError(f"Input file '{path}' is not UTF-8 text: {e}") from e
    except csv.Error as e:
        raise MalformedInput(f"Could not parse input file '{path}': {e}") from e
    return records


def read_routes(path) -> list[Row]:
    """
    Parses the routes file into Row objects, in file order.

    The first record is a header and is skipped. Each data row needs at least
    seven columns: site code, site name, destination lat, destination lng,
    terminal code, origin lat, origin lng. Field text is not trimmed or validated.
    """
    records = _read_records(path)
    if len(records) < 2:
        raise MalformedInput(
            f"CSV file must contain at least two rows (a header and one route): '{path}'")

    routes = []
    for index, (line, record) in enumerate(records[1:], start=1):
        if len(record) < MIN_COLUMNS:
            raise MalformedInput(
                f"CSV row {line} (data row {index}) has insufficient columns: "
                f"found {len(record)}, need at least {MIN_COLUMNS}",
                line=line, row=index)
        routes.append(Row(
            site_code=record[SITE_CODE],
            site_name=record[SITE_NAME],
            terminal_code=record[TERMINAL_CODE],
            origin=f"{record[ORIGIN_LAT]},{record[ORIGIN_LNG]}",
            destination=f"{record[DEST_LAT]},{record[DEST_LNG]}",
        ))
    return routes


def write_results(
    path,
    site_codes: Sequence[str],
    site_names: Sequence[str],
    terminal_codes: Sequence[str],
    distances: Sequence[float],
    durations: Sequence[str],
) -> None:
    """Writes one output row per index. Raises OSError if the file cannot be written."""
    lengths = {len(site_codes), len(site_names), len(terminal_codes),
               len(distances), len(durations)}
    if len(lengths) != 1:
        raise ValueError(
            "Result columns are not aligned: every sequence must have the same length.")

    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f, lineterminator='\n')
        writer.writerow(OUTPUT_HEADER)
        for code, name, terminal, distance, duration in zip(
                site_codes, site_names, terminal_codes, distances, durations):
            writer.writerow([code, name, terminal, f"{distance:.2f}", duration])
