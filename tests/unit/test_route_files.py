# tests/unit/test_route_files.py
import csv

import pytest

from api_structures import MalformedInput, SetupError
from route_files import OUTPUT_HEADER, read_routes, write_results

HEADER = "SITE_CODE,SITE_NAME,DEST_LAT,DEST_LNG,TERMINAL_CODE,ORIGIN_LAT,ORIGIN_LNG\n"


def _write(tmp_path, text, name="routes.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_routes_builds_origin_and_destination(tmp_path):
    path = _write(tmp_path, HEADER + "S1,Site One,11.0,21.0,T1,10.0,20.0\n")

    rows = read_routes(path)

    assert len(rows) == 1
    row = rows[0]
    assert row.site_code == "S1"
    assert row.site_name == "Site One"
    assert row.terminal_code == "T1"
    assert row.origin == "10.0,20.0"
    assert row.destination == "11.0,21.0"


def test_read_routes_keeps_file_order_and_ignores_extra_columns(tmp_path):
    path = _write(
        tmp_path,
        HEADER
        + "S1,One,1,1,T1,2,2,extra\n"
        + "S2,Two,3,3,T2,4,4\n"
        + "S3,Three,5,5,T3,6,6\n",
    )

    rows = read_routes(path)

    assert [r.site_code for r in rows] == ["S1", "S2", "S3"]
    assert rows[0].origin == "2,2"


def test_read_routes_passes_text_through_untrimmed(tmp_path):
    path = _write(tmp_path, HEADER + 'S1,"Site, Quoted", 1.5 ,abc,T1,x,y\n')

    row = read_routes(path)[0]

    assert row.site_name == "Site, Quoted"
    assert row.destination == " 1.5 ,abc"
    assert row.origin == "x,y"


def test_read_routes_header_only_fails(tmp_path):
    path = _write(tmp_path, HEADER)

    with pytest.raises(MalformedInput, match="at least two rows"):
        read_routes(path)


def test_read_routes_empty_file_fails(tmp_path):
    path = _write(tmp_path, "")

    with pytest.raises(MalformedInput):
        read_routes(path)


def test_read_routes_short_row_names_row(tmp_path):
    path = _write(
        tmp_path,
        HEADER
        + "S1,One,1,1,T1,2,2\n"
        + "S2,Two,3,3,T2,4\n",
    )

    with pytest.raises(MalformedInput) as excinfo:
        read_routes(path)

    assert excinfo.value.line == 3
    assert excinfo.value.row == 2
    assert "row 3" in str(excinfo.value)
    assert "insufficient columns" in str(excinfo.value)


def test_read_routes_skips_blank_lines(tmp_path):
    path = _write(tmp_path, HEADER + "\nS1,One,1,1,T1,2,2\n\n")

    rows = read_routes(path)

    assert [r.site_code for r in rows] == ["S1"]


def test_read_routes_missing_file_is_setup_error(tmp_path):
    with pytest.raises(SetupError):
        read_routes(tmp_path / "does_not_exist.csv")


def test_write_results_header_and_two_decimals(tmp_path):
    out = tmp_path / "output.csv"

    write_results(
        out,
        ["S1", "S2"],
        ["Site One", "Site, Two"],
        ["T1", "T2"],
        [12.345, 0.0],
        ["15 mins", "N/A"],
    )

    with open(out, newline="", encoding="utf-8") as f:
        records = list(csv.reader(f))

    assert records[0] == OUTPUT_HEADER
    assert records[1] == ["S1", "Site One", "T1", "12.35", "15 mins"]
    assert records[2] == ["S2", "Site, Two", "T2", "0.00", "N/A"]
    assert len(records) == 3


def test_write_results_rejects_misaligned_columns(tmp_path):
    out = tmp_path / "output.csv"

    with pytest.raises(ValueError):
        write_results(out, ["S1", "S2"], ["A", "B"], ["T1", "T2"], [1.0], ["x", "y"])

    assert not out.exists()


def test_write_results_unwritable_path_raises_oserror(tmp_path):
    out = tmp_path / "missing_dir" / "output.csv"

    with pytest.raises(OSError):
        write_results(out, ["S1"], ["A"], ["T1"], [1.0], ["x"])


def test_read_routes_non_utf8_file_is_setup_error(tmp_path):
    path = tmp_path / "routes.csv"
    path.write_bytes(HEADER.encode("ascii") + "S1,São Paulo,1,1,T1,2,2\n".encode("latin-1"))

    with pytest.raises(SetupError, match="not UTF-8"):
        read_routes(path)
