import io
import sys

import pytest
from structlog.testing import capture_logs

from numstats.summary.collector import collect_values, open_unit, parse_value


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42.0),
        ("-3.5", -3.5),
        ("+7", 7.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("2.5E-2", 0.025),
    ],
)
def test_parse_value_accepts_float_literals(text, expected):
    assert parse_value(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1,5", "1_000", "0x10", "1 2", "١٢", "３"])
def test_parse_value_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_value(text)


def test_collect_keeps_order_and_trims():
    lines = ["  3\n", "1\t\n", "2\r\n"]
    assert collect_values(lines, unit="t") == [3.0, 1.0, 2.0]


def test_collect_drops_and_reports_bad_lines():
    lines = ["1\n", "abc\n", "nan\n", "2\n", "-inf\n", "\n", "inf\n", "3\n"]
    with capture_logs() as logs:
        values = collect_values(lines, unit="data.txt")

    assert values == [1.0, 2.0, 3.0]
    unparseable = [e for e in logs if e["event"] == "unparseable_line"]
    non_finite = [e for e in logs if e["event"] == "non_finite_value"]
    assert [(e["line"], e["text"]) for e in unparseable] == [(2, "abc"), (6, "")]
    assert [(e["line"], e["text"]) for e in non_finite] == [
        (3, "nan"), (5, "-inf"), (7, "inf"),
    ]
    assert all(e["log_level"] == "warning" for e in unparseable + non_finite)
    assert all(e["unit"] == "data.txt" for e in unparseable + non_finite)

    summary = [e for e in logs if e["event"] == "unit_collected"]
    assert summary[0]["accepted"] == 3
    assert summary[0]["skipped"] == 5


def test_collect_empty_unit():
    assert collect_values([], unit="empty") == []


def test_collect_stops_on_read_error():
    def lines():
        yield "1\n"
        yield "2\n"
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    with capture_logs() as logs:
        values = collect_values(lines(), unit="bad.bin")

    assert values == [1.0, 2.0]
    errors = [e for e in logs if e["event"] == "read_failed"]
    assert len(errors) == 1
    assert errors[0]["log_level"] == "error"
    assert errors[0]["line"] == 3


def test_open_unit_reads_file(write_unit):
    path = write_unit("v.txt", ["1", "2"])
    with open_unit(path) as lines:
        assert collect_values(lines, unit=path) == [1.0, 2.0]


def test_open_unit_stops_at_invalid_utf8(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"1\r\n\xff\n2\n")

    with capture_logs() as logs:
        with open_unit(str(path)) as lines:
            values = collect_values(lines, unit=str(path))

    assert values == [1.0]
    errors = [e for e in logs if e["event"] == "read_failed"]
    assert [e["line"] for e in errors] == [2]


def test_open_unit_dash_is_stdin(monkeypatch):
    fake = io.StringIO("4\n5\n")
    monkeypatch.setattr(sys, "stdin", fake)
    with open_unit("-") as stream:
        assert stream is fake
        assert collect_values(stream, unit="-") == [4.0, 5.0]
    assert not fake.closed


def test_open_unit_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        with open_unit(str(tmp_path / "nope.txt")):
            pass


def test_open_unit_dash_decodes_stdin_bytes(monkeypatch):
    raw = io.BytesIO("3\n４\n5\n".encode("utf-8"))
    stdin = io.TextIOWrapper(raw, encoding="ascii")
    monkeypatch.setattr(sys, "stdin", stdin)
    with open_unit("-") as lines:
        assert collect_values(lines, unit="-") == [3.0, 5.0]
    assert not stdin.closed
