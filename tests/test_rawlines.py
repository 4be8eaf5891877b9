import sqlite3

import pytest

from chatwrapped.rawlines import load_raw_lines, normalize_line, normalize_lines, read_raw_lines
from chatwrapped.timeparse import DateParseError


def test_invisible_marks_removed():
    assert normalize_line("a\u200eb\u202fc") == "abc"


def test_line_without_timestamp_unchanged():
    assert normalize_line("no timestamp here") == "no timestamp here"


def test_timestamp_rewritten():
    assert normalize_line("[6.09.25, 15:00:00] Alice: hi") == "[25.09.06, 15:00:00] Alice: hi"


def test_formats_normalise_to_same_line():
    us = normalize_line("[9/6/25, 3:00:00\u202fPM] Bob: yo")
    uk = normalize_line("[06/09/2025 15:00:00] Bob: yo")
    assert us == uk
    assert us.endswith("] Bob: yo")


def test_message_text_preserved():
    result = normalize_line("[6.09.25, 15:00:00] Alice: hello there")
    assert result.endswith(" Alice: hello there")
    assert result.startswith("[")


def test_empty_brackets_unchanged():
    assert normalize_line("[] nothing") == "[] nothing"


def test_bad_timestamp_raises():
    with pytest.raises(DateParseError):
        normalize_line("[hello world] x")


def test_normalize_lines_matches_single():
    lines = ["[6.09.25, 15:00:00] A: hi", "continued"]
    assert normalize_lines(lines) == [normalize_line(line) for line in lines]


def test_read_raw_lines(tmp_path):
    path = tmp_path / "chat.txt"
    path.write_bytes("[6.09.25, 15:00:00] A: hi\r\ncontinued\n\u200elast".encode("utf-8"))
    expected = normalize_lines(["[6.09.25, 15:00:00] A: hi", "continued", "last"])
    assert read_raw_lines(path) == expected


def test_read_raw_lines_keeps_empty_lines(tmp_path):
    path = tmp_path / "chat.txt"
    path.write_text("one\n\ntwo\n", encoding="utf-8")
    assert read_raw_lines(path) == ["one", "", "two"]


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_raw_lines(tmp_path / "missing.txt")


def test_load_raw_lines_trims_carriage_returns():
    conn = sqlite3.connect(":memory:")
    load_raw_lines(conn, ["a\r", "\rb", "c"])
    rows = [row[0] for row in conn.execute("SELECT line FROM rawest ORDER BY rowid")]
    assert rows == ["a", "b", "c"]


def test_load_raw_lines_replaces_table():
    conn = sqlite3.connect(":memory:")
    load_raw_lines(conn, ["first", "second"])
    load_raw_lines(conn, ["third"])
    rows = [row[0] for row in conn.execute("SELECT line FROM rawest")]
    assert rows == ["third"]