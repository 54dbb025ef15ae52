"""Tests for grid decoding and pattern repetition."""

from __future__ import annotations

import pytest

from kumiko.engine.errors import MalformedGrid
from kumiko.grid.decoder import parse_grid, repeat_pattern, validate_rows
from tests.conftest import SAMPLER_CSV, SAMPLER_GRID, SAMPLER_JSON, SAMPLER_TXT


def test_parse_text_skips_comments_and_blanks():
    assert parse_grid(SAMPLER_TXT) == SAMPLER_GRID


def test_parse_csv_commas_become_seams():
    assert parse_grid(SAMPLER_CSV, "csv") == SAMPLER_GRID


def test_parse_json_object():
    assert parse_grid(SAMPLER_JSON, "json") == SAMPLER_GRID


def test_parse_json_array():
    assert parse_grid('["A A", "G"]', "json") == ["A A", "G"]


@pytest.mark.parametrize(
    "content, fmt",
    [
        ("", "txt"),
        ("   \n\n", "csv"),
        ("# only a comment\n", "txt"),
        ("# only a comment\n", "csv"),
        ("{not json", "json"),
        ("[]", "json"),
        ('{"grid": []}', "json"),
        ('{"grid": "A A"}', "json"),
        ('{"rows": ["A"]}', "json"),
        ('["A", 3]', "json"),
        ("|\n  |  \n", "txt"),
        (",\n , ", "csv"),
        ('["|", "   "]', "json"),
    ],
)
def test_malformed_content(content, fmt):
    with pytest.raises(MalformedGrid):
        parse_grid(content, fmt)


def test_unsupported_format():
    with pytest.raises(MalformedGrid, match="Unsupported grid format"):
        parse_grid("A", "xml")


def test_repeat_pattern():
    assert repeat_pattern(["A B", "G"], 2, 2) == ["A B A B", "G G", "A B A B", "G G"]
    assert repeat_pattern(["K | k"], 2) == ["K | k K | k"]


def test_repeat_once_is_a_copy():
    grid = ["A"]
    repeated = repeat_pattern(grid)
    assert repeated == grid
    assert repeated is not grid


def test_repeat_rejects_zero():
    with pytest.raises(MalformedGrid):
        repeat_pattern(["A"], 0, 1)


def test_validate_rows_needs_one_symbol():
    rows = ["|", "A | G"]
    assert validate_rows(rows) is rows


@pytest.mark.parametrize("rows", [[], ["|"], ["   "], ["| |", ""]])
def test_validate_rows_rejects_symbol_free_grids(rows):
    with pytest.raises(MalformedGrid, match="no motif symbols"):
        validate_rows(rows)
