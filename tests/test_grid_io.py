import pytest

from gridsearch.grid import Grid, InvalidGridError
from gridsearch.grid_io import format_grid_text, format_path, load_grid, parse_grid_text, save_grid

SAMPLE = "3 4\n0000\n0110\n0000\n0 0\n2 3"


def test_parse_sample():
    spec = parse_grid_text(SAMPLE)
    assert spec.grid.shape == (3, 4)
    assert spec.grid.is_blocked((1, 1)) and spec.grid.is_blocked((1, 2))
    assert int(spec.grid.obstacles.sum()) == 2
    assert spec.start == (0, 0)
    assert spec.goal == (2, 3)


def test_parse_tolerates_split_coordinates_and_crlf():
    text = "2 2\r\n01\r\n00\r\n0 0 1\r\n1\r\n"
    spec = parse_grid_text(text)
    assert spec.grid.is_blocked((0, 1))
    assert spec.start == (0, 0) and spec.goal == (1, 1)


def test_parse_skips_leading_blank_lines():
    spec = parse_grid_text("\n  \n2 2\n00\n01\n0 0\n1 0")
    assert spec.grid.shape == (2, 2)
    assert spec.grid.is_blocked((1, 1))
    assert (spec.start, spec.goal) == ((0, 0), (1, 0))


def test_format_matches_reference_layout():
    grid = Grid.from_rows(2, 3, ["010", "000"])
    assert format_grid_text(grid, (0, 0), (1, 2)) == "2 3\n010\n000\n0 0\n1 2"


def test_save_then_load(tmp_path):
    spec = parse_grid_text(SAMPLE)
    path = save_grid(tmp_path / "grid.txt", spec.grid, spec.start, spec.goal)
    loaded = load_grid(path)
    assert (loaded.grid.obstacles == spec.grid.obstacles).all()
    assert (loaded.start, loaded.goal) == (spec.start, spec.goal)


@pytest.mark.parametrize("text", [
    "",                                  # nothing at all
    "3\n000\n000\n000\n0 0\n2 2",        # header missing cols
    "a b\n00\n00\n0 0\n1 1",             # non-numeric header
    "3 2\n00\n00",                       # missing a row
    "2 3\n000\n00\n0 0\n1 1",            # short row
    "2 2\n00\n00\n0 0",                  # missing goal
    "2 2\n00\n00\n0 x\n1 1",             # non-numeric start
])
def test_malformed_text_raises(text):
    with pytest.raises(InvalidGridError):
        parse_grid_text(text)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_grid(tmp_path / "nope.txt")


def test_format_path():
    assert format_path([(0, 0), (0, 1), (1, 1)]) == "(0, 0) (0, 1) (1, 1)"
    assert format_path([]) == ""
