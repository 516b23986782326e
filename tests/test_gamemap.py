import pytest

from solong.gamemap import (
    MapError,
    Point,
    all_coins_reachable,
    check_counts,
    check_symbols,
    count_coins,
    count_lines,
    exit_reachable,
    find_map_size,
    find_player,
    has_map_extension,
    mark_reachable_coins,
    read_map,
    walls_closed,
)


def make_grid(*rows):
    return [list(row) for row in rows]


VALID = ("1111111", "1P0C0E1", "1111111")


def test_has_map_extension():
    assert has_map_extension("maps/level.ber") is True
    assert has_map_extension(".ber") is True
    assert has_map_extension("level.ber.txt") is False
    assert has_map_extension("level.bar") is False


def test_count_lines(tmp_path):
    path = tmp_path / "a.ber"
    path.write_text("111\n1P1\n111")
    assert count_lines(path) == 3
    path.write_text("111\n1P1\n")
    assert count_lines(path) == 2
    path.write_text("")
    assert count_lines(path) == 0


def test_count_lines_missing_file(tmp_path):
    with pytest.raises(MapError):
        count_lines(tmp_path / "missing.ber")


def test_read_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(VALID) + "\n")
    grid = read_map(path)
    assert grid == make_grid(*VALID)
    assert len(grid) == count_lines(path)


def test_read_map_wrong_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("\n".join(VALID))
    with pytest.raises(MapError):
        read_map(path)


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "missing.ber")


def test_count_coins():
    assert count_coins(make_grid("1C1", "CC1")) == 3
    assert count_coins(make_grid("111")) == 0


def test_find_map_size_valid():
    assert find_map_size(make_grid(*VALID)) == Point(x=7, y=3)


def test_find_map_size_ignores_newlines():
    grid = make_grid("11111\n", "1P0E1\n", "11111")
    assert find_map_size(grid) == Point(x=5, y=3)


def test_find_map_size_not_rectangular():
    assert find_map_size(make_grid("11111", "1P0E", "11111")) == Point(0, 0)


def test_find_map_size_too_small():
    assert find_map_size(make_grid("1111", "1PE1", "1111")) == Point(0, 0)
    assert find_map_size(make_grid("11111", "11111")) == Point(0, 0)


def test_find_map_size_empty():
    assert find_map_size(None) == Point(0, 0)
    assert find_map_size([]) == Point(0, 0)


def test_check_symbols_rejects_unknown():
    with pytest.raises(MapError, match="Map content is not valid"):
        check_symbols(make_grid("11111", "1PX01", "11111"))


def test_check_counts_rejects_two_players():
    with pytest.raises(MapError):
        check_counts(make_grid("1111111", "1PPC0E1", "1111111"))


def test_check_counts_rejects_missing_coin():
    with pytest.raises(MapError):
        check_counts(make_grid("1111111", "1P000E1", "1111111"))


def test_check_counts_rejects_missing_exit():
    with pytest.raises(MapError):
        check_counts(make_grid("1111111", "1P0C001", "1111111"))


def test_find_player():
    grid = make_grid("11111", "10001", "10P01", "11111")
    assert find_player(grid) == Point(x=2, y=2)
    assert find_player(make_grid("111")) == Point(0, 0)


def test_mark_reachable_coins_all_reachable():
    grid = make_grid(*VALID)
    size = find_map_size(grid)
    start = find_player(grid)
    mark_reachable_coins(grid, size, start.y, start.x)
    assert all_coins_reachable(grid) is True
    assert grid[1][3] == "c"
    assert grid[1][1] == "V"
    assert grid[1][5] == "E"


def test_exit_blocks_coin():
    grid = make_grid("1111111", "1P0E0C1", "1111111")
    size = find_map_size(grid)
    start = find_player(grid)
    mark_reachable_coins(grid, size, start.y, start.x)
    assert all_coins_reachable(grid) is False
    assert grid[1][5] == "C"


def test_walled_off_coin():
    grid = make_grid("1111111", "1P0E1C1", "1111111")
    size = find_map_size(grid)
    mark_reachable_coins(grid, size, 1, 1)
    assert all_coins_reachable(grid) is False


def test_exit_reachable():
    grid = make_grid(*VALID)
    size = find_map_size(grid)
    assert exit_reachable(grid, size, 1, 1) is True
    assert grid[1][1] == "V"


def test_exit_not_reachable():
    grid = make_grid("1111111", "1P01C01", "101E101", "1111111")
    grid = make_grid("1111111", "1P01CE1", "1001001", "1111111")
    size = find_map_size(grid)
    assert exit_reachable(grid, size, 1, 1) is False
    assert grid[1][5] == "E"


def test_large_open_map_does_not_overflow():
    width = height = 300
    rows = ["1" * width]
    rows += ["1" + "C" * (width - 2) + "1"] * (height - 2)
    rows += ["1" * width]
    grid = make_grid(*rows)
    grid[1][1] = "P"
    grid[height - 2][width - 2] = "E"
    size = find_map_size(grid)
    mark_reachable_coins(grid, size, 1, 1)
    assert all_coins_reachable(grid) is True
    fresh = make_grid(*rows)
    fresh[height - 2][width - 2] = "E"
    assert exit_reachable(fresh, size, 1, 1) is True


def test_walls_closed():
    grid = make_grid(*VALID)
    assert walls_closed(grid, find_map_size(grid)) is True


def test_walls_open_top_and_side():
    top = make_grid("1101111", "1P0C0E1", "1111111")
    assert walls_closed(top, find_map_size(top)) is False
    side = make_grid("1111111", "0P0C0E1", "1111111")
    assert walls_closed(side, find_map_size(side)) is False
    right = make_grid("1111111", "1P0C0E0", "1111111")
    assert walls_closed(right, find_map_size(right)) is False