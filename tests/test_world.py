import pytest

from raycub.world import Game, Walls, initialize_map, read_map_file

MAP = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]


def test_read_map_file_strips_newlines(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text("111\n1N1\n111\n", encoding="utf-8")
    assert read_map_file(path) == ["111", "1N1", "111"]


def test_read_map_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        read_map_file(tmp_path / "missing.cub")


def test_initialize_map_replaces_marker():
    rows, start = initialize_map(MAP)
    assert rows[2] == "10001"
    assert start == (2.5, 2.5, "N")
    assert MAP[2] == "10N01"


def test_initialize_map_without_marker():
    rows, start = initialize_map(["111", "101"])
    assert rows == ["111", "101"]
    assert start is None


def test_initialize_map_last_marker_wins():
    _, start = initialize_map(["1N1", "1S1"])
    assert start == (1.5, 1.5, "S")


@pytest.mark.parametrize(
    "marker, direction, plane",
    [
        ("N", (0, -1), (0.66, 0)),
        ("S", (0, 1), (-0.66, 0)),
        ("E", (1, 0), (0, 0.66)),
        ("W", (-1, 0), (0, -0.66)),
    ],
)
def test_orientation(marker, direction, plane):
    game = Game.from_lines(["111", f"1{marker}1", "111"])
    assert (game.dir_x, game.dir_y) == direction
    assert (game.plane_x, game.plane_y) == plane
    assert game.initial_orientation == marker


def test_from_lines_dimensions_and_position():
    game = Game.from_lines([line + "\n" for line in MAP])
    assert game.map_height == len(MAP)
    assert game.map_width == len(MAP[0])
    assert (game.pos_x, game.pos_y) == (2.5, 2.5)
    assert isinstance(game.walls, Walls) and game.walls.north is None


def test_from_lines_empty_raises():
    with pytest.raises(ValueError):
        Game.from_lines([])


def test_from_lines_without_start_raises():
    with pytest.raises(ValueError):
        Game.from_lines(["111", "101", "111"])


def test_is_free():
    game = Game.from_lines(MAP)
    assert game.is_free(2.5, 2.5)
    assert game.is_free(1.1, 3.9)
    assert not game.is_free(0.5, 2.5)
    assert not game.is_free(2.5, 10.0)
    assert not game.is_free(-1.5, 2.5)


def test_unknown_orientation_leaves_camera():
    game = Game(world_map=["0"], pos_x=0.5, pos_y=0.5, initial_orientation="X")
    game.set_initial_orientation()
    assert (game.dir_x, game.dir_y, game.plane_x, game.plane_y) == (0, 0, 0, 0)