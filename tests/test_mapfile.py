import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    check_arguments,
    load_map,
    parse_map,
    validate_characters,
    validate_path,
    validate_shape,
    validate_walls,
)

VALID = "1111111\n1P0C0E1\n1111111"


def test_parse_valid_map():
    game_map = parse_map(VALID)
    assert game_map.rows == ("1111111", "1P0C0E1", "1111111")
    assert game_map.coins == 1
    assert (game_map.width, game_map.height) == (7, 3)


def test_find_and_tile():
    game_map = parse_map(VALID)
    assert game_map.find("P") == (1, 1)
    assert game_map.find("E") == (1, 5)
    assert game_map.tile(1, 3) == "C"
    with pytest.raises(LookupError):
        game_map.find("X")
    with pytest.raises(IndexError):
        game_map.tile(3, 0)


def test_coins_counted():
    assert validate_characters("11111\n1PCC1\n1CE01\n11111") == 3


@pytest.mark.parametrize(
    "text, message",
    [
        ("1111111\n1P0X0E1\n1111111", "Invalid character"),
        ("1111111\n1P000E1\n1111111", "Either P, E or C is missing"),
        ("1111111\n1PPC0E1\n1111111", "Duplicate P or E"),
        ("1111111\n1PECEE1\n1111111", "Duplicate P or E"),
        ("1111111\n\n1P0C0E1\n1111111", "Extra lines"),
        (VALID + "\n", "Extra line in the end"),
        ("", "map is empty"),
    ],
)
def test_character_errors(text, message):
    with pytest.raises(MapError, match=message):
        validate_characters(text)


def test_wall_errors():
    with pytest.raises(MapError, match="upper or lower"):
        validate_walls(["1101111", "1P0C0E1", "1111111"])
    with pytest.raises(MapError, match="left or right"):
        validate_walls(["1111111", "1P0C0E0", "1111111"])
    validate_walls(["111", "1P1", "111"])
    assert parse_map(VALID).rows[0] == "1111111"


def test_shape_error():
    with pytest.raises(MapError, match="not rectangular"):
        validate_shape(["11111", "1PCE1", "1111111"], 5)
    with pytest.raises(MapError, match="not rectangular"):
        parse_map("11111\n1PCE1\n1111111")


def test_no_valid_path():
    with pytest.raises(MapError, match="no valid path"):
        parse_map("1111111\n1P1C0E1\n1111111")
    with pytest.raises(MapError, match="no valid path"):
        validate_path(["111111", "1PC1E1", "111111"], 1)


def test_path_reaches_all():
    rows = ["111111", "1P0001", "11C1E1", "111111"]
    validate_path(rows, 1)
    assert parse_map("\n".join(rows)).coins == 1


def test_check_arguments_ok():
    assert check_arguments(["level.ber"]) == "level.ber"


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_check_arguments_count(argv):
    with pytest.raises(MapError, match="invalid number of arguments"):
        check_arguments(argv)


def test_check_arguments_bad_extension():
    with pytest.raises(MapError, match="map type is invalid"):
        check_arguments(["level.bin2"])


def test_check_arguments_directory(tmp_path, monkeypatch):
    (tmp_path / "x.ber").mkdir()
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MapError, match="map type is invalid"):
        check_arguments(["x.ber"])


def test_load_map(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert load_map(path) == GameMap(("1111111", "1P0C0E1", "1111111"), 1)


def test_load_missing_map(tmp_path):
    with pytest.raises(MapError, match="map does not exist"):
        load_map(tmp_path / "missing.ber")


def test_load_map_rejects_crlf(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes(VALID.replace("\n", "\r\n").encode())
    with pytest.raises(MapError, match="Invalid character"):
        load_map(path)