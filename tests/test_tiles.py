import random

import pytest

from tehai.tiles import (
    MAHJONG,
    YAOCHU_TILES,
    TileParseError,
    Waits,
    count_of_tiles34,
    count_pairs_of_tiles34,
    float_equal,
    in_delta,
    init_left_tiles34,
    init_left_tiles34_with_tiles34,
    is_isolated_tile,
    is_man,
    is_pin,
    is_sou,
    is_yaochupai,
    number_to_chinese_shanten,
    outside_tiles,
    random_add_tile,
    str_to_tile34,
    str_to_tiles,
    str_to_tiles34,
    tile34_to_str,
    tiles34_to_str,
    tiles34_to_str_with_bracket,
    tiles34_to_tiles,
    tiles_to_mahjong_zh,
    tiles_to_str,
    tiles_to_str_with_bracket,
    tiles_to_tiles34,
)


@pytest.mark.parametrize(
    "tiles, expected",
    [
        ([0, 2, 9], "13m 1p"),
        ([0, 2, 3], "134m"),
        ([0, 9, 18, 27, 33], "1m 1p 1s 17z"),
        ([0, 8, 9, 17, 18, 26, 27, 33], "19m 19p 19s 17z"),
    ],
)
def test_tiles_to_merged_str(tiles, expected):
    assert tiles_to_str(tiles) == expected


@pytest.mark.parametrize(
    "text",
    [
        "123456789m 123456789p 123456789s 1234567z",
        "1114569m 1456999p 1456669s 14567777z",
        "6m",
        "7p",
        "6s",
        "3z",
        "7z",
        "7p 7s",
        "45s",
    ],
)
def test_convert_round_trip(text):
    tiles34, _ = str_to_tiles34(text)
    assert tiles34_to_str(tiles34) == text
    tiles, _ = str_to_tiles(text)
    assert tiles_to_str(tiles) == text


def test_without_spaces():
    assert str_to_tiles34("224m24p")[0] == str_to_tiles34("224m 24p")[0]


def test_str_to_tile34_values():
    assert str_to_tile34("3m") == (2, False)
    assert str_to_tile34(" 7z ") == (33, False)
    assert str_to_tile34("0p") == (13, True)
    assert str_to_tile34("1S") == (18, False)


@pytest.mark.parametrize("bad", ["0z", "8z", "3x", "33m", "m", ""])
def test_str_to_tile34_errors(bad):
    with pytest.raises(TileParseError):
        str_to_tile34(bad)


def test_red_fives_counted():
    tiles34, reds = str_to_tiles34("0m 05p")
    assert tiles34[4] == 1
    assert tiles34[13] == 2
    assert reds == [1, 1, 0]


def test_uppercase_suit():
    tiles34, _ = str_to_tiles34("1111Z")
    assert tiles34[27] == 4


@pytest.mark.parametrize("bad", ["", "   ", "11111m", "1z 8z", "0z"])
def test_str_to_tiles34_errors(bad):
    with pytest.raises(TileParseError):
        str_to_tiles34(bad)


def test_tiles34_tiles_round_trip():
    tiles = [0, 0, 5, 13, 27, 33, 33]
    assert tiles34_to_tiles(tiles_to_tiles34(tiles)) == tiles


def test_brackets_and_single():
    assert tiles_to_str_with_bracket([9, 11, 27]) == "[13p 1z]"
    assert tiles34_to_str_with_bracket(tiles_to_tiles34([9, 11, 27])) == "[13p 1z]"
    assert tiles_to_str_with_bracket([]) == "[]"
    assert tile34_to_str(2) == "3m"


def test_zh_names():
    assert tiles_to_mahjong_zh([0, 27, 33]) == ["1万", "东", "中"]


@pytest.mark.parametrize(
    "tile, expected",
    [(0, []), (1, [0]), (3, [0, 1, 2]), (4, [2, 6]), (6, [8, 7]), (8, []), (27, [])],
)
def test_outside_tiles(tile, expected):
    assert outside_tiles(tile) == expected


def test_outside_tiles_stay_in_suit():
    for tile in range(27):
        assert all(t // 9 == tile // 9 for t in outside_tiles(tile))


def test_suit_predicates():
    assert [is_man(t) for t in (0, 8, 9)] == [True, True, False]
    assert [is_pin(t) for t in (8, 9, 17, 18)] == [False, True, True, False]
    assert [is_sou(t) for t in (17, 18, 26, 27)] == [False, True, True, False]


def test_yaochupai_matches_table():
    assert [t for t in range(34) if is_yaochupai(t)] == list(YAOCHU_TILES)


def test_is_isolated_tile():
    tiles34, _ = str_to_tiles34("3m 1z")
    assert not is_isolated_tile(0, tiles34)
    assert not is_isolated_tile(4, tiles34)
    assert is_isolated_tile(5, tiles34)
    assert is_isolated_tile(9, tiles34)
    assert not is_isolated_tile(27, tiles34)
    assert is_isolated_tile(28, tiles34)


def test_counts():
    tiles34, _ = str_to_tiles34("11223m 555p 7z")
    assert count_of_tiles34(tiles34) == 9
    assert count_pairs_of_tiles34(tiles34) == 3


def test_left_tiles():
    assert init_left_tiles34() == [4] * 34
    tiles34, _ = str_to_tiles34("111m 7z")
    left = init_left_tiles34_with_tiles34(tiles34)
    assert left[0] == 1
    assert left[33] == 3
    assert sum(left) == 136 - 4


def test_random_add_tile():
    tiles34 = [0] * 34
    rng = random.Random(7)
    for _ in range(20):
        random_add_tile(tiles34, rng)
    assert count_of_tiles34(tiles34) == 20
    assert max(tiles34) <= 4


def test_random_add_tile_full():
    with pytest.raises(ValueError):
        random_add_tile([4] * 34, random.Random(1))


def test_waits():
    waits = Waits({0: 4, 8: 2, 27: 0})
    assert waits.all_count() == 6
    assert waits.indexes() == [0, 8, 27]
    assert waits.available_tiles() == [0, 8]
    assert waits.tiles_zh() == ["1万", "9万", "东"]
    assert str(waits) == "6 进张 [19m 1z]"
    assert waits.equals(Waits({8: 1, 0: 1}))
    assert not waits.equals(Waits({0: 1}))


def test_empty_waits():
    assert str(Waits()) == "0 进张 []"
    assert Waits().available_tiles() == []


def test_chinese_shanten():
    assert number_to_chinese_shanten(-1) == "和了"
    assert number_to_chinese_shanten(0) == "听牌"
    assert number_to_chinese_shanten(8) == "八向听"
    with pytest.raises(ValueError):
        number_to_chinese_shanten(9)
    with pytest.raises(ValueError):
        number_to_chinese_shanten(-2)


def test_float_helpers():
    assert in_delta(1.0, 1.05, 0.1)
    assert not in_delta(1.0, 1.2, 0.1)
    assert float_equal(0.1 + 0.2, 0.3)
    assert not float_equal(1.0, 1.001)


def test_tile_names_parse_back():
    for index, name in enumerate(MAHJONG):
        assert str_to_tile34(name) == (index, False)