"""Values of discard candidates and the shanten reachable by calling a tile."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tehai.shanten import calculate_shanten
from tehai.tenpai import Meld, MeldType

HONOR_RISK_ROUND_WIND = 4
HONOR_RISK_YAKU = 3
HONOR_RISK_OTAKAZE = 2
HONOR_RISK_SELF_WIND = 1

DORA_VALUE = 10000.0
DORA_FIRST_NEIGHBOUR_VALUE = 1000.0
DORA_SECOND_NEIGHBOUR_VALUE = 100.0
HONORED_VALUE = 15.0

_NO_MELD_SHANTEN = 99


def calculate_isolated_tile_value(
    tile: int,
    self_wind_tile: int,
    round_wind_tile: int,
    left_tiles34: Sequence[int],
    dora_tiles: Iterable[int] = (),
) -> float:
    """Value of keeping an isolated terminal or honor tile; lower goes first."""
    value = 100.0
    value += DORA_VALUE * sum(1 for dora in dora_tiles if dora == tile)

    if tile < 27:
        return value

    if tile == self_wind_tile or tile == round_wind_tile or tile >= 31:
        # A tile that gives yaku as a triplet.
        value += HONORED_VALUE
        if self_wind_tile == round_wind_tile and tile == self_wind_tile:
            value += HONORED_VALUE
        elif tile == self_wind_tile:
            value += 1
        elif tile == round_wind_tile:
            value -= 1
        if tile == 31:
            value -= 0.1
        if tile == 32:
            value -= 0.2
    else:
        # Guest wind: next player -3, opposite -2, previous -1.
        for offset in range(1, 4):
            otakaze = self_wind_tile + offset
            if otakaze > 30:
                otakaze -= 4
            if tile == otakaze:
                value -= 4 - offset
                break

    left = left_tiles34[tile]
    if left == 2:
        value *= 0.9
    elif left == 1:
        value *= 0.2
    elif left == 0:
        value = 0.0
    return value


def calculate_tile_value(tile: int, dora_tiles: Iterable[int] = ()) -> float:
    """Value of a tile from being dora or lying next to a suited dora."""
    value = 0.0
    for dora in dora_tiles:
        if tile == dora:
            value += DORA_VALUE
        elif dora < 27:
            if tile // 3 != dora // 3:
                continue
            t9 = tile % 9
            dt9 = dora % 9
            if t9 + 1 == dt9 or t9 - 1 == dt9:
                value += DORA_FIRST_NEIGHBOUR_VALUE
            elif t9 + 2 == dt9 or t9 - 2 == dt9:
                value += DORA_SECOND_NEIGHBOUR_VALUE
    return value


def honor_tile_risk(tile: int, self_wind_tile: int, round_wind_tile: int) -> int:
    """Rank of an honor discard: round wind, dragons, guest winds, own wind."""
    if tile < 27:
        return 0
    if tile == round_wind_tile:
        return HONOR_RISK_ROUND_WIND
    if tile in (31, 32, 33):
        return HONOR_RISK_YAKU
    if tile == self_wind_tile:
        return HONOR_RISK_SELF_WIND
    return HONOR_RISK_OTAKAZE


def stop_shanten(shanten: int) -> int:
    """Shanten at which the search tree stops for a hand of ``shanten``."""
    if shanten >= 3:
        return shanten - 1
    return shanten - 2


def calculate_meld_shanten(
    tiles34: Sequence[int], called_tile: int, is_red_five: bool, allow_chi: bool
) -> tuple[int, list[Meld]]:
    """Possible calls of ``called_tile`` and the lowest shanten after any of them.

    With no possible call the shanten returned is 99. ``tiles34`` is not modified.
    """
    tiles = list(tiles34)
    combinations: list[Meld] = []

    if tiles[called_tile] >= 2:
        combinations.append(
            Meld(
                meld_type=MeldType.PON,
                tiles=[called_tile] * 3,
                self_tiles=[called_tile, called_tile],
                called_tile=called_tile,
                red_five_from_others=is_red_five,
            )
        )

    if allow_chi and called_tile < 27:
        t9 = called_tile % 9
        pairs = []
        if t9 >= 2:
            pairs.append((called_tile - 2, called_tile - 1))
        if 1 <= t9 <= 7:
            pairs.append((called_tile - 1, called_tile + 1))
        if t9 <= 6:
            pairs.append((called_tile + 1, called_tile + 2))
        for tile_a, tile_b in pairs:
            if tiles[tile_a] > 0 and tiles[tile_b] > 0:
                combinations.append(
                    Meld(
                        meld_type=MeldType.CHI,
                        tiles=sorted([tile_a, tile_b, called_tile]),
                        self_tiles=[tile_a, tile_b],
                        called_tile=called_tile,
                        red_five_from_others=is_red_five,
                    )
                )

    min_shanten = _NO_MELD_SHANTEN
    for meld in combinations:
        first, second = meld.self_tiles
        tiles[first] -= 1
        tiles[second] -= 1
        min_shanten = min(min_shanten, calculate_shanten(tiles))
        tiles[first] += 1
        tiles[second] += 1
    return min_shanten, combinations