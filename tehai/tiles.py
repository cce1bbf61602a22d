"""Tile indexes, tile strings and the waits mapping.

Tiles are indexed 0..33: 0-8 characters (m), 9-17 circles (p),
18-26 bamboo (s) and 27-33 honors (z).
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence

MAHJONG: tuple[str, ...] = (
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "1z", "2z", "3z", "4z", "5z", "6z", "7z",
)

MAHJONG_U: tuple[str, ...] = (
    "1M", "2M", "3M", "4M", "5M", "6M", "7M", "8M", "9M",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1S", "2S", "3S", "4S", "5S", "6S", "7S", "8S", "9S",
    "1Z", "2Z", "3Z", "4Z", "5Z", "6Z", "7Z",
)

MAHJONG_ZH: tuple[str, ...] = (
    "1万", "2万", "3万", "4万", "5万", "6万", "7万", "8万", "9万",
    "1饼", "2饼", "3饼", "4饼", "5饼", "6饼", "7饼", "8饼", "9饼",
    "1索", "2索", "3索", "4索", "5索", "6索", "7索", "8索", "9索",
    "东", "南", "西", "北", "白", "发", "中",
)

YAOCHU_TILES: tuple[int, ...] = (0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33)

# 258m 258p 258s 12345z is eight away from a normal hand.
CHINESE_SHANTEN: tuple[str, ...] = (
    "和了", "听牌", "一向听", "两向听", "三向听",
    "四向听", "五向听", "六向听", "七向听", "八向听",
)

_SUITS = b"mpsz"


class TileParseError(ValueError):
    """Raised when a tile string cannot be parsed."""


class Waits(dict):
    """Mapping of waiting tile index to the number of copies still left."""

    def all_count(self) -> int:
        return sum(self.values())

    def available_tiles(self) -> list[int]:
        """Sorted waiting tiles that still have copies left."""
        return sorted(tile for tile, left in self.items() if left > 0)

    def indexes(self) -> list[int]:
        return sorted(self)

    def tiles_zh(self) -> list[str]:
        return [MAHJONG_ZH[tile] for tile in self.indexes()]

    def equals(self, other: Waits) -> bool:
        """Whether both waits have the same available tiles."""
        return self.available_tiles() == other.available_tiles()

    def __str__(self) -> str:
        return f"{self.all_count()} 进张 {tiles_to_str_with_bracket(self.indexes())}"


def tiles_to_mahjong_zh(tiles: Iterable[int]) -> list[str]:
    return [MAHJONG_ZH[tile] for tile in tiles]


def is_man(tile: int) -> bool:
    return tile < 9


def is_pin(tile: int) -> bool:
    return 9 <= tile < 18


def is_sou(tile: int) -> bool:
    return 18 <= tile < 27


def is_yaochupai(tile: int) -> bool:
    """Terminal or honor tile."""
    if tile >= 27:
        return True
    return tile % 9 in (0, 8)


def is_isolated_tile(tile: int, tiles34: Sequence[int]) -> bool:
    """Whether ``tile`` would have no neighbour within two in ``tiles34``."""
    if tile >= 27:
        return tiles34[tile] == 0
    t = tile % 9
    low = tile - t + max(0, t - 2)
    high = tile - t + min(8, t + 2)
    return not any(tiles34[low:high + 1])


def count_of_tiles34(tiles34: Iterable[int]) -> int:
    return sum(tiles34)


def count_pairs_of_tiles34(tiles34: Iterable[int]) -> int:
    return sum(1 for c in tiles34 if c >= 2)


def init_left_tiles34() -> list[int]:
    return [4] * 34


def init_left_tiles34_with_tiles34(tiles34: Sequence[int]) -> list[int]:
    """Tiles left once the given tiles are removed from a full set."""
    return [4 - c for c in tiles34]


def outside_tiles(tile: int) -> list[int]:
    """Tiles on the outer side of ``tile`` within its suit."""
    if tile >= 27:
        return []
    if tile < 0:
        raise ValueError(f"invalid tile index: {tile}")
    rank = tile % 9 + 1
    base = tile - tile % 9
    if rank in (1, 9):
        return []
    if rank in (2, 3, 4):
        return list(range(base, tile))
    if rank == 5:
        return [tile - 2, tile + 2]
    return list(range(base + 8, tile, -1))


def random_add_tile(tiles34: list[int], rng: random.Random | None = None) -> int:
    """Add one random tile with fewer than four copies; return its index."""
    if all(c >= 4 for c in tiles34):
        raise ValueError("every tile already has four copies")
    choose = (rng or random).randrange
    while True:
        tile = choose(34)
        if tiles34[tile] < 4:
            tiles34[tile] += 1
            return tile


def tiles34_to_tiles(tiles34: Iterable[int]) -> list[int]:
    return [tile for tile, c in enumerate(tiles34) for _ in range(c)]


def tiles_to_tiles34(tiles: Iterable[int]) -> list[int]:
    tiles34 = [0] * 34
    for tile in tiles:
        tiles34[tile] += 1
    return tiles34


def str_to_tile34(human_tile: str) -> tuple[int, bool]:
    """Parse a tile such as ``"3m"``; ``0`` stands for a red five.

    Returns the tile index and whether it is a red five.
    """
    raw = human_tile.strip().encode()
    if len(raw) != 2:
        raise TileParseError(f"参数错误: {human_tile}")
    suit_byte = raw[1]
    if ord("A") <= suit_byte <= ord("Z"):
        suit_byte += 32
    suit = _SUITS.find(bytes([suit_byte]))
    if suit == -1:
        raise TileParseError(f"参数错误: {human_tile}")
    digit = raw[0]
    is_red_five = False
    if digit == ord("0"):
        if suit == 3:
            raise TileParseError(f"参数错误: {human_tile}")
        digit = ord("5")
        is_red_five = True
    tile34 = 9 * suit + ((digit - ord("1")) & 0xFF)
    if tile34 >= 34:
        raise TileParseError(f"参数错误: {human_tile}")
    return tile34, is_red_five


def str_to_tiles34(human_tiles: str) -> tuple[list[int], list[int]]:
    """Parse a hand such as ``"224m 24p"`` (spaces optional).

    Returns the 34-count list and the number of red fives per suit (m, p, s).
    """
    text = human_tiles
    for suit in "mpsz":
        text = text.replace(suit, suit + " ")
    text = text.strip()
    if not text:
        raise TileParseError("参数错误: 处理的手牌不能为空")

    tiles34 = [0] * 34
    num_red_fives = [0] * 3
    for part in text.split(" "):
        part = part.strip()
        if not part:
            continue
        if len(part.encode()) < 2:
            raise TileParseError(f"参数错误: {text}")
        suit = part[-1]
        for ch in part[:-1]:
            tile34, is_red_five = str_to_tile34(ch + suit)
            tiles34[tile34] += 1
            if tiles34[tile34] > 4:
                raise TileParseError(f"参数错误: {text} 有超过 4 张一样的牌")
            if is_red_five:
                num_red_fives[tile34 // 9] += 1
    return tiles34, num_red_fives


def str_to_tiles(human_tiles: str) -> tuple[list[int], list[int]]:
    """Parse a hand into a sorted tile list and red five counts."""
    tiles34, num_red_fives = str_to_tiles34(human_tiles)
    return tiles34_to_tiles(tiles34), num_red_fives


def tiles34_to_str(tiles34: Sequence[int]) -> str:
    parts = []
    for low, high, suit in ((0, 9, "m"), (9, 18, "p"), (18, 27, "s"), (27, 34, "z")):
        digits = "".join(
            str(rank) * c for rank, c in enumerate(tiles34[low:high], start=1)
        )
        if digits:
            parts.append(digits + suit)
    return " ".join(parts)


def tiles_to_str(tiles: Iterable[int]) -> str:
    return tiles34_to_str(tiles_to_tiles34(tiles))


def tile34_to_str(tile34: int) -> str:
    return tiles_to_str([tile34])


def tiles_to_str_with_bracket(tiles: Iterable[int]) -> str:
    return f"[{tiles_to_str(tiles)}]"


def tiles34_to_str_with_bracket(tiles34: Sequence[int]) -> str:
    return f"[{tiles34_to_str(tiles34)}]"


def number_to_chinese_shanten(num: int) -> str:
    """-1 is a complete hand, 0 is tenpai, 1 is one away, and so on."""
    if not -1 <= num < len(CHINESE_SHANTEN) - 1:
        raise ValueError(f"shanten out of range: {num}")
    return CHINESE_SHANTEN[num + 1]


def in_delta(a: float, b: float, delta: float) -> bool:
    return math.fabs(a - b) < delta


def float_equal(a: float, b: float) -> bool:
    return in_delta(a, b, 1e-5)