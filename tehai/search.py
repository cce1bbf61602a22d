"""Search trees of draws and discards that move a hand towards tenpai."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tehai.shanten import SHANTEN_AGARI, SHANTEN_TENPAI, calculate_shanten
from tehai.tiles import MAHJONG, Waits, count_of_tiles34, init_left_tiles34_with_tiles34


@dataclass
class SearchNode13:
    """A 3k+1 tile hand and the draws that lower its shanten."""

    shanten: int
    waits: Waits = field(default_factory=Waits)
    children: dict[int, SearchNode14 | None] = field(default_factory=dict)

    def render(self, prefix: str = "") -> str:
        lines = []
        for draw_tile, node14 in sorted(self.children.items()):
            lines.append(f"{prefix}摸 {MAHJONG[draw_tile]}\n")
            lines.append(_render14(node14, prefix + "  "))
        return "".join(lines)

    def __str__(self) -> str:
        return self.render("")


@dataclass
class SearchNode14:
    """A 3k+2 tile hand and the discards that keep its target shanten."""

    shanten: int
    children: dict[int, SearchNode13] = field(default_factory=dict)

    def render(self, prefix: str = "") -> str:
        if self.shanten == SHANTEN_AGARI:
            return prefix + "end\n"
        lines = []
        for discard_tile, node13 in sorted(self.children.items()):
            lines.append(f"{prefix}舍 {MAHJONG[discard_tile]}\n")
            lines.append(node13.render(prefix + "  "))
        return "".join(lines)

    def __str__(self) -> str:
        return self.render("")


def _render14(node: SearchNode14 | None, prefix: str) -> str:
    if node is None:
        return prefix + "end\n"
    return node.render(prefix)


def _is_agari(tiles34: Sequence[int]) -> bool:
    return count_of_tiles34(tiles34) % 3 == 2 and calculate_shanten(tiles34) == SHANTEN_AGARI


def _search13(current: int, tiles: list[int], left: list[int], stop: int) -> SearchNode13:
    waits = Waits()
    children: dict[int, SearchNode14 | None] = {}
    is_tenpai = current == SHANTEN_TENPAI

    for i in range(34):
        if tiles[i] == 4:
            continue
        tiles[i] += 1
        if is_tenpai:
            if _is_agari(tiles):
                waits[i] = left[i]
                children[i] = None
        elif calculate_shanten(tiles) < current:
            # Recorded even with nothing left: furiten checks need the wait kinds.
            waits[i] = left[i]
            if left[i] > 0 and current - 1 >= stop:
                left[i] -= 1
                children[i] = _search14(current - 1, tiles, left, stop)
                left[i] += 1
            else:
                children[i] = None
        tiles[i] -= 1

    return SearchNode13(shanten=current, waits=waits, children=children)


def _search14(target: int, tiles: list[int], left: list[int], stop: int) -> SearchNode14:
    children: dict[int, SearchNode13] = {}
    for i in range(34):
        if tiles[i] == 0:
            continue
        tiles[i] -= 1
        if calculate_shanten(tiles) == target:
            children[i] = _search13(target, tiles, left, stop)
        tiles[i] += 1
    return SearchNode14(shanten=target, children=children)


def _prepare(
    tiles34: Sequence[int], left_tiles34: Sequence[int] | None
) -> tuple[list[int], list[int]]:
    tiles = list(tiles34)
    if len(tiles) != 34:
        raise ValueError(f"expected 34 tile counts, got {len(tiles)}")
    left = list(left_tiles34) if left_tiles34 else init_left_tiles34_with_tiles34(tiles)
    return tiles, left


def search13(
    current_shanten: int,
    tiles34: Sequence[int],
    left_tiles34: Sequence[int] | None,
    stop_at_shanten: int,
) -> SearchNode13:
    """Search draws that lower the shanten of a 3k+1 hand, down to ``stop_at_shanten``."""
    tiles, left = _prepare(tiles34, left_tiles34)
    return _search13(current_shanten, tiles, left, stop_at_shanten)


def search14(
    target_shanten: int,
    tiles34: Sequence[int],
    left_tiles34: Sequence[int] | None,
    stop_at_shanten: int,
) -> SearchNode14:
    """Search discards of a 3k+2 hand that leave ``target_shanten``.

    A target one above the hand's shanten searches discards that step back.
    """
    tiles, left = _prepare(tiles34, left_tiles34)
    return _search14(target_shanten, tiles, left, stop_at_shanten)


def search_shanten14(
    shanten: int,
    tiles34: Sequence[int],
    left_tiles34: Sequence[int] | None,
    stop_at_shanten: int,
) -> SearchNode14:
    """Like :func:`search14`, but a complete hand gives an empty node."""
    if shanten == SHANTEN_AGARI:
        return SearchNode14(shanten=shanten)
    return search14(shanten, tiles34, left_tiles34, stop_at_shanten)


def calculate_shanten_and_waits13(
    tiles34: Sequence[int], left_tiles34: Sequence[int] | None = None
) -> tuple[int, Waits]:
    """Shanten and waits (counting remaining copies) of a 3k+1 hand."""
    tiles, left = _prepare(tiles34, left_tiles34)
    shanten = calculate_shanten(tiles)
    node = _search13(shanten, tiles, left, shanten)
    return shanten, node.waits