"""Analysis results for 3k+1 and 3k+2 tile hands, and their ordering."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key

from tehai.tiles import (
    MAHJONG_ZH,
    Waits,
    count_of_tiles34,
    float_equal,
    in_delta,
    number_to_chinese_shanten,
    tiles_to_str_with_bracket,
)
from tehai.yaku import yaku_types_with_dora_to_str

_ROUND_POINT_WEIGHT = -1500
_LEFT_TURNS = 10.0


def _round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


@dataclass
class Hand13AnalysisResult:
    """Analysis of a 3k+1 tile hand."""

    tiles34: list[int] = field(default_factory=lambda: [0] * 34)
    left_tiles34: list[int] = field(default_factory=lambda: [4] * 34)
    # Whether the hand has called tiles (is not closed).
    is_naki: bool = False
    shanten: int = 0
    # Waits counting remaining copies; a fully visible wait has value 0.
    waits: Waits = field(default_factory=Waits)
    # Waits that win without riichi.
    dama_waits: Waits = field(default_factory=Waits)
    # Wait tile -> best wait count once the shanten has advanced.
    next_shanten_waits_count_map: dict[int, int] = field(default_factory=dict)
    avg_next_shanten_waits_count: float = 0.0
    mixed_waits_score: float = 0.0
    # Draw tile -> best waits after an improving draw and discard.
    improves: dict[int, Waits] = field(default_factory=dict)
    improve_way_count: int = 0
    avg_improve_waits_count: float = 0.0
    avg_agari_rate: float = 0.0
    furiten_rate: float = 0.0
    yaku_types: set[int] = field(default_factory=set)
    is_part_wait: bool = False
    dora_count: int = 0
    dama_point: float = 0.0
    riichi_point: float = 0.0
    # Expected round balance.
    round_point: float = 0.0

    def speed_score(self) -> float:
        """Rough probability (in percent) of advancing the shanten twice."""
        waits_count = self.waits.all_count()
        if waits_count == 0 or self.avg_next_shanten_waits_count == 0:
            return 0.0
        left_count = float(count_of_tiles34(self.left_tiles34))
        p2 = waits_count / left_count
        p1 = self.avg_next_shanten_waits_count / left_count
        q2, q1 = 1 - p2, 1 - p1
        if q2 == q1:
            return math.nan
        sum_p2 = q2 * (1 - q2 ** _LEFT_TURNS) / p2
        sum_p1 = q1 * (1 - q1 ** _LEFT_TURNS) / p1
        return p2 * p1 * (sum_p2 - sum_p1) / (q2 - q1) * 100

    def mixed_round_point(self) -> float:
        """Round balance from the agari rate and the riichi or dama points."""
        point = self.riichi_point if self.riichi_point > 0 else self.dama_point
        return self.avg_agari_rate / 100 * (point + 1500) + _ROUND_POINT_WEIGHT

    def __str__(self) -> str:
        s = (
            f"{self.waits.all_count()} 进张 {tiles_to_str_with_bracket(self.waits.indexes())}\n"
            f"{self.avg_improve_waits_count:.2f} 改良进张 "
            f"[{len(self.improves)}({self.improve_way_count}) 种]"
        )
        if self.dama_waits:
            s += f"（默听进张 {tiles_to_str_with_bracket(self.dama_waits.indexes())}）"
        if self.shanten >= 1:
            s += (
                f" {self.avg_next_shanten_waits_count:.2f} "
                f"{number_to_chinese_shanten(self.shanten - 1)}进张"
                f"（{self.mixed_waits_score:.2f} 综合分）"
            )
        if self.avg_agari_rate > 0:
            s += f"[{self.avg_agari_rate:.2f}% 和率] "
        if self.round_point > 0:
            s += f" [局收支{_round_half_away(self.round_point)}]"
        if self.dama_point > 0:
            s += f"[默听{_round_half_away(self.dama_point)}]"
        if self.riichi_point > 0:
            s += f"[立直{_round_half_away(self.riichi_point)}]"
        if 0 <= self.shanten <= 1 and self.furiten_rate > 0:
            s += "[可能振听]" if self.furiten_rate < 1 else "[振听]"
        if self.yaku_types:
            s += yaku_types_with_dora_to_str(self.yaku_types, self.dora_count)
        return s


@dataclass
class Hand14AnalysisResult:
    """A discard from a 3k+2 tile hand and the analysis of what remains."""

    discard_tile: int
    result13: Hand13AnalysisResult
    is_discard_dora_tile: bool = False
    # Value of the discarded tile (dora or near dora, honors by role).
    discard_tile_value: float = 0.0
    is_isolated_yaochu_discard_tile: bool = False
    discard_honor_tile_risk: int = 0
    left_draw_tiles_count: int = 0
    # Own tiles used for a call, e.g. [1, 2] when calling with 23m.
    open_tiles: list[int] | None = None

    def __str__(self) -> str:
        meld_info = ""
        if self.open_tiles:
            first, second = self.open_tiles[0], self.open_tiles[1]
            meld_type = "碰" if first == second else "吃"
            meld_info = f"用 {MAHJONG_ZH[first][:1]}{MAHJONG_ZH[second]} {meld_type}，"
        return f"{meld_info}切 {MAHJONG_ZH[self.discard_tile]}: {self.result13}"


def _fold(tile: int) -> int:
    rank = tile % 9
    return 8 - rank if rank > 4 else rank


def _less(
    a: Hand14AnalysisResult, b: Hand14AnalysisResult, shanten: int, improve_first: bool
) -> bool:
    ri, rj = a.result13, b.result13
    wi_count, wj_count = ri.waits.all_count(), rj.waits.all_count()

    # Discards with no waits always go last; only then look at improvements.
    if wi_count == 0 or wj_count == 0:
        if wi_count == 0 and wj_count == 0:
            return ri.avg_improve_waits_count > rj.avg_improve_waits_count
        return wi_count > wj_count

    if shanten == 0:
        if not in_delta(ri.round_point, rj.round_point, 100):
            return ri.round_point > rj.round_point
        if not float_equal(ri.avg_agari_rate, rj.avg_agari_rate):
            return ri.avg_agari_rate > rj.avg_agari_rate
    elif shanten in (1, 2) and not (shanten >= 2 and improve_first):
        wi = float(wi_count)
        if ri.round_point < 0:
            wi = 1 / wi
        wj = float(wj_count)
        if rj.round_point < 0:
            wj = 1 / wj
        score_i = wi * ri.round_point
        score_j = wj * rj.round_point
        if not float_equal(score_i, score_j):
            return score_i > score_j

    if shanten >= 2:
        if a.is_isolated_yaochu_discard_tile and b.is_isolated_yaochu_discard_tile:
            if a.discard_tile_value != b.discard_tile_value:
                return a.discard_tile_value < b.discard_tile_value
        elif a.is_isolated_yaochu_discard_tile and a.discard_tile_value < 500:
            return True
        elif b.is_isolated_yaochu_discard_tile and b.discard_tile_value < 500:
            return False

    if improve_first and not float_equal(
        ri.avg_improve_waits_count, rj.avg_improve_waits_count
    ):
        return ri.avg_improve_waits_count > rj.avg_improve_waits_count

    if not float_equal(ri.mixed_waits_score, rj.mixed_waits_score):
        return ri.mixed_waits_score > rj.mixed_waits_score
    if wi_count != wj_count:
        return wi_count > wj_count
    if not float_equal(ri.avg_next_shanten_waits_count, rj.avg_next_shanten_waits_count):
        return ri.avg_next_shanten_waits_count > rj.avg_next_shanten_waits_count
    if not float_equal(ri.avg_agari_rate, rj.avg_agari_rate):
        return ri.avg_agari_rate > rj.avg_agari_rate
    if not float_equal(ri.avg_improve_waits_count, rj.avg_improve_waits_count):
        return ri.avg_improve_waits_count > rj.avg_improve_waits_count
    if a.discard_tile_value != b.discard_tile_value:
        # Lower value goes first.
        return a.discard_tile_value < b.discard_tile_value

    # Middle tiles first, suited tiles before honors.
    ti, tj = a.discard_tile, b.discard_tile
    if ti < 27 and tj < 27:
        return _fold(ti) > _fold(tj)
    if ti < 27 or tj < 27:
        return ti < tj
    # Round wind, dragons, other winds, own wind.
    return a.discard_honor_tile_risk > b.discard_honor_tile_risk


def sort_results(results: list[Hand14AnalysisResult], improve_first: bool) -> None:
    """Sort discards best first, in place.

    With ``improve_first`` improvements weigh more (two or more shanten).
    """
    if len(results) <= 1:
        return
    shanten = results[0].result13.shanten

    def compare(a: Hand14AnalysisResult, b: Hand14AnalysisResult) -> int:
        if _less(a, b, shanten, improve_first):
            return -1
        if _less(b, a, shanten, improve_first):
            return 1
        return 0

    results.sort(key=cmp_to_key(compare))


def filter_out_discard(
    results: Iterable[Hand14AnalysisResult], cant_discard_tile: int
) -> list[Hand14AnalysisResult]:
    """Results without those that discard ``cant_discard_tile``."""
    return [r for r in results if r.discard_tile != cant_discard_tile]


def add_open_tiles(results: Iterable[Hand14AnalysisResult], open_tiles: Sequence[int]) -> None:
    """Record the own tiles used for a call on every result."""
    tiles = list(open_tiles)
    for r in results:
        r.open_tiles = tiles