"""Shanten (tiles-away-from-ready) calculation for normal and seven-pairs hands."""

from __future__ import annotations

from collections.abc import Sequence

from tehai.tiles import count_of_tiles34

SHANTEN_AGARI = -1
SHANTEN_TENPAI = 0

_MAX_NORMAL_SHANTEN = 8


def calculate_shanten_of_chiitoi(tiles34: Sequence[int]) -> int:
    """Seven-pairs shanten: 6 - pairs + max(0, 7 - kinds)."""
    shanten = 6
    kinds = 0
    for c in tiles34:
        if c == 0:
            continue
        if c >= 2:
            shanten -= 1
        kinds += 1
    return shanten + max(0, 7 - kinds)


class _NormalShanten:
    """Depth-first decomposition of a hand into melds, pairs and partial sets."""

    def __init__(self, tiles34: Sequence[int], count_of_tiles: int) -> None:
        self.tiles = list(tiles34)
        self.melds = (14 - count_of_tiles) // 3
        self.tatsu = 0
        self.pairs = 0
        # Honor tiles that must be discarded at least; shanten cannot go below this.
        self.jidahai = 0
        # Bit sets over 28 bits: 27 suited tiles and one bit for all honors.
        self.ankan_tiles = 0
        self.isolated_tiles = 0
        self.min_shanten = _MAX_NORMAL_SHANTEN

        self._scan_honors(count_of_tiles)
        for i, c in enumerate(self.tiles[:27]):
            if c == 4:
                self.ankan_tiles |= 1 << i

    def _scan_honors(self, count_of_tiles: int) -> None:
        ankan = 0
        isolated = 0
        for i, c in enumerate(self.tiles[27:]):
            if c == 1:
                isolated |= 1 << i
            elif c == 2:
                self.pairs += 1
            elif c == 3:
                self.melds += 1
            elif c == 4:
                self.melds += 1
                self.jidahai += 1
                ankan |= 1 << i
                isolated |= 1 << i

        if self.jidahai > 0 and count_of_tiles % 3 == 2:
            self.jidahai -= 1

        if isolated:
            self.isolated_tiles |= 1 << 27
            if ankan | isolated == ankan:
                # The only lone honor is part of a quad; it cannot serve as a pair wait.
                self.ankan_tiles |= 1 << 27

    def _current(self) -> int:
        shanten = 8 - 2 * self.melds - self.tatsu - self.pairs
        candidates = self.melds + self.tatsu
        if self.pairs > 0:
            candidates += self.pairs - 1
        elif self.ankan_tiles and self.isolated_tiles:
            if self.ankan_tiles | self.isolated_tiles == self.ankan_tiles:
                # No pair and the only lone tiles sit inside quads, e.g. 5555m.
                shanten += 1
        if candidates > 4:
            shanten += candidates - 4
        if shanten != SHANTEN_AGARI and shanten < self.jidahai:
            return self.jidahai
        return shanten

    def _set(self, k: int, sign: int) -> None:
        self.tiles[k] -= 3 * sign
        self.melds += sign

    def _pair(self, k: int, sign: int) -> None:
        self.tiles[k] -= 2 * sign
        self.pairs += sign

    def _sequence(self, k: int, sign: int) -> None:
        self.tiles[k] -= sign
        self.tiles[k + 1] -= sign
        self.tiles[k + 2] -= sign
        self.melds += sign

    def _tatsu_first(self, k: int, sign: int) -> None:
        self.tiles[k] -= sign
        self.tiles[k + 1] -= sign
        self.tatsu += sign

    def _tatsu_second(self, k: int, sign: int) -> None:
        self.tiles[k] -= sign
        self.tiles[k + 2] -= sign
        self.tatsu += sign

    def _isolated(self, k: int, sign: int) -> None:
        self.tiles[k] -= sign
        if sign > 0:
            self.isolated_tiles |= 1 << k
        else:
            self.isolated_tiles &= ~(1 << k)

    def _try(self, take, depth: int, next_depth: int) -> None:
        take(depth, 1)
        self.run(next_depth)
        take(depth, -1)

    def run(self, depth: int) -> None:
        if self.min_shanten == SHANTEN_AGARI:
            return
        tiles = self.tiles
        while depth < 27 and tiles[depth] == 0:
            depth += 1
        if depth >= 27:
            self.min_shanten = min(self.min_shanten, self._current())
            return

        i = depth % 9
        count = tiles[depth]
        d = depth

        if count == 1:
            if i < 6 and tiles[d + 1] == 1 and tiles[d + 2] > 0 and tiles[d + 3] < 4:
                self._try(self._sequence, d, d + 2)
            else:
                self._try(self._isolated, d, d + 1)
                if i < 7 and tiles[d + 2] > 0:
                    if tiles[d + 1] != 0:
                        self._try(self._sequence, d, d + 1)
                    self._try(self._tatsu_second, d, d + 1)
                if i < 8 and tiles[d + 1] > 0:
                    self._try(self._tatsu_first, d, d + 1)
        elif count == 2:
            self._try(self._pair, d, d + 1)
            if i < 7 and tiles[d + 1] > 0 and tiles[d + 2] > 0:
                self._try(self._sequence, d, d)
        elif count == 3:
            self._try(self._set, d, d + 1)

            self._pair(d, 1)
            if i < 7 and tiles[d + 1] > 0 and tiles[d + 2] > 0:
                self._try(self._sequence, d, d + 1)
            else:
                if i < 7 and tiles[d + 2] > 0:
                    self._try(self._tatsu_second, d, d + 1)
                if i < 8 and tiles[d + 1] > 0:
                    self._try(self._tatsu_first, d, d + 1)
            self._pair(d, -1)

            if i < 7 and tiles[d + 1] >= 2 and tiles[d + 2] >= 2:
                self._sequence(d, 1)
                self._sequence(d, 1)
                self.run(d)
                self._sequence(d, -1)
                self._sequence(d, -1)
        elif count == 4:
            self._set(d, 1)
            if i < 7 and tiles[d + 2] > 0:
                if tiles[d + 1] > 0:
                    self._try(self._sequence, d, d + 1)
                self._try(self._tatsu_second, d, d + 1)
            if i < 8 and tiles[d + 1] > 0:
                self._try(self._tatsu_first, d, d + 1)
            self._try(self._isolated, d, d + 1)
            self._set(d, -1)

            self._pair(d, 1)
            if i < 7 and tiles[d + 2] > 0:
                if tiles[d + 1] > 0:
                    self._try(self._sequence, d, d)
                self._try(self._tatsu_second, d, d + 1)
            if i < 8 and tiles[d + 1] > 0:
                self._try(self._tatsu_first, d, d + 1)
            self._pair(d, -1)


def calculate_shanten_of_normal(tiles34: Sequence[int], count_of_tiles: int) -> int:
    """Shanten of a normal hand (ignoring seven pairs and thirteen orphans).

    Works for 3k+1 and 3k+2 tiles; ``tiles34`` is not modified.
    """
    if len(tiles34) != 34:
        raise ValueError(f"expected 34 tile counts, got {len(tiles34)}")
    search = _NormalShanten(tiles34, count_of_tiles)
    search.run(0)
    return search.min_shanten


def calculate_shanten(tiles34: Sequence[int]) -> int:
    """Shanten of a hand, also considering seven pairs for 13 or 14 tiles."""
    count = count_of_tiles34(tiles34)
    if count > 14:
        raise ValueError(f"too many tiles ({count} > 14): {list(tiles34)}")
    shanten = calculate_shanten_of_normal(tiles34, count)
    if count >= 13:
        shanten = min(shanten, calculate_shanten_of_chiitoi(tiles34))
    return shanten