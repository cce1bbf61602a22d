# tehai

A library for analysing riichi mahjong hands: parsing tile notation,
counting shanten, finding waits, ordering discard candidates, looking up yaku
han values and estimating how likely an opponent who has called tiles is to
be tenpai.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Tile notation (`tehai.tiles`)

There are 34 kinds of tile, numbered 0–33: `1m`–`9m` are 0–8, `1p`–`9p` are
9–17, `1s`–`9s` are 18–26 and the honours `1z`–`7z` are 27–33. A hand is
written in groups, as in `"123456789m 1134p"` (spaces are optional). A red
five is written `0`.

```python
from tehai.tiles import str_to_tile34, str_to_tiles34, tiles34_to_str

tiles34, red_fives = str_to_tiles34("123456789m 1134p")
print(tiles34_to_str(tiles34))       # 123456789m 1134p

tile, is_red = str_to_tile34("0p")   # (13, True)
```

Invalid notation, or more than four copies of one tile, raises
`TileParseError` (a `ValueError`). The module also has conversions between
count lists and tile lists (`tiles34_to_tiles`, `tiles_to_tiles34`,
`tiles_to_str`, `tile34_to_str` and the bracketed variants), tile
predicates (`is_man`, `is_pin`, `is_sou`, `is_yaochupai`,
`is_isolated_tile`), counts of remaining tiles (`init_left_tiles34`,
`init_left_tiles34_with_tiles34`), `outside_tiles`, `random_add_tile` and
`number_to_chinese_shanten`.

`Waits` is a `dict` from waiting tile to the number of copies still left,
with `all_count()`, `available_tiles()`, `indexes()`, `tiles_zh()` and
`equals()`.

## Shanten and waits (`tehai.shanten`, `tehai.search`)

```python
from tehai.shanten import calculate_shanten
from tehai.search import calculate_shanten_and_waits13
from tehai.tiles import number_to_chinese_shanten, str_to_tiles34

tiles34, _ = str_to_tiles34("123456789m 1134p")
print(calculate_shanten(tiles34))    # 0

shanten, waits = calculate_shanten_and_waits13(str_to_tiles34("123456789m 1134s")[0], None)
print(number_to_chinese_shanten(shanten), waits)   # 听牌 8 进张 [25s]
```

`calculate_shanten` accepts 3k+1 and 3k+2 tile counts, considers seven pairs
for hands of 13 or 14 tiles (thirteen orphans is not considered), and raises
`ValueError` for more than 14 tiles. `calculate_shanten_of_normal` and
`calculate_shanten_of_chiitoi` give the two forms separately.

`search13`, `search14` and `search_shanten14` build trees of draws that lower
the shanten (`SearchNode13`) and discards that keep a target shanten
(`SearchNode14`); `str()` of a node renders the tree. The input counts are
copied, never modified.

## Discard ordering (`tehai.results`, `tehai.discard_value`)

`Hand13AnalysisResult` holds the figures for a 3k+1 hand (waits, improvements,
agari rate, points, yaku kinds, furiten rate) with `speed_score()` and
`mixed_round_point()`. `Hand14AnalysisResult` pairs a discard with such a
result. `sort_results` orders a list of discards best first, in place;
`filter_out_discard` and `add_open_tiles` prepare results after a call.

`tehai.discard_value` scores discards and calls:

```python
from tehai.discard_value import calculate_isolated_tile_value
from tehai.tiles import init_left_tiles34_with_tiles34, str_to_tiles34

left = init_left_tiles34_with_tiles34(str_to_tiles34("2s")[0])
print(calculate_isolated_tile_value(27, 27, 27, left))   # 130.0
```

It also has `calculate_tile_value` (dora and dora neighbours),
`honor_tile_risk`, `stop_shanten` and `calculate_meld_shanten`, which lists
the possible pon and chi of a discarded tile as `Meld` objects together with
the lowest shanten after any of them (99 when no call is possible).

## Yaku tables (`tehai.yaku`)

```python
from tehai.yaku import Yaku, calc_yaku_han, yaku_types_to_str

print(calc_yaku_han([Yaku.RIICHI, Yaku.PINFU], is_naki=False))   # 2
print(yaku_types_to_str([Yaku.PINFU, Yaku.IIPEIKOU]))            # [平和 一杯口]
```

`calc_yakuman_times` and `yaku_types_with_dora_to_str` complete the set. Old
yaku are included only when `consider_old_yaku=True` is passed.

## Tenpai rate (`tehai.tenpai`)

```python
from tehai.tenpai import Meld, MeldType, calc_tenpai_rate

print(calc_tenpai_rate([Meld(MeldType.PON)], [1, 2, 3, 4, 5], [2]))   # 19.88
```

The rate is a percentage read from a table by number of calls, turn and hand
discards since the last call. A hand with only concealed quads gives 0; four
calls give 100.

## Colours (`tehai.colors`)

`waits_count_color`, `other_discard_alert_color` and `num_risk_color` return
a `Color` holding an ANSI foreground code, for use by a terminal front end.

## What the package does not do

There is no command-line program. Nothing in the package fills
`Hand13AnalysisResult` or `Hand14AnalysisResult` from a hand: agari rates,
hand points and furiten are not computed, and yaku are not detected in a
hand; the caller supplies these figures, and `tehai.yaku` provides only the
yaku kinds, names, han and yakuman tables.