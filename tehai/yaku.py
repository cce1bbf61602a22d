"""Yaku kinds, their names, han values and yakuman multiples."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Yaku(IntEnum):
    # Special criteria
    RIICHI = 0
    CHIITOI = 1
    # Luck
    TSUMO = 2
    DABURII = 3
    # Sequences
    PINFU = 4
    RYANPEIKOU = 5
    IIPEIKOU = 6
    SANSHOKU_DOUJUN = 7
    ITTSUU = 8
    # Triplets and quads
    TOITOI = 9
    SAN_ANKOU = 10
    SANSHOKU_DOUKOU = 11
    SAN_KANTSU = 12
    # Terminals and honors
    TANYAO = 13
    YAKUHAI = 14
    CHANTA = 15
    JUNCHAN = 16
    HONROUTOU = 17
    SHOUSANGEN = 18
    # Suits
    HONITSU = 19
    CHINITSU = 20
    # Yakuman
    SUU_ANKOU = 21
    SUU_ANKOU_TANKI = 22
    DAISANGEN = 23
    SHOUSUUSHII = 24
    DAISUUSHII = 25
    TSUUIISOU = 26
    CHINROUTOU = 27
    RYUUIISOU = 28
    CHUUREN = 29
    CHUUREN9 = 30
    SUU_KANTSU = 31
    # Old yaku
    SHIIARURAOTAI = 32
    UUMENSAI = 33
    SANRENKOU = 34
    ISSHOKUSANJUN = 35
    # Old yakuman
    DAISUURIN = 36
    DAISHARIN = 37
    DAICHIKURIN = 38
    DAICHISEI = 39


YAKU_NAMES: dict[Yaku, str] = {
    Yaku.RIICHI: "立直",
    Yaku.CHIITOI: "七对",
    Yaku.TSUMO: "自摸",
    Yaku.DABURII: "w立",
    Yaku.PINFU: "平和",
    Yaku.RYANPEIKOU: "两杯口",
    Yaku.IIPEIKOU: "一杯口",
    Yaku.SANSHOKU_DOUJUN: "三色",
    Yaku.ITTSUU: "一通",
    Yaku.TOITOI: "对对",
    Yaku.SAN_ANKOU: "三暗刻",
    Yaku.SANSHOKU_DOUKOU: "三色同刻",
    Yaku.SAN_KANTSU: "三杠子",
    Yaku.TANYAO: "断幺",
    Yaku.YAKUHAI: "役牌",
    Yaku.CHANTA: "混全",
    Yaku.JUNCHAN: "纯全",
    Yaku.HONROUTOU: "混老头",
    Yaku.SHOUSANGEN: "小三元",
    Yaku.HONITSU: "混一色",
    Yaku.CHINITSU: "清一色",
    Yaku.SUU_ANKOU: "四暗刻",
    Yaku.SUU_ANKOU_TANKI: "四暗刻单骑",
    Yaku.DAISANGEN: "大三元",
    Yaku.SHOUSUUSHII: "小四喜",
    Yaku.DAISUUSHII: "大四喜",
    Yaku.TSUUIISOU: "字一色",
    Yaku.CHINROUTOU: "清老头",
    Yaku.RYUUIISOU: "绿一色",
    Yaku.CHUUREN: "九莲",
    Yaku.CHUUREN9: "纯正九莲",
    Yaku.SUU_KANTSU: "四杠子",
}

OLD_YAKU_NAMES: dict[Yaku, str] = {
    Yaku.SHIIARURAOTAI: "十二落抬",
    Yaku.UUMENSAI: "五门齐",
    Yaku.SANRENKOU: "三连刻",
    Yaku.ISSHOKUSANJUN: "一色三顺",
    Yaku.DAISUURIN: "大数邻",
    Yaku.DAISHARIN: "大车轮",
    Yaku.DAICHIKURIN: "大竹林",
    Yaku.DAICHISEI: "大七星",
}

YAKU_HAN: dict[Yaku, int] = {
    Yaku.RIICHI: 1,
    Yaku.CHIITOI: 2,
    Yaku.TSUMO: 1,
    Yaku.DABURII: 2,
    Yaku.PINFU: 1,
    Yaku.RYANPEIKOU: 3,
    Yaku.IIPEIKOU: 1,
    Yaku.SANSHOKU_DOUJUN: 2,
    Yaku.ITTSUU: 2,
    Yaku.TOITOI: 2,
    Yaku.SAN_ANKOU: 2,
    Yaku.SANSHOKU_DOUKOU: 2,
    Yaku.SAN_KANTSU: 2,
    Yaku.TANYAO: 1,
    Yaku.YAKUHAI: 1,
    Yaku.CHANTA: 2,
    Yaku.JUNCHAN: 3,
    Yaku.HONROUTOU: 2,
    Yaku.SHOUSANGEN: 2,
    Yaku.HONITSU: 3,
    Yaku.CHINITSU: 6,
}

NAKI_YAKU_HAN: dict[Yaku, int] = {
    Yaku.SANSHOKU_DOUJUN: 1,
    Yaku.ITTSUU: 1,
    Yaku.TOITOI: 2,
    Yaku.SAN_ANKOU: 2,
    Yaku.SANSHOKU_DOUKOU: 2,
    Yaku.SAN_KANTSU: 2,
    Yaku.TANYAO: 1,
    Yaku.YAKUHAI: 1,
    Yaku.CHANTA: 1,
    Yaku.JUNCHAN: 2,
    Yaku.HONROUTOU: 2,
    Yaku.SHOUSANGEN: 2,
    Yaku.HONITSU: 2,
    Yaku.CHINITSU: 5,
}

OLD_YAKU_HAN: dict[Yaku, int] = {
    Yaku.UUMENSAI: 2,
    Yaku.SANRENKOU: 2,
    Yaku.ISSHOKUSANJUN: 3,
}

OLD_NAKI_YAKU_HAN: dict[Yaku, int] = {
    Yaku.SHIIARURAOTAI: 1,
    Yaku.UUMENSAI: 2,
    Yaku.SANRENKOU: 2,
    Yaku.ISSHOKUSANJUN: 2,
}

YAKUMAN_TIMES: dict[Yaku, int] = {
    Yaku.SUU_ANKOU: 1,
    Yaku.SUU_ANKOU_TANKI: 2,
    Yaku.DAISANGEN: 1,
    Yaku.SHOUSUUSHII: 1,
    Yaku.DAISUUSHII: 2,
    Yaku.TSUUIISOU: 1,
    Yaku.CHINROUTOU: 1,
    Yaku.RYUUIISOU: 1,
    Yaku.CHUUREN: 1,
    Yaku.CHUUREN9: 2,
    Yaku.SUU_KANTSU: 1,
}

NAKI_YAKUMAN_TIMES: dict[Yaku, int] = {
    Yaku.DAISANGEN: 1,
    Yaku.SHOUSUUSHII: 1,
    Yaku.DAISUUSHII: 2,
    Yaku.TSUUIISOU: 1,
    Yaku.CHINROUTOU: 1,
    Yaku.RYUUIISOU: 1,
    Yaku.SUU_KANTSU: 1,
}

OLD_YAKUMAN_TIMES: dict[Yaku, int] = {
    Yaku.DAISUURIN: 1,
    Yaku.DAISHARIN: 1,
    Yaku.DAICHIKURIN: 1,
    # Combined with tsuuiisou this is in effect a double yakuman.
    Yaku.DAICHISEI: 1,
}

_NO_YAKU = "[无役]"


def _bracket(names: Iterable[str]) -> str:
    return "[" + " ".join(names) + "]"


def yaku_types_to_str(yaku_types: Iterable[int], consider_old_yaku: bool = False) -> str:
    """Names of the given yaku in input order, old yaku appended when considered."""
    yaku_types = list(yaku_types)
    if not yaku_types:
        return _NO_YAKU
    names = [YAKU_NAMES[t] for t in yaku_types if t in YAKU_NAMES]
    if consider_old_yaku:
        names.extend(OLD_YAKU_NAMES[t] for t in yaku_types if t in OLD_YAKU_NAMES)
    return _bracket(names)


def yaku_types_with_dora_to_str(yaku_types: Iterable[int], num_dora: int) -> str:
    """Sorted yaku names followed by the dora count, if any."""
    kinds = sorted(set(yaku_types))
    if not kinds:
        return _NO_YAKU
    names = [YAKU_NAMES.get(t, "") for t in kinds]
    if num_dora > 0:
        names.append(f"宝牌{num_dora}")
    return _bracket(names)


def calc_yaku_han(
    yaku_types: Iterable[int], is_naki: bool, consider_old_yaku: bool = False
) -> int:
    """Total han of non-yakuman yaku, closed or open."""
    yaku_types = list(yaku_types)
    han_map = NAKI_YAKU_HAN if is_naki else YAKU_HAN
    han = sum(han_map.get(t, 0) for t in yaku_types)
    if consider_old_yaku:
        old_map = OLD_NAKI_YAKU_HAN if is_naki else OLD_YAKU_HAN
        han += sum(old_map.get(t, 0) for t in yaku_types)
    return han


def calc_yakuman_times(
    yaku_types: Iterable[int], is_naki: bool, consider_old_yaku: bool = False
) -> int:
    """Total yakuman multiple; old yakuman count only for closed hands."""
    yaku_types = list(yaku_types)
    times_map = NAKI_YAKUMAN_TIMES if is_naki else YAKUMAN_TIMES
    times = sum(times_map.get(t, 0) for t in yaku_types)
    if consider_old_yaku and not is_naki:
        times += sum(OLD_YAKUMAN_TIMES.get(t, 0) for t in yaku_types)
    return times