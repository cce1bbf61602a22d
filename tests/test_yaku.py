import pytest

from tehai.yaku import (
    NAKI_YAKU_HAN,
    NAKI_YAKUMAN_TIMES,
    OLD_YAKU_HAN,
    OLD_YAKUMAN_TIMES,
    YAKU_HAN,
    YAKUMAN_TIMES,
    Yaku,
    calc_yaku_han,
    calc_yakuman_times,
    yaku_types_to_str,
    yaku_types_with_dora_to_str,
)


def test_names_from_source_cases():
    assert yaku_types_to_str([Yaku.CHIITOI, Yaku.HONROUTOU, Yaku.HONITSU]) == "[七对 混老头 混一色]"
    assert yaku_types_to_str([Yaku.PINFU, Yaku.IIPEIKOU, Yaku.SANSHOKU_DOUJUN]) == "[平和 一杯口 三色]"
    assert yaku_types_to_str([Yaku.SUU_ANKOU_TANKI, Yaku.DAISUUSHII, Yaku.TSUUIISOU]) == "[四暗刻单骑 大四喜 字一色]"
    assert yaku_types_to_str([Yaku.SAN_ANKOU, Yaku.YAKUHAI, Yaku.YAKUHAI, Yaku.SHOUSANGEN]) == "[三暗刻 役牌 役牌 小三元]"


def test_no_yaku():
    assert yaku_types_to_str([]) == "[无役]"
    assert yaku_types_with_dora_to_str(set(), 3) == "[无役]"


def test_old_yaku_names_only_when_considered():
    types = [Yaku.SAN_ANKOU, Yaku.SANRENKOU]
    assert yaku_types_to_str(types, consider_old_yaku=True) == "[三暗刻 三连刻]"
    assert yaku_types_to_str(types) == "[三暗刻]"
    assert yaku_types_to_str([Yaku.TSUUIISOU, Yaku.DAICHISEI], True) == "[字一色 大七星]"


def test_with_dora_sorted_and_counted():
    assert yaku_types_with_dora_to_str({Yaku.HONITSU, Yaku.CHIITOI}, 0) == "[七对 混一色]"
    assert yaku_types_with_dora_to_str({Yaku.HONITSU, Yaku.CHIITOI}, 2) == "[七对 混一色 宝牌2]"


@pytest.mark.parametrize("yaku", list(YAKU_HAN))
def test_closed_han_matches_table(yaku):
    assert calc_yaku_han([yaku], False) == YAKU_HAN[yaku]


@pytest.mark.parametrize("yaku", list(Yaku))
def test_open_han_matches_table(yaku):
    assert calc_yaku_han([yaku], True) == NAKI_YAKU_HAN.get(yaku, 0)


def test_closed_only_yaku_give_nothing_open():
    for yaku in (Yaku.RIICHI, Yaku.PINFU, Yaku.TSUMO, Yaku.IIPEIKOU):
        assert calc_yaku_han([yaku], True) == 0


def test_han_is_additive():
    types = [Yaku.RIICHI, Yaku.PINFU, Yaku.TANYAO, Yaku.YAKUHAI, Yaku.YAKUHAI]
    assert calc_yaku_han(types, False) == sum(calc_yaku_han([t], False) for t in types)


def test_old_han_only_when_considered():
    types = [Yaku.TOITOI, Yaku.ISSHOKUSANJUN]
    assert calc_yaku_han(types, False) == YAKU_HAN[Yaku.TOITOI]
    assert calc_yaku_han(types, False, True) == YAKU_HAN[Yaku.TOITOI] + OLD_YAKU_HAN[Yaku.ISSHOKUSANJUN]


def test_yakuman_times():
    types = [Yaku.SUU_ANKOU_TANKI, Yaku.DAISUUSHII, Yaku.TSUUIISOU]
    expected = sum(YAKUMAN_TIMES[t] for t in types)
    assert calc_yakuman_times(types, False) == expected
    assert calc_yakuman_times([Yaku.SUU_ANKOU], True) == NAKI_YAKUMAN_TIMES.get(Yaku.SUU_ANKOU, 0) == 0


def test_old_yakuman_closed_only():
    types = [Yaku.TSUUIISOU, Yaku.DAICHISEI]
    assert calc_yakuman_times(types, False) == YAKUMAN_TIMES[Yaku.TSUUIISOU]
    assert calc_yakuman_times(types, False, True) == YAKUMAN_TIMES[Yaku.TSUUIISOU] + OLD_YAKUMAN_TIMES[Yaku.DAICHISEI]
    assert calc_yakuman_times(types, True, True) == NAKI_YAKUMAN_TIMES[Yaku.TSUUIISOU]


def test_non_yakuman_give_no_times():
    assert calc_yakuman_times([Yaku.RIICHI, Yaku.CHINITSU], False) == 0