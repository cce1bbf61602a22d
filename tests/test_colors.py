import pytest

from tehai.colors import (
    Color,
    num_risk_color,
    other_discard_alert_color,
    waits_count_color,
)


@pytest.mark.parametrize(
    "risk, expected",
    [
        (0, Color.FG_HI_CYAN),
        (5, Color.FG_HI_YELLOW),
        (10, Color.FG_HI_RED),
        (15, Color.FG_RED),
    ],
)
def test_num_risk_color_thresholds(risk, expected):
    assert num_risk_color(risk) == expected


def test_num_risk_color_is_monotonic():
    order = [Color.FG_HI_CYAN, Color.FG_HI_YELLOW, Color.FG_HI_RED, Color.FG_RED]
    grades = [order.index(num_risk_color(r / 2)) for r in range(0, 60)]
    assert grades == sorted(grades)


def test_waits_count_color_tenpai_triples():
    assert waits_count_color(0, 13 / 3) == waits_count_color(1, 13)
    assert waits_count_color(0, 18 / 3) == waits_count_color(1, 18)


def test_waits_count_color_thresholds():
    assert waits_count_color(1, 13) == Color.FG_HI_YELLOW
    assert waits_count_color(1, 18) == Color.FG_HI_YELLOW
    assert waits_count_color(1, 12) == Color.FG_HI_CYAN


def test_waits_count_color_weight_doubles():
    for shanten in range(1, 6):
        for count in range(0, 40):
            assert waits_count_color(shanten + 1, count * 2) == waits_count_color(
                shanten, count
            )


def test_waits_count_color_increasing():
    order = [Color.FG_HI_CYAN, Color.FG_HI_YELLOW, Color.FG_HI_RED]
    grades = [order.index(waits_count_color(2, c)) for c in range(80)]
    assert grades == sorted(grades)


def test_other_discard_honors_white():
    assert {other_discard_alert_color(t) for t in range(27, 34)} == {Color.FG_WHITE}


def test_other_discard_by_rank():
    assert [other_discard_alert_color(t) for t in range(9)] == [
        Color.FG_WHITE,
        Color.FG_WHITE,
        Color.FG_HI_YELLOW,
        Color.FG_HI_RED,
        Color.FG_HI_RED,
        Color.FG_HI_RED,
        Color.FG_HI_YELLOW,
        Color.FG_WHITE,
        Color.FG_WHITE,
    ]


def test_other_discard_same_across_suits():
    for t in range(9):
        assert other_discard_alert_color(t) == other_discard_alert_color(t + 9)
        assert other_discard_alert_color(t) == other_discard_alert_color(t + 18)


def test_other_discard_negative_raises():
    with pytest.raises(ValueError):
        other_discard_alert_color(-1)