import pytest

from figtext import layout


def test_horizontal_and_vertical_bit_positions():
    horizontal = [
        layout.HORIZONTAL_EQUAL_CHARACTER_SMUSHING,
        layout.HORIZONTAL_UNDERSCORE_SMUSHING,
        layout.HORIZONTAL_HIERARCHY_SMUSHING,
        layout.HORIZONTAL_OPPOSITE_PAIR_SMUSHING,
        layout.HORIZONTAL_BIG_X_SMUSHING,
        layout.HORIZONTAL_HARDBLANK_SMUSHING,
        layout.HORIZONTAL_FITTING_BY_DEFAULT,
        layout.HORIZONTAL_SMUSHING_BY_DEFAULT,
    ]
    vertical = [
        layout.VERTICAL_EQUAL_CHARACTER_SMUSHING,
        layout.VERTICAL_UNDERSCORE_SMUSHING,
        layout.VERTICAL_HIERARCHY_SMUSHING,
        layout.VERTICAL_HORIZONTAL_LINE_SMUSHING,
        layout.VERTICAL_VERTICAL_LINE_SMUSHING,
        layout.VERTICAL_FITTING_BY_DEFAULT,
        layout.VERTICAL_SMUSHING_BY_DEFAULT,
    ]
    assert horizontal == [1 << bit for bit in range(8)]
    assert vertical == [1 << bit for bit in range(8, 15)]
    assert layout.HORIZONTAL_RULES_MASK == sum(horizontal[:6])


def test_is_selected():
    mode = layout.HORIZONTAL_EQUAL_CHARACTER_SMUSHING | layout.HORIZONTAL_SMUSHING_BY_DEFAULT
    assert layout.is_selected(mode, layout.HORIZONTAL_SMUSHING_BY_DEFAULT)
    assert layout.is_selected(mode, layout.HORIZONTAL_EQUAL_CHARACTER_SMUSHING)
    assert not layout.is_selected(mode, layout.HORIZONTAL_FITTING_BY_DEFAULT)
    assert not layout.is_selected(layout.NIL, layout.HORIZONTAL_FITTING_BY_DEFAULT)


@pytest.mark.parametrize(
    "legacy, expected",
    [
        (-1, layout.NIL),
        (0, layout.HORIZONTAL_FITTING_BY_DEFAULT),
        (1, layout.HORIZONTAL_EQUAL_CHARACTER_SMUSHING),
        (32, layout.HORIZONTAL_HARDBLANK_SMUSHING),
        (15, 15),
    ],
)
def test_full_layout_from_legacy(legacy, expected):
    assert layout.full_layout_from_legacy(legacy) == expected


def test_from_raw_value_matches_catalog_exactly():
    assert layout.from_raw_value(128) == layout.HORIZONTAL_SMUSHING_BY_DEFAULT
    assert layout.from_raw_value(-1) == layout.INVALID
    assert layout.from_raw_value(1 << 14) == layout.VERTICAL_SMUSHING_BY_DEFAULT


@pytest.mark.parametrize("value", [3, 24463, 1 << 15, -7])
def test_from_raw_value_degrades_unknown_values_to_nil(value):
    assert layout.from_raw_value(value) == layout.NIL


def test_flag_names():
    mode = layout.HORIZONTAL_SMUSHING_BY_DEFAULT | layout.HORIZONTAL_UNDERSCORE_SMUSHING
    assert layout.flag_names(mode) == [
        "horizontal_underscore_smushing",
        "horizontal_smushing_by_default",
    ]
    assert layout.flag_names(layout.NIL) == []
    assert layout.flag_names(layout.INVALID) == []


def test_layout_from_names():
    mode = layout.layout_from_names(["Horizontal_Fitting_By_Default", " horizontal_big_x_smushing "])
    assert mode == layout.HORIZONTAL_FITTING_BY_DEFAULT | layout.HORIZONTAL_BIG_X_SMUSHING
    assert layout.layout_from_names([]) == layout.NIL


@pytest.mark.parametrize("names", [["kerning"], ["invalid"]])
def test_layout_from_names_rejects_bad_names(names):
    with pytest.raises(ValueError):
        layout.layout_from_names(names)
