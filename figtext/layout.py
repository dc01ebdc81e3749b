"""
FIGfont layout options.

Each option is a single bit of a layout mode. Bits 0-7 control horizontal
fitting and smushing, bits 8-14 mirror them vertically. Vertical rules are
part of the vocabulary only; the renderer applies horizontal rules.
"""

INVALID = -1
NIL = 0

# Horizontal smushing rules 1-6
HORIZONTAL_EQUAL_CHARACTER_SMUSHING = 1 << 0
HORIZONTAL_UNDERSCORE_SMUSHING = 1 << 1
HORIZONTAL_HIERARCHY_SMUSHING = 1 << 2
HORIZONTAL_OPPOSITE_PAIR_SMUSHING = 1 << 3
HORIZONTAL_BIG_X_SMUSHING = 1 << 4
HORIZONTAL_HARDBLANK_SMUSHING = 1 << 5
HORIZONTAL_FITTING_BY_DEFAULT = 1 << 6
HORIZONTAL_SMUSHING_BY_DEFAULT = 1 << 7

# Vertical smushing rules 1-5
VERTICAL_EQUAL_CHARACTER_SMUSHING = 1 << 8
VERTICAL_UNDERSCORE_SMUSHING = 1 << 9
VERTICAL_HIERARCHY_SMUSHING = 1 << 10
VERTICAL_HORIZONTAL_LINE_SMUSHING = 1 << 11
VERTICAL_VERTICAL_LINE_SMUSHING = 1 << 12
VERTICAL_FITTING_BY_DEFAULT = 1 << 13
VERTICAL_SMUSHING_BY_DEFAULT = 1 << 14

# Any of these set means controlled smushing, none means universal overlap.
HORIZONTAL_RULES_MASK = 63

LAYOUT_OPTIONS: dict[str, int] = {
    "invalid": INVALID,
    "nil": NIL,
    "horizontal_equal_character_smushing": HORIZONTAL_EQUAL_CHARACTER_SMUSHING,
    "horizontal_underscore_smushing": HORIZONTAL_UNDERSCORE_SMUSHING,
    "horizontal_hierarchy_smushing": HORIZONTAL_HIERARCHY_SMUSHING,
    "horizontal_opposite_pair_smushing": HORIZONTAL_OPPOSITE_PAIR_SMUSHING,
    "horizontal_big_x_smushing": HORIZONTAL_BIG_X_SMUSHING,
    "horizontal_hardblank_smushing": HORIZONTAL_HARDBLANK_SMUSHING,
    "horizontal_fitting_by_default": HORIZONTAL_FITTING_BY_DEFAULT,
    "horizontal_smushing_by_default": HORIZONTAL_SMUSHING_BY_DEFAULT,
    "vertical_equal_character_smushing": VERTICAL_EQUAL_CHARACTER_SMUSHING,
    "vertical_underscore_smushing": VERTICAL_UNDERSCORE_SMUSHING,
    "vertical_hierarchy_smushing": VERTICAL_HIERARCHY_SMUSHING,
    "vertical_horizontal_line_smushing": VERTICAL_HORIZONTAL_LINE_SMUSHING,
    "vertical_vertical_line_smushing": VERTICAL_VERTICAL_LINE_SMUSHING,
    "vertical_fitting_by_default": VERTICAL_FITTING_BY_DEFAULT,
    "vertical_smushing_by_default": VERTICAL_SMUSHING_BY_DEFAULT,
}


def is_selected(mode: int, flag: int) -> bool:
    """Check whether any bit of `flag` is set in `mode`."""
    return mode & flag != 0


def full_layout_from_legacy(legacy: int) -> int:
    """
    Convert an old layout value (-1 to 63) into the equivalent full layout.

    -1 means full width, 0 means horizontal fitting, and 1-63 are horizontal
    smushing rules whose bits already match the full layout rule bits.
    """
    if legacy == INVALID:
        return NIL
    if legacy == NIL:
        return HORIZONTAL_FITTING_BY_DEFAULT
    return legacy


def from_raw_value(value: int) -> int:
    """
    Look up a raw header value in the option catalog.

    Values that are not a catalog entry degrade to NIL instead of raising,
    since older fonts may carry bits this driver does not know about.
    """
    if value in LAYOUT_OPTIONS.values():
        return value
    return NIL


def flag_names(mode: int) -> list[str]:
    """Return catalog names of the single-bit options set in `mode`, low bit first."""
    if mode <= 0:
        return []
    return [
        name for name, flag in LAYOUT_OPTIONS.items()
        if flag > 0 and is_selected(mode, flag)
    ]


def layout_from_names(names) -> int:
    """Combine options named in `names` (case-insensitive) into one layout mode."""
    mode = NIL
    for name in names:
        key = str(name).strip().lower()
        if key not in LAYOUT_OPTIONS:
            raise ValueError(f"Unknown layout option: {name!r}")
        flag = LAYOUT_OPTIONS[key]
        if flag == INVALID:
            raise ValueError(f"Layout option {name!r} cannot be combined")
        mode |= flag
    return mode
