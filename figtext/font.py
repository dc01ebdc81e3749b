"""
In-memory FIGfont model.

A Font owns one Glyph per code point. Both are immutable once the parser
builds them, so a single Font can be shared between renderers.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum

from . import layout
from .errors import GlyphIndexError, InvalidFontFormatError

# "No previous character" for overlap, "cannot merge" for smush.
NULL_CHAR = "\0"

UNDERSCORE_REPLACEMENTS = "|/\\[]{}()<>"

# Weakest to strongest
HIERARCHY_CLASSES = ("|", "/\\", "[]", "{}", "()", "<>")

OPPOSITE_PAIRS = {"[]", "][", "{}", "}{", "()", ")("}


class PrintDirection(IntEnum):
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1

    @classmethod
    def from_header_value(cls, value: int) -> "PrintDirection":
        """Map the FIGfont header value (0 or 1) to a direction."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidFontFormatError(
                f"Unrecognised print direction header value: {value}"
            ) from None


@dataclass(frozen=True)
class Glyph:
    """
    One FIGcharacter: `height` rows of equal width, stored row-major in `data`.

    The height is copied from the owning font so a glyph never needs a
    reference back to it.
    """

    data: str
    height: int

    def __post_init__(self):
        if self.height <= 0:
            raise InvalidFontFormatError(f"Glyph height must be positive, got {self.height}")
        if len(self.data) % self.height != 0:
            raise InvalidFontFormatError(
                f"Glyph data length {len(self.data)} is not a multiple of height {self.height}"
            )

    @property
    def width(self) -> int:
        return len(self.data) // self.height

    def char_at(self, column: int, row: int) -> str:
        """Return the sub-character at `column`, `row`."""
        width = self.width
        if 0 <= row < self.height and 0 <= column < width:
            return self.data[row * width + column]
        raise GlyphIndexError(row, column, self.height, width)

    def row(self, row: int) -> str:
        """Return the sub-characters of one row."""
        width = self.width
        if 0 <= row < self.height:
            start = row * width
            return self.data[start:start + width]
        raise GlyphIndexError(row, None, self.height, width)

    def rows(self) -> list[str]:
        return [self.row(r) for r in range(self.height)]

    def __str__(self) -> str:
        return "".join(f"{r}\n" for r in self.rows())


def _hierarchy_rank(char: str) -> int | None:
    for rank, members in enumerate(HIERARCHY_CLASSES):
        if char in members:
            return rank
    return None


@dataclass(frozen=True)
class Font:
    """A parsed FIGfont: header values plus a read-only code point -> Glyph map."""

    hard_blank: str
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int
    print_direction: PrintDirection
    full_layout: int
    code_tag_count: int
    glyphs: Mapping[int, Glyph] = field(repr=False, hash=False)

    def get_glyph(self, char: str) -> Glyph | None:
        """Return the glyph for `char`, or None if the font lacks it."""
        return self.glyphs.get(ord(char))

    def __contains__(self, char: str) -> bool:
        return ord(char) in self.glyphs

    def compute_overlap_amount(
        self,
        char1: str,
        char2: str,
        mode: int,
        direction: PrintDirection,
    ) -> int:
        """
        Number of columns the glyph of `char2` may slide into the glyph of `char1`.

        Every row is measured on its own: the gap between the left glyph's last
        visible column and the right glyph's first visible column, plus one
        when the two boundary cells can be smushed. The tightest row wins.
        For right-to-left text `char2` is placed on the left.
        """
        if not layout.is_selected(
            mode,
            layout.HORIZONTAL_SMUSHING_BY_DEFAULT | layout.HORIZONTAL_FITTING_BY_DEFAULT,
        ):
            return 0
        if char1 == NULL_CHAR or char2 == NULL_CHAR:
            return 0

        if direction == PrintDirection.LEFT_TO_RIGHT:
            left, right = self.get_glyph(char1), self.get_glyph(char2)
        else:
            left, right = self.get_glyph(char2), self.get_glyph(char1)
        if left is None or right is None or left.width < 2 or right.width < 2:
            return 0

        smush_amount = right.width
        for row in range(self.height):
            left_boundary = left.width - 1
            while left_boundary > 0 and left.char_at(left_boundary, row) == " ":
                left_boundary -= 1
            right_boundary = 0
            while right_boundary < right.width - 1 and right.char_at(right_boundary, row) == " ":
                right_boundary += 1

            row_amount = min(right.width, left.width - left_boundary - 1 + right_boundary)
            left_char = left.char_at(left_boundary, row)
            if left_char == " ":
                row_amount += 1
            elif self.smush(left_char, right.char_at(right_boundary, row), mode, direction) != NULL_CHAR:
                row_amount += 1
            smush_amount = min(smush_amount, row_amount)
        return smush_amount

    def smush(self, char1: str, char2: str, mode: int, direction: PrintDirection) -> str:
        """
        Merge two overlapping sub-characters.

        Returns the replacement sub-character, or NULL_CHAR when the pair
        cannot be smushed under `mode`.
        """
        if char1 == " ":
            return char2
        if char2 == " ":
            return char1
        if not layout.is_selected(mode, layout.HORIZONTAL_SMUSHING_BY_DEFAULT):
            # kerning only
            return NULL_CHAR

        hard_blank = self.hard_blank
        if mode & layout.HORIZONTAL_RULES_MASK == 0:
            # Universal overlap: visible characters win over hard blanks,
            # otherwise the later character in the text does.
            if char1 == hard_blank:
                return char2
            if char2 == hard_blank:
                return char1
            if direction == PrintDirection.LEFT_TO_RIGHT:
                return char2
            return char1

        if layout.is_selected(mode, layout.HORIZONTAL_HARDBLANK_SMUSHING):
            if char1 == hard_blank and char2 == hard_blank:
                return char1
        if char1 == hard_blank or char2 == hard_blank:
            return NULL_CHAR

        if layout.is_selected(mode, layout.HORIZONTAL_EQUAL_CHARACTER_SMUSHING):
            if char1 == char2:
                return char1

        if layout.is_selected(mode, layout.HORIZONTAL_UNDERSCORE_SMUSHING):
            if char1 == "_" and char2 in UNDERSCORE_REPLACEMENTS:
                return char2
            if char2 == "_" and char1 in UNDERSCORE_REPLACEMENTS:
                return char1

        if layout.is_selected(mode, layout.HORIZONTAL_HIERARCHY_SMUSHING):
            rank1 = _hierarchy_rank(char1)
            rank2 = _hierarchy_rank(char2)
            if rank1 is not None and rank2 is not None and rank1 != rank2:
                return char2 if rank2 > rank1 else char1

        if layout.is_selected(mode, layout.HORIZONTAL_OPPOSITE_PAIR_SMUSHING):
            if char1 + char2 in OPPOSITE_PAIRS:
                return "|"

        if layout.is_selected(mode, layout.HORIZONTAL_BIG_X_SMUSHING):
            if char1 + char2 in ("/\\", "\\/"):
                return "|"
            # "<>" is not smushed by this rule
            if char1 == ">" and char2 == "<":
                return "X"

        return NULL_CHAR

    def __str__(self) -> str:
        return "".join(f"{chr(cp) if cp >= 0 else cp}:\n{glyph}\n" for cp, glyph in self.glyphs.items())
