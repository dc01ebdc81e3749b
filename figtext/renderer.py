"""Render text as FIGlet banners."""

import logging

from .errors import MissingGlyphError
from .font import NULL_CHAR, Font, PrintDirection

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


def normalize_char(char: str) -> str:
    """Map tabs and spaces to a space and any other whitespace to a newline."""
    if char.isspace():
        return " " if char in (" ", "\t") else "\n"
    return char


class FontRenderer:
    """
    Renders text with one Font.

    `layout` and `direction` default to the font's own full layout and print
    direction. Row buffers live only inside a single render() call, so one
    renderer may be used from several threads.
    """

    def __init__(
        self,
        font: Font,
        layout: int | None = None,
        direction: PrintDirection | None = None,
    ):
        self.font = font
        self.layout = font.full_layout if layout is None else layout
        self.direction = font.print_direction if direction is None else PrintDirection(direction)

    def render(self, text: str) -> str:
        font = self.font
        output = []
        rows: list[list[str]] = [[] for _ in range(font.height)]
        previous = NULL_CHAR

        for char in text:
            char = normalize_char(char)
            if char != "\n" and ord(char) < 32:
                logger.debug("Skipping unprintable character %r", char)
                continue

            if char == "\n":
                output.append(self._finish_line(rows) + LINE_SEPARATOR)
                rows = [[] for _ in range(font.height)]
                previous = NULL_CHAR
                continue

            overlap = font.compute_overlap_amount(previous, char, self.layout, self.direction)
            glyph = font.get_glyph(char)
            if glyph is None:
                raise MissingGlyphError(char)
            for row, buffer in enumerate(rows):
                self._add_glyph_row(buffer, glyph, row, overlap)
            previous = char

        if any(rows):
            output.append(self._finish_line(rows))
        return "".join(output)

    def _add_glyph_row(self, buffer: list[str], glyph, row: int, overlap: int):
        glyph_row = glyph.row(row)
        if not buffer:
            buffer.extend(glyph_row)
            return

        font = self.font
        # Blank rows can measure wider than the line built so far.
        overlap = min(overlap, len(buffer), glyph.width)
        if self.direction == PrintDirection.LEFT_TO_RIGHT:
            # The last `overlap` columns of the line meet the first columns of the glyph.
            for k in range(overlap):
                index = len(buffer) - k - 1
                buffer[index] = font.smush(
                    buffer[index],
                    glyph.char_at(overlap - k - 1, row),
                    self.layout,
                    self.direction,
                )
            buffer.extend(glyph_row[overlap:])
        else:
            # The first `overlap` columns of the line meet the last columns of the glyph.
            for k in range(overlap):
                buffer[k] = font.smush(
                    buffer[k],
                    glyph.char_at(glyph.width - overlap + k, row),
                    self.layout,
                    self.direction,
                )
            buffer[:0] = glyph_row[:glyph.width - overlap]

    def _finish_line(self, rows: list[list[str]]) -> str:
        hard_blank = self.font.hard_blank
        return LINE_SEPARATOR.join(
            "".join(buffer).replace(hard_blank, " ") for buffer in rows
        )


def render_text(
    font: Font,
    text: str,
    layout: int | None = None,
    direction: PrintDirection | None = None,
) -> str:
    """Render `text` with `font`, optionally overriding its layout and direction."""
    return FontRenderer(font, layout, direction).render(text)
