"""
Parse FIGfont (.flf) font descriptions.

Layout of a font file:
    header line      flf2a$ 6 5 16 15 11 0 24463 229
    comment lines    count given by the header
    glyph blocks     one per required code point, `height` lines each
    code-tag blocks  "<code point> [description]" followed by a glyph block

Each glyph line ends with one or more end marks (usually "@"); the last line
of a glyph conventionally doubles them. End marks are stripped.
"""

import io
import logging
import re
from pathlib import Path
from types import MappingProxyType

from . import layout
from .errors import InvalidFontFormatError
from .font import Font, Glyph, PrintDirection

logger = logging.getLogger(__name__)

FIGFONT_MAGIC = "flf2"

# ASCII 32-126, then the Deutsch characters in file order:
# Ä Ö Ü ä ö ü ß
DEUTSCH_CODE_POINTS = (196, 214, 220, 228, 246, 252, 223)
REQUIRED_CODE_POINTS = tuple(range(32, 127)) + DEUTSCH_CODE_POINTS

MAX_CODE_POINT = 0x10FFFF

CODE_TAG_RE = re.compile(r"^(-?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)$")

# Header tokens after the magic/hard-blank token, in file order.
HEADER_FIELDS = (
    "height",
    "baseline",
    "max_length",
    "old_layout",
    "comment_lines",
    "print_direction",
    "full_layout",
    "code_tag_count",
)


class _LineReader:
    """Line-at-a-time reader that remembers the current line number."""

    def __init__(self, stream):
        self._stream = stream
        self.line_number = 0

    def read_line(self) -> str | None:
        """Return the next line without its terminator, or None at end of stream."""
        try:
            line = self._stream.readline()
        except UnicodeDecodeError as e:
            raise InvalidFontFormatError(
                f"Font data could not be decoded: {e}", self.line_number + 1
            ) from e
        if not line:
            return None
        self.line_number += 1
        return line.rstrip("\r\n")

    def require_line(self, what: str) -> str:
        line = self.read_line()
        if line is None:
            raise InvalidFontFormatError(
                f"Unexpected end of font data while reading {what}",
                self.line_number + 1,
            )
        return line


def _parse_int(token: str, field_name: str, line_number: int | None) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidFontFormatError(
            f"Header field {field_name} is not an integer: {token!r}", line_number
        ) from None


def parse_header(header: str, line_number: int | None = 1) -> dict:
    """
    Parse a FIGfont header line into a dict of Font keyword arguments (without glyphs).

    The first token must start with the magic string; its last character is
    the hard blank. Everything after height is optional.
    """
    args = header.split()
    if not args or not args[0].startswith(FIGFONT_MAGIC):
        raise InvalidFontFormatError(
            f"Header doesn't start with FIGfont magic string {FIGFONT_MAGIC}: {header!r}",
            line_number,
        )

    if len(args) < 2:
        raise InvalidFontFormatError(f"Header has no height: {header!r}", line_number)

    signature = args[0][len(FIGFONT_MAGIC):]
    values = {
        "hard_blank": signature[-1] if signature else " ",
        "height": 0,
        "baseline": 0,
        "max_length": 0,
        "old_layout": layout.HORIZONTAL_FITTING_BY_DEFAULT,
        "comment_lines": 0,
        "print_direction": PrintDirection.LEFT_TO_RIGHT,
        "full_layout": layout.HORIZONTAL_FITTING_BY_DEFAULT,
        "code_tag_count": 0,
    }

    for field_name, token in zip(HEADER_FIELDS, args[1:]):
        number = _parse_int(token, field_name, line_number)
        if field_name == "old_layout":
            values["old_layout"] = number
            values["full_layout"] = layout.full_layout_from_legacy(number)
        elif field_name == "full_layout":
            values["full_layout"] = layout.from_raw_value(number)
        elif field_name == "print_direction":
            try:
                values["print_direction"] = PrintDirection.from_header_value(number)
            except InvalidFontFormatError as e:
                raise InvalidFontFormatError(str(e), line_number) from None
        else:
            values[field_name] = number

    if values["height"] <= 0:
        raise InvalidFontFormatError(
            f"Header height must be positive, got {values['height']}", line_number
        )
    if values["comment_lines"] < 0:
        raise InvalidFontFormatError(
            f"Header comment line count must not be negative, got {values['comment_lines']}",
            line_number,
        )
    return values


def trim_glyph_row(line: str, line_number: int | None = None) -> str:
    """
    Strip trailing whitespace and the run of end marks from one glyph line.

    The last non-whitespace character is the end mark; every repetition of it
    at the end of the line is removed too.
    """
    content = line.rstrip()
    if not content:
        raise InvalidFontFormatError(f"Glyph line has no end mark: {line!r}", line_number)
    end_mark = content[-1]
    return content.rstrip(end_mark)


def read_glyph_data(reader: _LineReader, height: int) -> str:
    """Read `height` glyph lines and concatenate their trimmed rows."""
    rows = []
    for _ in range(height):
        line = reader.require_line("glyph data")
        rows.append(trim_glyph_row(line, reader.line_number))
    return "".join(rows)


def parse_code_tag(line: str, line_number: int | None = None) -> int:
    """
    Return the code point declared by a code-tag line.

    The first token may be decimal, hexadecimal (0x prefix) or octal
    (leading zero), optionally negative. Anything after it is a description.
    """
    tokens = line.split(maxsplit=1)
    m = CODE_TAG_RE.match(tokens[0]) if tokens else None
    if m is None:
        raise InvalidFontFormatError(f"Could not parse text as a code tag: {line!r}", line_number)

    sign, digits = m.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits.startswith("0"):
        value = int(digits[1:], 8)
    else:
        value = int(digits)
    if sign:
        value = -value
    if value > MAX_CODE_POINT:
        raise InvalidFontFormatError(f"Code tag out of Unicode range: {line!r}", line_number)
    return value


def _make_glyph(data: str, height: int, code_point: int, line_number: int) -> Glyph:
    try:
        return Glyph(data, height)
    except InvalidFontFormatError as e:
        raise InvalidFontFormatError(f"Glyph {code_point}: {e}", line_number) from None


def parse_font(stream) -> Font:
    """
    Parse a FIGfont from a text stream.

    Nothing is returned unless the whole stream parses; the first problem
    raises InvalidFontFormatError.
    """
    reader = _LineReader(stream)
    header_line = reader.read_line()
    if header_line is None:
        raise InvalidFontFormatError("Font data is empty", 1)
    header = parse_header(header_line, reader.line_number)
    height = header["height"]
    logger.debug(
        "FIGfont header: height=%d, hard blank=%r, full layout=%s, direction=%s",
        height,
        header["hard_blank"],
        layout.flag_names(header["full_layout"]) or "nil",
        header["print_direction"].name,
    )

    for _ in range(header["comment_lines"]):
        reader.require_line("comment lines")

    glyphs: dict[int, Glyph] = {}
    for code_point in REQUIRED_CODE_POINTS:
        data = read_glyph_data(reader, height)
        glyphs[code_point] = _make_glyph(data, height, code_point, reader.line_number)

    code_tags = 0
    while True:
        line = reader.read_line()
        if line is None:
            break
        if not line.strip():
            continue
        code_point = parse_code_tag(line, reader.line_number)
        data = read_glyph_data(reader, height)
        glyphs[code_point] = _make_glyph(data, height, code_point, reader.line_number)
        code_tags += 1

    if header["code_tag_count"] and header["code_tag_count"] != code_tags:
        logger.debug(
            "Header declares %d code-tagged glyphs, found %d",
            header["code_tag_count"],
            code_tags,
        )
    logger.debug("Parsed FIGfont with %d glyphs (%d code-tagged)", len(glyphs), code_tags)
    return Font(glyphs=MappingProxyType(glyphs), **header)


def load_font(source, encoding: str = "utf-8") -> Font:
    """
    Load a Font from font content or a readable stream.

    `source` may be the font text itself (str), its raw bytes, a binary
    stream, or a text stream. Binary input is decoded with `encoding`.
    """
    if isinstance(source, str):
        return parse_font(io.StringIO(source))
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    if not isinstance(source, (io.RawIOBase, io.BufferedIOBase)):
        return parse_font(source)

    text_stream = io.TextIOWrapper(source, encoding=encoding, newline="")
    try:
        return parse_font(text_stream)
    finally:
        # Hand the underlying stream back to the caller open.
        text_stream.detach()


def load_font_file(path, encoding: str = "utf-8") -> Font:
    """Load a Font from a .flf file."""
    with open(Path(path), encoding=encoding, newline="") as f:
        return parse_font(f)
