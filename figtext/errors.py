"""Exceptions raised while parsing FIGfonts and rendering text."""


class InvalidFontFormatError(ValueError):
    """Font description could not be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MissingGlyphError(LookupError):
    """Text contains a character the font does not define."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Font has no glyph for {char!r} (U+{ord(char):04X})")


class GlyphIndexError(IndexError):
    """Glyph queried outside its rows or columns."""

    def __init__(self, row: int, column: int | None, height: int, width: int):
        self.row = row
        self.column = column
        if column is None:
            message = f"Row {row}, Height {height}"
        else:
            message = f"Row {row}, Column {column}, Height {height}, Width {width}"
        super().__init__(message)
