"""
figtext: render text as FIGlet banners from FIGfont (.flf) descriptions.

    from figtext import load_font_file, render_text

    font = load_font_file("standard.flf")
    print(render_text(font, "Hello"))
"""

from . import layout
from .config import RenderConfig, load_render_config
from .errors import GlyphIndexError, InvalidFontFormatError, MissingGlyphError
from .font import NULL_CHAR, Font, Glyph, PrintDirection
from .parser import load_font, load_font_file, parse_font
from .renderer import FontRenderer, render_text

__all__ = [
    "layout",
    "Font",
    "Glyph",
    "PrintDirection",
    "NULL_CHAR",
    "FontRenderer",
    "render_text",
    "parse_font",
    "load_font",
    "load_font_file",
    "RenderConfig",
    "load_render_config",
    "InvalidFontFormatError",
    "MissingGlyphError",
    "GlyphIndexError",
]
