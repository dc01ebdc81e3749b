"""
Print text as a FIGlet banner.

Usage:
    python -m figtext <font.flf|settings.yaml> [text ...]

    The first argument is either a FIGfont file or a YAML settings file
    naming the font plus optional layout and direction overrides. Without
    text arguments the text is read from standard input.
"""

import sys
from pathlib import Path

from .config import RenderConfig, load_render_config
from .errors import MissingGlyphError
from .parser import load_font_file


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: python -m figtext <font.flf|settings.yaml> [text ...]")
        print("\nExample:")
        print("  python -m figtext standard.flf Hello")
        return 1

    input_path = Path(args[0])
    if not input_path.exists():
        print(f"Error: Input path not found: {input_path}")
        return 1

    try:
        if input_path.suffix.lower() in (".yaml", ".yml"):
            config = load_render_config(input_path)
            if config.font_path is None:
                print(f"Error: {input_path} does not name a font")
                return 1
        else:
            config = RenderConfig(font_path=input_path)
        font = load_font_file(config.font_path)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    text = " ".join(args[1:]) if len(args) > 1 else sys.stdin.read().rstrip("\n")
    renderer = config.renderer(font)
    try:
        print(renderer.render(text))
    except MissingGlyphError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
