from pathlib import Path

import pytest
import yaml

ROOT = Path(__file__).resolve().parent.parent


def pytest_collect_file(parent, file_path):
    if file_path.name == "golden_renders.yaml":
        return GoldenFile.from_parent(parent, path=file_path)


class GoldenFile(pytest.File):
    def collect(self):
        data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        fonts = data["fonts"]
        for case in data["cases"]:
            yield GoldenItem.from_parent(
                self, name=case["name"], case=case, font_spec=fonts[case["font"]]
            )


class GoldenItem(pytest.Item):
    def __init__(self, name, parent, case, font_spec):
        super().__init__(name, parent)
        self.case = case
        self.font_spec = font_spec

    def runtest(self):
        from figtext import layout, load_font, render_text
        from figtext.config import parse_direction
        from fontdata import build_flf

        font = load_font(build_flf(
            self.font_spec["glyphs"],
            height=self.font_spec["height"],
            hard_blank=self.font_spec["hard_blank"],
        ))
        mode = layout.layout_from_names(self.case.get("layout", []))
        direction = parse_direction(self.case.get("direction", "ltr"))
        rendered = render_text(font, self.case["text"], mode, direction)
        expected = "\n".join(self.case["expect"])
        if rendered != expected:
            raise GoldenMismatch(self.case["text"], expected, rendered)

    def reportinfo(self):
        return self.path, None, self.name

    def repr_failure(self, excinfo):
        if isinstance(excinfo.value, GoldenMismatch):
            return str(excinfo.value)
        return super().repr_failure(excinfo)


class GoldenMismatch(Exception):
    def __init__(self, text, expected, rendered):
        super().__init__(
            f"Rendering {text!r}:\nexpected:\n{expected}\ngot:\n{rendered}"
        )


@pytest.fixture
def block_font():
    from figtext import load_font
    from fontdata import BLOCK_GLYPHS, build_flf

    return load_font(build_flf(BLOCK_GLYPHS))
