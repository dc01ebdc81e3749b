import pytest

from figtext import PrintDirection, layout, load_render_config
from figtext.config import RenderConfig, config_from_dict, parse_direction, parse_layout


def test_load_render_config(tmp_path):
    path = tmp_path / "banner.yaml"
    path.write_text(
        "font: fonts/blocks.flf\n"
        "layout:\n"
        "  - horizontal_smushing_by_default\n"
        "  - horizontal_equal_character_smushing\n"
        "direction: rtl\n"
    )
    config = load_render_config(path)
    assert config.font_path == tmp_path / "fonts" / "blocks.flf"
    assert config.layout == layout.HORIZONTAL_SMUSHING_BY_DEFAULT | layout.HORIZONTAL_EQUAL_CHARACTER_SMUSHING
    assert config.direction == PrintDirection.RIGHT_TO_LEFT


def test_empty_config_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_render_config(path) == RenderConfig()


def test_config_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- font.flf\n")
    with pytest.raises(ValueError):
        load_render_config(path)


def test_absolute_font_path_is_kept(tmp_path):
    font_path = tmp_path / "a.flf"
    config = config_from_dict({"font": str(font_path)}, base_dir=tmp_path / "elsewhere")
    assert config.font_path == font_path


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        (0, layout.NIL),
        (24463, 24463),
        ("horizontal_fitting_by_default", layout.HORIZONTAL_FITTING_BY_DEFAULT),
        ([], layout.NIL),
    ],
)
def test_parse_layout(value, expected):
    assert parse_layout(value) == expected


@pytest.mark.parametrize("value", [True, "squash", ["nil", "wobble"], {"a": 1}])
def test_parse_layout_rejects(value):
    with pytest.raises(ValueError):
        parse_layout(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("LTR", PrintDirection.LEFT_TO_RIGHT),
        ("right_to_left", PrintDirection.RIGHT_TO_LEFT),
        (1, PrintDirection.RIGHT_TO_LEFT),
    ],
)
def test_parse_direction(value, expected):
    assert parse_direction(value) == expected


@pytest.mark.parametrize("value", ["up", 2, False, 1.0])
def test_parse_direction_rejects(value):
    with pytest.raises(ValueError):
        parse_direction(value)


def test_bad_value_names_key():
    with pytest.raises(ValueError, match="direction"):
        config_from_dict({"direction": "sideways"})


def test_config_renderer(block_font):
    config = RenderConfig(layout=layout.HORIZONTAL_SMUSHING_BY_DEFAULT)
    assert config.renderer(block_font).render("AB") == "AB \nABB"


def test_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("font: [unclosed\n")
    with pytest.raises(ValueError, match="invalid YAML"):
        load_render_config(path)
