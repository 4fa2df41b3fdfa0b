import json

import pytest

from chinese_bitmap_font import ColorConfig, ConfigurationError, load_config, save_config


def test_defaults():
    config = ColorConfig()
    assert config.background == (45, 45, 45)
    assert config.character == (250, 250, 245)
    assert config.shadow == (110, 110, 110)
    assert config.chars_per_line == 32


def test_lists_become_tuples():
    config = ColorConfig(img_bg_color=[1, 2, 3])
    assert config.img_bg_color == (1, 2, 3)


def test_config_is_immutable():
    config = ColorConfig()
    with pytest.raises(AttributeError):
        config.chars_per_line = 10


@pytest.mark.parametrize("chars_per_line", [0, -1, 2.5, True, "32"])
def test_rejects_bad_chars_per_line(chars_per_line):
    with pytest.raises(ConfigurationError) as excinfo:
        ColorConfig(chars_per_line=chars_per_line)
    assert excinfo.value.value == chars_per_line


@pytest.mark.parametrize("color", [[1, 2], [0, 0, 256], [-1, 0, 0], [1.0, 2, 3], "red"])
def test_rejects_bad_colors(color):
    with pytest.raises(ConfigurationError):
        ColorConfig(char_color=color)


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    config = load_config(str(path), verbose=False)
    assert config == ColorConfig()
    assert json.loads(path.read_text()) == {
        "img_bg_color": [45, 45, 45],
        "char_color": [250, 250, 245],
        "char_shadow_color": [110, 110, 110],
        "chars_per_line": 32,
    }


def test_round_trip_through_file(tmp_path):
    path = tmp_path / "config.json"
    config = ColorConfig(img_bg_color=(0, 0, 0), chars_per_line=8)
    save_config(str(path), config)
    assert load_config(str(path), verbose=False) == config


def test_invalid_json_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("img_bg_color = [1, 2, 3]")
    assert load_config(str(path)) == ColorConfig()
    assert "Invalid config file" in capsys.readouterr().out
    # the broken file is left alone
    assert path.read_text() == "img_bg_color = [1, 2, 3]"


def test_missing_key_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"chars_per_line": 8}))
    assert load_config(str(path), verbose=False) == ColorConfig()


def test_out_of_range_value_raises(tmp_path):
    path = tmp_path / "config.json"
    data = ColorConfig().to_dict()
    data["chars_per_line"] = 0
    path.write_text(json.dumps(data))
    with pytest.raises(ConfigurationError):
        load_config(str(path), verbose=False)
