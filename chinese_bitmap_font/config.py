"""
Atlas color and layout configuration.

The settings file is plain JSON:

    {
      "img_bg_color": [45, 45, 45],
      "char_color": [250, 250, 245],
      "char_shadow_color": [110, 110, 110],
      "chars_per_line": 32
    }

A missing file is created with these defaults on first run.
"""

import json
import os
from dataclasses import dataclass, asdict
from typing import Tuple

from .errors import ConfigurationError

CONFIG_FILE_NAME = "config.json"

RGB = Tuple[int, int, int]


def _validate_color(name: str, value) -> RGB:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ConfigurationError(f"{name} must be an [R, G, B] triple, got {value!r}", value)
    for component in value:
        if isinstance(component, bool) or not isinstance(component, int) or not 0 <= component <= 255:
            raise ConfigurationError(f"{name} components must be integers 0-255, got {value!r}", value)
    return tuple(value)


def validate_chars_per_line(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"chars_per_line must be an integer >= 1, got {value!r}", value)
    return value


@dataclass(frozen=True)
class ColorConfig:
    img_bg_color: RGB = (45, 45, 45)
    char_color: RGB = (250, 250, 245)
    char_shadow_color: RGB = (110, 110, 110)
    chars_per_line: int = 32

    def __post_init__(self):
        # JSON gives lists; colors are stored as tuples
        for name in ('img_bg_color', 'char_color', 'char_shadow_color'):
            object.__setattr__(self, name, _validate_color(name, getattr(self, name)))
        validate_chars_per_line(self.chars_per_line)

    @property
    def background(self) -> RGB:
        return self.img_bg_color

    @property
    def character(self) -> RGB:
        return self.char_color

    @property
    def shadow(self) -> RGB:
        return self.char_shadow_color

    @classmethod
    def from_dict(cls, data: dict) -> 'ColorConfig':
        """Build a config from parsed JSON; raises KeyError for missing keys"""
        return cls(
            img_bg_color=data['img_bg_color'],
            char_color=data['char_color'],
            char_shadow_color=data['char_shadow_color'],
            chars_per_line=data['chars_per_line'],
        )

    def to_dict(self) -> dict:
        return {key: list(value) if isinstance(value, tuple) else value
                for key, value in asdict(self).items()}


def save_config(path: str, config: ColorConfig):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)
        f.write("\n")


def load_config(path: str = CONFIG_FILE_NAME, verbose: bool = True) -> ColorConfig:
    """
    Load the settings file, creating it with defaults if it does not exist.

    Unreadable JSON or missing keys fall back to the defaults without touching
    the file. Values that parse but are out of range raise ConfigurationError.
    """
    if not os.path.exists(path):
        if verbose:
            print(f"⚠️ Config file not found, writing and using default config: {path}")
        config = ColorConfig()
        save_config(path, config)
        return config

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("config root must be an object")
        return ColorConfig.from_dict(data)
    except (ValueError, KeyError) as e:
        if verbose:
            print(f"⚠️ Invalid config file ({e}), using default config.")
        return ColorConfig()
