"""
Error types raised by the atlas pipeline.

Every error is fatal to the run: the pipeline never retries and never
produces a partial atlas.
"""

from typing import Optional


class AtlasError(Exception):
    """Base class for all atlas build failures"""


class MissingGlyphError(AtlasError):
    """The font has no outline for a requested character"""

    def __init__(self, character: str, index: Optional[int] = None):
        self.character = character
        self.index = index
        message = f"glyph for '{character}' (U+{ord(character):04X}) is not found"
        if index is not None:
            message += f" (index: {index})"
        super().__init__(message)


class ConfigurationError(AtlasError):
    """A configuration value or size mode is outside what the pipeline supports"""

    def __init__(self, message: str, value=None):
        self.value = value
        super().__init__(message)


class EmptyCharacterSetError(AtlasError):
    """No characters were left to render"""

    def __init__(self):
        super().__init__("no Chinese characters found in the text")


class FontLoadError(AtlasError):
    """The font file could not be parsed"""

    def __init__(self, name: str, reason):
        self.name = name
        super().__init__(f"failed to load font {name}: {reason}")
