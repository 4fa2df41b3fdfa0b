"""
Punctuation placement tables for Han typesetting.

Simplified text puts some marks (。，、) at the bottom-left of the em box,
traditional text centers them. The rasterizer anchors every mark in this
set at the top-left of the glyph body; the (indent, offset) pairs below
move it to its conventional position. Values are tuned for the Fusion
Pixel 9px body.
"""

from typing import Dict, Tuple

from .modes import ScriptVariant

# https://zh.wikipedia.org/wiki/%E6%A0%87%E7%82%B9%E7%AC%A6%E5%8F%B7
CHINESE_PUNCTUATION_MARKS = (
    '·', '—', '‘', '’', '“', '”', '…', '、', '。', '〈', '〉', '《', '》', '「', '」', '『', '』',
    '【', '】', '〔', '〕', '︰', '！', '（', '）', '，', '．', '：', '；', '？', '［', '］',
)

# char -> (horizontal indent, vertical offset)
SIMPLIFIED_PLACEMENT: Dict[str, Tuple[int, int]] = {
    '·': (3, 4),
    '—': (0, 4),
    '‘': (5, 0),
    '’': (0, 0),
    '“': (2, 0),
    '”': (0, 0),
    '…': (0, 4),
    '、': (0, 6),
    '。': (0, 5),
    '〈': (4, 0),
    '〉': (0, 0),
    '《': (1, 0),
    '》': (0, 0),
    '「': (4, 0),
    '」': (0, 2),
    '『': (2, 0),
    '』': (0, 2),
    '【': (3, 0),
    '】': (0, 0),
    '〔': (4, 0),
    '〕': (0, 0),
    '︰': (3, 1),
    '！': (1, 0),
    '（': (4, 0),
    '）': (0, 0),
    '，': (0, 5),
    '．': (0, 6),
    '：': (0, 1),
    '；': (0, 1),
    '？': (0, 0),
    '［': (4, 0),
    '］': (0, 0),
}

TRADITIONAL_PLACEMENT: Dict[str, Tuple[int, int]] = dict(
    SIMPLIFIED_PLACEMENT,
    **{
        '、': (3, 3),
        '。': (2, 3),
        '！': (3, 0),
        '，': (3, 3),
        '．': (3, 4),
        '：': (3, 1),
        '；': (3, 1),
        '？': (1, 0),
    }
)

_TABLES = {
    ScriptVariant.SIMPLIFIED: SIMPLIFIED_PLACEMENT,
    ScriptVariant.TRADITIONAL: TRADITIONAL_PLACEMENT,
}


def is_punctuation(char: str) -> bool:
    return char in SIMPLIFIED_PLACEMENT


def placement_for(char: str, variant: ScriptVariant) -> Tuple[int, int]:
    """Return (indent, offset) in pixels, (0, 0) for anything that is not a mark"""
    return _TABLES[variant].get(char, (0, 0))


def offset_for(char: str, variant: ScriptVariant) -> int:
    """Vertical pixel offset for a punctuation mark, 0 if char is not one"""
    return placement_for(char, variant)[1]


def indent_for(char: str, variant: ScriptVariant) -> int:
    """Horizontal pixel indent for a punctuation mark, 0 if char is not one"""
    return placement_for(char, variant)[0]
