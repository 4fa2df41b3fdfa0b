"""
Extract the character set to bake from a game script.
"""

from typing import List

from .punctuation import is_punctuation

# Han ideograph blocks
HAN_RANGES = (
    (0x3400, 0x4DBF),    # CJK Extension A
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0xF900, 0xFAFF),    # CJK Compatibility Ideographs
    (0x20000, 0x2A6DF),  # CJK Extension B
    (0x2A700, 0x2B73F),  # CJK Extension C
    (0x2B740, 0x2B81F),  # CJK Extension D
    (0x2B820, 0x2CEAF),  # CJK Extension E
    (0x2CEB0, 0x2EBEF),  # CJK Extension F
    (0x2F800, 0x2FA1F),  # CJK Compatibility Ideographs Supplement
    (0x30000, 0x3134F),  # CJK Extension G
)


def is_han(char: str) -> bool:
    code = ord(char)
    return any(start <= code <= end for start, end in HAN_RANGES)


def extract_characters(text: str, sort: bool = False) -> List[str]:
    """
    Collect the unique Han characters and Chinese punctuation marks in text.

    Characters keep the order of their first appearance, so the same script
    always yields the same atlas. sort=True orders them by code point instead.
    """
    seen = set()
    chars = []
    for c in text:
        if c.isspace() or c in seen:
            continue
        if is_han(c) or is_punctuation(c):
            seen.add(c)
            chars.append(c)
    if sort:
        chars.sort()
    return chars


def unique_characters(chars) -> List[str]:
    """Drop repeated characters, keeping the first occurrence"""
    return list(dict.fromkeys(chars))
