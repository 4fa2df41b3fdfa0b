#!/usr/bin/env python3
"""
Chinese Bitmap Font Generator
Bakes the Chinese characters used by a game script into a pixel font atlas.

Usage:
    chinese-bitmap-font --text script.txt --font fusion-pixel-10px.ttf --size 10 --output font.png
    chinese-bitmap-font -t script.txt -f fusion-pixel-10px.ttf -s 11 --zh-hant -o font.png --map font.json
"""

import argparse
import json
import os
import sys

from . import __version__
from .atlas import build_atlas
from .config import CONFIG_FILE_NAME, load_config
from .corpus import extract_characters
from .errors import AtlasError
from .modes import ScriptVariant, SizeMode
from .rasterizer import OutlineFont


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chinese-bitmap-font",
        description="Generate a 10px/11px Chinese bitmap font image from a game script",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--text", "-t", required=True, metavar="FILE",
                        help="Game script/text file to collect characters from")
    parser.add_argument("--font", "-f", required=True, metavar="FILE",
                        help="Font file used to draw the characters")
    parser.add_argument("--size", "-s", type=int, default=10,
                        help="Font size in px, only 10 (shadow) or 11 (outline) is supported")
    parser.add_argument("--zh-hant", "-z", action="store_true",
                        help="Place punctuation marks the traditional Chinese way")
    parser.add_argument("--output", "-o", required=True, metavar="FILE",
                        help="Output bitmap font image (PNG only)")
    parser.add_argument("--config", "-c", default=CONFIG_FILE_NAME, metavar="FILE",
                        help=f"Color/layout settings, created with defaults if missing (default: {CONFIG_FILE_NAME})")
    parser.add_argument("--map", "-m", metavar="FILE",
                        help="Also write a JSON map of character positions")
    parser.add_argument("--sort", action="store_true",
                        help="Order characters by code point instead of first appearance")
    parser.add_argument("--preview", type=int, default=0, metavar="N",
                        help="Print the first N glyph masks as ASCII art")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print every rendered character")
    return parser


def write_map(path: str, atlas):
    data = atlas.layout.to_dict()
    data['size'] = atlas.size_mode.cell_size
    data['effect'] = atlas.size_mode.effect
    data['variant'] = atlas.variant.value
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Check inputs before doing any work
    if not os.path.exists(args.text):
        print(f"❌ Game script file not found: {args.text}")
        return 1
    if not os.path.exists(args.font):
        print(f"❌ Font file not found: {args.font}")
        return 1
    if not args.output.lower().endswith(".png"):
        print(f"❌ Output must be a PNG file: {args.output}")
        return 1

    try:
        size_mode = SizeMode.from_pixels(args.size)
        variant = ScriptVariant.from_flag(args.zh_hant)
        config = load_config(args.config)

        with open(args.text, 'r', encoding='utf-8') as f:
            script = f.read()
        chars = extract_characters(script, sort=args.sort)
        print(f"📝 Found {len(chars)} unique characters in {args.text}")

        font = OutlineFont.from_file(args.font)
        print(f"🔤 Using font: {args.font} ({len(font)} mapped characters)")

        atlas = build_atlas(font, chars, size_mode, config, variant, verbose=args.verbose)
    except AtlasError as e:
        print(f"❌ {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Failed to read input: {e}")
        return 1

    for char, mask in list(zip(atlas.characters, atlas.masks))[:args.preview]:
        print(f"\n🎨 Character: '{char}' (U+{ord(char):04X})")
        print(mask.to_ascii())

    try:
        out_dir = os.path.dirname(args.output)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        atlas.save(args.output)
        if args.map:
            write_map(args.map, atlas)
    except OSError as e:
        print(f"❌ Failed to write output: {e}")
        return 1

    print(f"✅ Bitmap font saved: {args.output} ({atlas.image.width}×{atlas.image.height}, "
          f"{atlas.layout.count} characters)")
    if args.map:
        print(f"✅ Glyph map saved: {args.map}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
