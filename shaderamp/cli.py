"""Command line front end: print the shade ramp for one color."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from shaderamp.palette import Palette, parse_color_to_palette
from shaderamp.parse import ParseError
from shaderamp.types import PaletteStep, Shade


def _step_to_dict(step: PaletteStep) -> dict:
    return {
        "shade": int(step.shade),
        "hex": step.hex,
        "oklch": step.oklch.to_css(),
        "is_closest": step.is_closest,
        "needs_strong_correction": step.needs_strong_correction,
    }


def _format_table(palette: Palette) -> str:
    lines = []
    for step in palette:
        marker = ("*" if step.is_closest else " ") + ("!" if step.needs_strong_correction else " ")
        lines.append(f"{int(step.shade):>5}  {step.hex}  {marker}  {step.oklch.to_css()}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shaderamp",
        description="Generate a 0-1000 shade ramp from a hex or oklch() color.",
    )
    parser.add_argument(
        "color",
        help='Input color, e.g. "#3b82f6" or "oklch(68.1%% 0.162 75.834)"',
    )
    parser.add_argument(
        "--gamut",
        choices=("compress", "clip"),
        default="compress",
        help="How out-of-sRGB shades are mapped for hex output (default: compress)",
    )
    parser.add_argument(
        "--no-edges",
        action="store_true",
        help="Omit shades 0 and 1000",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of a table",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        palette = parse_color_to_palette(args.color, gamut=args.gamut)
    except ParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.no_edges:
        palette = tuple(step for step in palette if step.shade not in Shade.edges())

    if args.json:
        print(json.dumps([_step_to_dict(step) for step in palette], indent=2))
    else:
        print(_format_table(palette))
    return 0
