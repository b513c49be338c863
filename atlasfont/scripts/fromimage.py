#!/usr/bin/env python3
"""
Measure letter widths from a font atlas image and write a font definition
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse

import atlasfont
from atlasfont.basetypes import Coord
from atlasfont.constants import (
    DEFAULT_UV_SYMBOL_OFFSET, DEFAULT_UV_SYMBOL_SIZE, DEFAULT_SYMBOL_SIZE,
)
from atlasfont.image import BACKGROUNDS
from atlasfont.scripting import wrap_main


def _get_parser():
    parser = argparse.ArgumentParser(
        prog='atlasfont-fromimage',
        description='Measure letter widths from a font atlas image and write a font definition.'
    )
    parser.add_argument('infile')
    parser.add_argument('outfile', nargs='?', type=str, default='')
    parser.add_argument(
        '--uv-offset', default=DEFAULT_UV_SYMBOL_OFFSET, type=Coord.create,
        help='offset of the cell for code 0, in uv coordinates (default: 0,0)'
    )
    parser.add_argument(
        '--uv-size', default=DEFAULT_UV_SYMBOL_SIZE, type=Coord.create,
        help='size of a symbol cell, in uv coordinates (default: 0.0625,0.0625)'
    )
    parser.add_argument(
        '--symbol-size', default=DEFAULT_SYMBOL_SIZE, type=Coord.create,
        help='default size of a symbol when drawing text (default: 1,1)'
    )
    parser.add_argument(
        '--background', default='most-common', choices=BACKGROUNDS,
        help='how to determine the background colour (default: most-common)'
    )
    parser.add_argument(
        '--empty-width', default=0., type=float,
        help='relative width of symbols without ink (default: 0)'
    )
    parser.add_argument(
        '--monospace', action='store_true', default=False,
        help='do not measure letter widths'
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='show debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'atlasfont v{atlasfont.__version__}'
    )
    return parser


def main(argv=None):
    args = _get_parser().parse_args(argv)
    with wrap_main(args.debug):
        if args.monospace:
            builder = atlasfont.FontBuilder(
                uv_symbol_offset=args.uv_offset,
                uv_symbol_size=args.uv_size,
                symbol_size=args.symbol_size,
            )
        else:
            builder = atlasfont.builder_from_image(
                args.infile,
                uv_symbol_offset=args.uv_offset,
                uv_symbol_size=args.uv_size,
                symbol_size=args.symbol_size,
                background=args.background,
                empty_width=args.empty_width,
            )
        atlasfont.save(builder, args.outfile or sys.stdout)


if __name__ == '__main__':
    main()
