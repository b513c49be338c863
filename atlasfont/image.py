"""
atlasfont.image - measure letter widths from atlas images

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from collections import Counter
from math import floor

try:
    from PIL import Image
except ImportError:
    Image = None

from .basetypes import Coord
from .constants import (
    TABLE_SIZE, GRID_COLUMNS,
    DEFAULT_UV_SYMBOL_OFFSET, DEFAULT_UV_SYMBOL_SIZE, DEFAULT_SYMBOL_SIZE,
)
from .font import FontBuilder


# available background policies
# -----------------------------
#
# most-common       use colour most commonly found in symbol cells
# least-common      use colour least commonly found in symbol cells
# brightest         use brightest colour, by sum of channel values
# darkest           use darkest colour, by sum of channel values
# top-left          use colour of top-left pixel in first cell
BACKGROUNDS = ('most-common', 'least-common', 'brightest', 'darkest', 'top-left')


def _open_image(infile):
    """Open image file or stream, or use an already opened image."""
    if isinstance(infile, Image.Image):
        return infile.convert('RGBA')
    with Image.open(infile) as img:
        return img.convert('RGBA')


def _to_pixel(value):
    """Round half up to whole pixel."""
    return floor(value + 0.5)

def _cell_box(img, offset, size, code):
    """Pixel box (left, top, right, bottom) of a symbol cell."""
    row, col = divmod(code, GRID_COLUMNS)
    return (
        _to_pixel((offset.x + col * size.x) * img.width),
        _to_pixel((offset.y + row * size.y) * img.height),
        _to_pixel((offset.x + (col+1) * size.x) * img.width),
        _to_pixel((offset.y + (row+1) * size.y) * img.height),
    )


def _in_image(img, box):
    left, top, right, bottom = box
    return left >= 0 and top >= 0 and right <= img.width and bottom <= img.height


def _identify_paper(crops, background):
    """Identify paper colour from cells."""
    colourfreq = Counter()
    for crop in crops:
        colours = crop.getcolors(maxcolors=crop.width*crop.height)
        colourfreq.update({_c: _n for _n, _c in colours})
    brightness = sorted((sum(_c), _c) for _c in colourfreq)
    if background == 'most-common':
        # most common colour in atlas assumed to be background colour
        paper, _ = colourfreq.most_common(1)[0]
    elif background == 'least-common':
        paper, _ = colourfreq.most_common()[-1]
    elif background == 'brightest':
        _, paper = brightness[-1]
    elif background == 'darkest':
        _, paper = brightness[0]
    else:
        paper = crops[0].getpixel((0, 0))
    return paper


def _ink_width(crop, paper):
    """Number of pixel columns up to and including the rightmost inked one."""
    width = crop.width
    while width:
        colours = crop.crop((width-1, 0, width, crop.height)).getcolors()
        if colours and len(colours) == 1 and colours[0][1] == paper:
            width -= 1
        else:
            break
    return width


def measure_widths(
        infile,
        uv_symbol_offset=DEFAULT_UV_SYMBOL_OFFSET,
        uv_symbol_size=DEFAULT_UV_SYMBOL_SIZE,
        background='most-common',
        empty_width=0.0,
    ):
    """
    Measure relative letter widths of the symbols in an atlas image.

    infile: image file, stream or PIL image
    uv_symbol_offset: offset of the cell for code 0, in uv coordinates (default: 0x0)
    uv_symbol_size: size of a symbol cell, in uv coordinates (default: 1/16 x 1/16)
    background: determine background from "most-common" (default), "least-common", "brightest", "darkest", "top-left" colour
    empty_width: relative width given to cells without ink (default: 0)
    """
    if not Image:
        raise ImportError('Measuring letter widths requires PIL module.')
    if background not in BACKGROUNDS:
        raise ValueError(
            f'Unknown background policy `{background}`; '
            f'must be one of {", ".join(BACKGROUNDS)}.'
        )
    offset = Coord.create(uv_symbol_offset)
    size = Coord.create(uv_symbol_size)
    img = _open_image(infile)
    if size.x * img.width < 1 or size.y * img.height < 1:
        raise ValueError(
            f'Symbol cell size {size} is smaller than one pixel '
            f'in {img.width}x{img.height} image.'
        )
    boxes = tuple(_cell_box(img, offset, size, _code) for _code in range(TABLE_SIZE))
    outside = tuple(_code for _code, _box in enumerate(boxes) if not _in_image(img, _box))
    if outside:
        logging.warning(
            '%d symbol cells fall outside the %dx%d image; first is code %d.',
            len(outside), img.width, img.height, outside[0]
        )
    crops = {
        _code: img.crop(_box)
        for _code, _box in enumerate(boxes)
        if _code not in outside
    }
    if not crops:
        raise ValueError('Image too small; no symbol cells found.')
    paper = _identify_paper(tuple(crops.values()), background)
    logging.debug('Background colour %s', paper)
    widths = [float(empty_width)] * TABLE_SIZE
    for code, crop in crops.items():
        ink_width = _ink_width(crop, paper)
        if ink_width:
            widths[code] = ink_width / crop.width
    return widths


def builder_from_image(
        infile,
        uv_symbol_offset=DEFAULT_UV_SYMBOL_OFFSET,
        uv_symbol_size=DEFAULT_UV_SYMBOL_SIZE,
        symbol_size=DEFAULT_SYMBOL_SIZE,
        **kwargs
    ):
    """Create a builder for a proportional font from an atlas image."""
    letter_widths = measure_widths(
        infile, uv_symbol_offset, uv_symbol_size, **kwargs
    )
    return FontBuilder(
        uv_symbol_offset=uv_symbol_offset,
        uv_symbol_size=uv_symbol_size,
        symbol_size=symbol_size,
        letter_widths=letter_widths,
    )
