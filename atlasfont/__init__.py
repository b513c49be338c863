"""
atlasfont - layout of bitmap fonts in texture atlases

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .basetypes import Coord
from .font import Font, FontBuilder
from .definition import FileFormatError, load, load_font, loads, save, dumps
from .image import measure_widths, builder_from_image
