"""
atlasfont.constants - shared constants

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .basetypes import Coord


VERSION = '0.1.0'

# number of single-byte character codes in a font
TABLE_SIZE = 256
# atlas cells per row
GRID_COLUMNS = 16

# builder defaults
DEFAULT_UV_SYMBOL_OFFSET = Coord(0, 0)
DEFAULT_UV_SYMBOL_SIZE = Coord(1 / GRID_COLUMNS, 1 / GRID_COLUMNS)
DEFAULT_SYMBOL_SIZE = Coord(1, 1)
