"""
atlasfont.font - font layout in a texture atlas

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from operator import index

from .basetypes import Coord
from .constants import (
    TABLE_SIZE, GRID_COLUMNS,
    DEFAULT_UV_SYMBOL_OFFSET, DEFAULT_UV_SYMBOL_SIZE, DEFAULT_SYMBOL_SIZE,
)


# configurable fields, in definition file order
FIELDS = ('uv_symbol_offset', 'uv_symbol_size', 'symbol_size', 'letter_widths')
GEOMETRY_FIELDS = FIELDS[:3]


def _to_code(code):
    """Convert character or byte to a character code in [0, 255]."""
    if isinstance(code, (str, bytes)):
        if len(code) != 1:
            raise TypeError(
                f'Expected a single character, got {len(code)} in {code!r}.'
            )
        code = ord(code)
    if isinstance(code, bool):
        raise TypeError('Character code must be int, not bool.')
    code = index(code)
    if not 0 <= code < TABLE_SIZE:
        raise IndexError(
            f'Character code {code} out of range [0, {TABLE_SIZE-1}].'
        )
    return code


def _to_width_table(letter_widths):
    """Copy relative widths into a fixed-size table, zero-filled."""
    widths = tuple(float(_w) for _w in letter_widths)
    if len(widths) > TABLE_SIZE:
        logging.debug(
            'Ignoring %d letter widths beyond code %d.',
            len(widths) - TABLE_SIZE, TABLE_SIZE - 1
        )
        widths = widths[:TABLE_SIZE]
    return widths + (0.0,) * (TABLE_SIZE - len(widths))


###############################################################################
# font class

class Font:
    """
    Immutable layout of a bitmap font in a texture atlas.

    Fonts are created through FontBuilder.build().
    """

    __slots__ = (
        '_uv_symbol_offset', '_uv_symbol_size', '_symbol_size', '_letter_widths',
    )

    def __init__(
            self, uv_symbol_offset, uv_symbol_size, symbol_size,
            letter_widths=None
        ):
        """
        Create font from layout values.

        uv_symbol_offset: offset of the cell for code 0, in uv coordinates
        uv_symbol_size: size of a character cell, in uv coordinates
        symbol_size: default size of a symbol when drawing text
        letter_widths: relative widths by character code; None for monospaced
        """
        init = object.__setattr__
        init(self, '_uv_symbol_offset', Coord.create(uv_symbol_offset))
        init(self, '_uv_symbol_size', Coord.create(uv_symbol_size))
        init(self, '_symbol_size', Coord.create(symbol_size))
        if letter_widths is not None:
            letter_widths = _to_width_table(letter_widths)
        init(self, '_letter_widths', letter_widths)

    def __setattr__(self, attr, value):
        raise AttributeError(f'{type(self).__name__} is immutable.')

    def __delattr__(self, attr):
        raise AttributeError(f'{type(self).__name__} is immutable.')

    def __reduce__(self):
        return type(self), self._key()

    def __repr__(self):
        props = {_k: getattr(self, _k) for _k in FIELDS}
        return (
            type(self).__name__
            + '(\n    ' +
            '\n    '.join(f'{_k}={_v!r},' for _k, _v in props.items())
            + '\n)'
        )

    def _key(self):
        return (
            self._uv_symbol_offset, self._uv_symbol_size,
            self._symbol_size, self._letter_widths,
        )

    def __eq__(self, other):
        if not isinstance(other, Font):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    @property
    def uv_symbol_offset(self):
        """Offset of the code-0 cell in the texture, in uv coordinates."""
        return self._uv_symbol_offset

    @property
    def uv_symbol_size(self):
        """Size of a symbol cell in the texture, in uv coordinates."""
        return self._uv_symbol_size

    @property
    def symbol_size(self):
        """Default size of a symbol when drawing text with this font."""
        return self._symbol_size

    @property
    def monospaced(self):
        """Font has no per-letter widths."""
        return self._letter_widths is None

    @property
    def letter_widths(self):
        """Table of relative widths by character code, or None if monospaced."""
        return self._letter_widths

    def letter_width(self, code):
        """
        Relative width of a symbol.

        code: character code in [0, 255], or a single character or byte
        Raises IndexError if the font is monospaced or the code out of range.
        """
        code = _to_code(code)
        if self._letter_widths is None:
            raise IndexError('Monospaced font has no letter widths.')
        return self._letter_widths[code]

    def symbol_uv(self, code):
        """Texture rectangle (left, top, right, bottom) of a symbol's cell."""
        code = _to_code(code)
        row, col = divmod(code, GRID_COLUMNS)
        left = self._uv_symbol_offset.x + col * self._uv_symbol_size.x
        top = self._uv_symbol_offset.y + row * self._uv_symbol_size.y
        return (
            left, top,
            left + self._uv_symbol_size.x, top + self._uv_symbol_size.y
        )


###############################################################################
# builder

class FontBuilder:
    """Mutable staging area for font layout values."""

    def __init__(self, **kwargs):
        self.uv_symbol_size = DEFAULT_UV_SYMBOL_SIZE
        self.uv_symbol_offset = DEFAULT_UV_SYMBOL_OFFSET
        self.symbol_size = DEFAULT_SYMBOL_SIZE
        self.letter_widths = None
        self.set_properties(**kwargs)

    def __repr__(self):
        return (
            type(self).__name__ + '('
            + ', '.join(f'{_k}={getattr(self, _k)!r}' for _k in FIELDS)
            + ')'
        )

    @classmethod
    def from_font(cls, font):
        """Create builder holding the values of an existing font."""
        return cls(**{_k: getattr(font, _k) for _k in FIELDS})

    def set_properties(self, **kwargs):
        """Set builder fields by name."""
        for field, value in kwargs.items():
            if field not in FIELDS:
                raise TypeError(f'Unknown font property `{field}`.')
            if field in GEOMETRY_FIELDS:
                value = Coord.create(value)
            setattr(self, field, value)
        return self

    def build(self):
        """Build a font from the current settings."""
        return Font(
            self.uv_symbol_offset, self.uv_symbol_size,
            self.symbol_size, self.letter_widths
        )
