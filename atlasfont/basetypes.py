"""
atlasfont.basetypes - base data types and converters

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple
from numbers import Real


def to_number(value=0):
    """Convert to int or float."""
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            raise ValueError(f"Can't convert `{value}` to number.") from None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"Can't convert `{value}` to number.")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return value


class _VectorMixin:
    """Vector operations on tuple."""

    def __str__(self):
        return ' '.join(f'{_e}' for _e in self)

    def __add__(self, other):
        return type(self)(*(_l + _r for _l, _r in zip(self, other)))

    def __sub__(self, other):
        return type(self)(*(_l - _r for _l, _r in zip(self, other)))

    def __bool__(self):
        return any(self)


class Coord(_VectorMixin, namedtuple('Coord', 'x y')):
    """Coordinate tuple; in texture space, x is u and y is v."""

    @classmethod
    def create(cls, coord=0):
        if isinstance(coord, cls):
            return coord
        coord = to_tuple(coord, length=2)
        if len(coord) != 2:
            raise ValueError(f"Can't convert {coord!r} to coordinate pair.")
        return cls(*coord)


def _str_to_tuple(value):
    """Convert various string representations to tuple."""
    value = value.strip().replace(',', ' ').replace('x', ' ')
    return tuple(to_number(_s) for _s in value.split())

def to_tuple(value=0, *, length=2):
    if isinstance(value, Real) and not isinstance(value, bool):
        return (to_number(value),) * length
    if isinstance(value, str):
        value = _str_to_tuple(value)
        if len(value) == 1:
            return value * length
        return value
    if value is None:
        return (0,) * length
    try:
        return tuple(to_number(_i) for _i in value)
    except TypeError:
        pass
    raise ValueError(f"Can't convert {value!r} to tuple.")
