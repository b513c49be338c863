"""
atlasfont.definition - plain-text font definition files

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
from contextlib import contextmanager
from pathlib import PurePath
from types import SimpleNamespace

from .basetypes import Coord, to_number
from .constants import TABLE_SIZE, GRID_COLUMNS
from .font import FontBuilder, FIELDS, GEOMETRY_FIELDS


_WHITESPACE = ' \t'
_COMMENT = '#'
_TAB = '    '


class FileFormatError(ValueError):
    """Incorrect file format."""


@contextmanager
def _open(file, mode):
    """Open a path for text access, or pass through an open stream."""
    if isinstance(file, (str, PurePath)):
        with open(file, mode, encoding='utf-8') as stream:
            yield stream
    else:
        yield file


def _to_field(key):
    """Convert key in file to builder field name."""
    return key.strip().lower().replace('-', '_')

def _to_key(field):
    """Convert builder field name to key in file."""
    return field.replace('_', '-')


##############################################################################
# read file

class Cluster(SimpleNamespace):
    """Key with its value lines."""


def _read_text(instream):
    """Split text into key clusters."""
    elements = []
    for lineno, line in enumerate(instream, 1):
        line = line.rstrip('\r\n')
        if not line.strip() or line.lstrip(_WHITESPACE).startswith(_COMMENT):
            continue
        if line[0] in _WHITESPACE:
            if not elements:
                raise FileFormatError(
                    f'Invalid font definition: value without key on line {lineno}.'
                )
            elements[-1].values.append(line.strip())
            continue
        key, sep, rest = line.partition(':')
        if sep != ':':
            raise FileFormatError(
                f'Invalid font definition: key `{key.strip()}` '
                f'not followed by `:` on line {lineno}.'
            )
        rest = rest.strip()
        elements.append(Cluster(key=key.strip(), values=[rest] if rest else []))
    return elements


def _parse_numbers(key, value):
    try:
        return tuple(to_number(_s) for _s in value.replace(',', ' ').split())
    except ValueError as e:
        raise FileFormatError(f'Invalid value for `{key}`: {e}') from e


def _convert_properties(elements):
    """Convert key clusters to builder properties."""
    properties = {}
    for element in elements:
        field = _to_field(element.key)
        if field not in FIELDS:
            logging.warning('Ignoring unknown font property `%s`.', element.key)
            continue
        if field in properties:
            logging.warning('Duplicate font property `%s`; using last.', element.key)
        text = ' '.join(element.values)
        if field in GEOMETRY_FIELDS:
            # a single number applies to both components
            try:
                value = Coord.create(text)
            except ValueError as e:
                raise FileFormatError(f'Invalid value for `{element.key}`: {e}') from e
        else:
            value = _parse_numbers(element.key, text)
            if len(value) > TABLE_SIZE:
                raise FileFormatError(
                    f'Too many letter widths: found {len(value)}, maximum is {TABLE_SIZE}.'
                )
        properties[field] = value
    return properties


def load(infile):
    """Read a font definition from a path or text stream into a builder."""
    with _open(infile, 'r') as instream:
        elements = _read_text(instream)
    properties = _convert_properties(elements)
    logging.debug('Font definition properties: %s', list(properties))
    return FontBuilder(**properties)


def load_font(infile):
    """Read a font definition and build the font."""
    return load(infile).build()


##############################################################################
# write file

def _format_number(value):
    """Shortest representation that reads back to the same value."""
    return repr(to_number(value))


def _write_prop(outstream, key, value):
    """Write out a geometry property."""
    outstream.write(f'{key}: {" ".join(_format_number(_v) for _v in value)}\n')


def _write_widths(outstream, key, widths):
    """Write out the letter width table, one atlas row per line."""
    outstream.write(f'{key}:\n')
    for start in range(0, len(widths), GRID_COLUMNS):
        row = widths[start:start+GRID_COLUMNS]
        outstream.write(_TAB + ' '.join(_format_number(_w) for _w in row) + '\n')


def save(font, outfile):
    """Write a font or builder's values to a path or text stream."""
    if isinstance(font, FontBuilder):
        font = font.build()
    with _open(outfile, 'w') as outstream:
        for field in GEOMETRY_FIELDS:
            _write_prop(outstream, _to_key(field), getattr(font, field))
        if not font.monospaced:
            _write_widths(outstream, _to_key('letter_widths'), font.letter_widths)
    return font


def dumps(font):
    """Font definition as a string."""
    outstream = io.StringIO()
    save(font, outstream)
    return outstream.getvalue()


def loads(text):
    """Read a font definition from a string into a builder."""
    return load(io.StringIO(text))
