"""
atlasfont test suite
testing utilities
"""

import tempfile
import unittest
import logging
from pathlib import Path

try:
    from PIL import Image, ImageDraw
except ImportError:
    Image = None


def make_atlas(size=256, paper=(0, 0, 0, 0), ink=(255, 255, 255, 255), boxes=()):
    """Create a square atlas image with inked boxes (left, top, right, bottom), inclusive."""
    img = Image.new('RGBA', (size, size), paper)
    draw = ImageDraw.Draw(img)
    for box in boxes:
        draw.rectangle(box, fill=ink)
    return img


class BaseTester(unittest.TestCase):
    """Base class for testers."""

    logging.basicConfig(level=logging.WARNING)

    # relative widths of the three-letter proportional test font
    widths_3 = [1.0, 0.5, 0.75]

    # 256x256 atlas with 16x16 cells
    # code 0: full cell inked
    # code 1: single pixel in third column
    # code 65: left half of cell inked
    atlas_boxes = (
        (0, 0, 15, 15),
        (18, 5, 18, 5),
        (16, 64, 23, 79),
    )

    def setUp(self):
        """Setup ahead of each test."""
        bar = '-' * 20
        logging.debug('%s %s %s', bar, self.id(), bar)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up after each test."""
        self.temp_dir.cleanup()
