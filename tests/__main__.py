"""
atlasfont test suite
"""

import unittest

from tests.test_basetypes import *
from tests.test_font import *
from tests.test_definition import *
from tests.test_image import *
from tests.test_scripts import *


if __name__ == '__main__':
    unittest.main()
