import unittest

from .environment.test import *
from .extras.test import *
from .helpers.test import *



if __name__ == '__main__':
    unittest.main(verbosity=0)
