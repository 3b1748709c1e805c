"""
Defines `Discrete` and `Box` spaces and utility functions for analyzing them.
See `spaces` module.
"""

from . import spaces
from .spaces import Space, Discrete, Box, MAX_FLOAT
