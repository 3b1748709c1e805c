"""
Utilities that drive environments: running policies over episodes.
"""

from .simulate import make, simulate, ENVIRONMENTS
