"""
Classic control environments: balancing a pole on a cart, and driving an
under-powered car up a hill.
"""

from .cartpole import CartPole
from .mountaincar import MountainCar
