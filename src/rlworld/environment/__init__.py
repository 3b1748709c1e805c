"""
Defines `Environment` class that wraps initial state/transition/reward/goal
functions into a `gym.core.Env` compatible object.

All `Environment` classes have the following API:

* Methods:
  * `step(action)` which returns next state, reward, episode over, and a dict
  containing diagnostic info. Action should be contained in the action_space.
  * `reset()` which sets the environment to some random initial state and
  returns that state vector. The return type conforms to observation_space.
  * `seed(seed)` which re-seeds the random generator shared with the spaces.
  * `render()` and `close()` which forward to an optional `Renderer`.

* Attributes:
  * `action_space`: A `Space` instance which defines the actions possible.
  * `observation_space`: A `Space` instance which defines the range
  of observable states.
"""

from .environment import Environment
from .rendering import Renderer, CallbackRenderer
from . import classic_control
from .classic_control import CartPole, MountainCar
