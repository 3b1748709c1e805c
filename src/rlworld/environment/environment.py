"""
A discrete-time environment with a persistent state vector, specified by its
initial state, transition, goal, and reward functions.
"""

from typing import Any, Dict, List, Tuple, Union

import numpy as np
from gym.core import Env
from gym.utils import seeding

from .rendering import Renderer
from ..helpers.spaces import Space



class Environment(Env):
    """
    Environment is a convenience wrapper for the openai gym's `Env` class. It
    encapsulates initial state, transition, reward, and goal functions into a
    cohesive object. The environment state is persistent - it remembers its last
    state from the previous call to `Environment.step()`.

    Sub-classes implement:
    * `initial_state()`: returns the starting state vector of an episode.
    * `transition(state, action)`: returns the next state vector.
    * `goal(state)`: returns whether the state ends the episode.
    * `reward(state, action, nstate, done)`: returns the reward for a step.

    Args:
    * observation_space: A `Space` object representing the range of values state
    variables can take.
    * action_space: A `Space` object representing the range of values actions
    can take.
    * random_state: An `int` or `np.random.Generator` instance that is used
    to randomly sample initial states and space elements. Defaults to `None`.
    * renderer: A `Renderer` instance that receives state on `render()`.
    Defaults to `None` i.e. no rendering.

    Note: The environment must be `reset()` before stepping. Observations
    returned are copies of the internal state.
    """

    def __init__(self, observation_space: Space, action_space: Space,
                 random_state: Union[int, np.random.Generator]=None,
                 renderer: Renderer=None):
        super().__init__()
        self.observation_space = observation_space
        self.action_space = action_space
        self.renderer = renderer
        self.state = None
        self.t = 0
        self.seed(random_state)


    def seed(self, seed: Union[int, np.random.Generator]=None) -> List[int]:
        """
        Sets the random number generator used by the environment and its spaces.

        Args:
        * seed: An `int` seed, a `np.random.Generator`, or `None` for a fresh
        generator seeded from OS entropy.

        Returns:
        * A list containing the seed used.
        """
        if isinstance(seed, np.random.Generator):
            self._np_random = seed
        else:
            self._np_random, seed = seeding.np_random(seed)
        self.observation_space.np_random = self._np_random
        self.action_space.np_random = self._np_random
        return [seed]


    def initial_state(self) -> np.ndarray:
        raise NotImplementedError


    def transition(self, state: np.ndarray, action) -> np.ndarray:
        raise NotImplementedError


    def goal(self, state: np.ndarray) -> bool:
        raise NotImplementedError


    def reward(self, state: np.ndarray, action, nstate: np.ndarray,
               done: bool) -> float:
        raise NotImplementedError


    def step(self, action) -> Tuple[np.ndarray, float, bool, Dict[str, Any]]:
        """
        Given an action, compute the next state and reward of the environment.

        Args:
        * action: An element of `action_space`.

        Returns a tuple of:
        * new state (np.ndarray), reward (float), terminal state (bool), misc info
        """
        if self.state is None:
            raise RuntimeError('Cannot call step() before reset().')
        if not self.action_space.contains(action):
            raise ValueError('Invalid action: {!r} not in {!r}'\
                             .format(action, self.action_space))
        nstate = np.asarray(self.transition(self.state, action), dtype=np.float64)
        done = bool(self.goal(nstate))
        reward = float(self.reward(self.state, action, nstate, done))
        self.state = nstate
        self.t += 1
        return self.state.copy(), reward, done, {}


    def reset(self, *, seed: Union[int, np.random.Generator]=None,
              options: Dict[str, Any]=None) -> np.ndarray:
        """
        Return the environment to a random initial state.

        Args:
        * seed: If given, re-seeds the environment before resetting.
        * options: Not used by these environments. Accepted to match `gym.Env.reset`.

        Returns:
        * The new initial state of the environment. Same type as
        `self.observation_space.sample()`.
        """
        if seed is not None:
            self.seed(seed)
        self.t = 0
        self.state = np.array(self.initial_state(), dtype=np.float64)
        return self.state.copy()


    def render(self):
        """
        Passes a copy of the current state to the renderer, if any.
        """
        if self.state is None:
            raise RuntimeError('Cannot call render() before reset().')
        if self.renderer is not None:
            self.renderer.render(self.state.copy())


    def close(self):
        """
        Releases the renderer's resources. Safe to call more than once.
        """
        if self.renderer is not None:
            self.renderer.close()
