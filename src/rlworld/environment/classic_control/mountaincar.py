import math

import numpy as np

from ..environment import Environment
from ...helpers.spaces import Box, Discrete



class MountainCar(Environment):
    """
    An under-powered car sits in a valley between two hills. It must drive back
    and forth to build momentum and reach the flag on the right hill. Actions
    push left (0), do nothing (1), or push right (2). Every step costs -1.

    State: `(position, velocity)`.

    Class attributes:

    * `MIN_POSITION`, `MAX_POSITION`: extent of the track.
    * `MAX_SPEED`: velocity is limited to `+/- MAX_SPEED`.
    * `GOAL_POSITION`: the episode ends once position reaches this.
    """

    MIN_POSITION = -1.2
    MAX_POSITION = 0.6
    MAX_SPEED = 0.07
    GOAL_POSITION = 0.5


    @classmethod
    def height(cls, position: float) -> float:
        """
        Height of the track at a position.
        """
        return math.sin(3 * position) * .45 + .55


    @classmethod
    def transition_func(cls, state: np.ndarray, action: int) -> np.ndarray:
        position, velocity = state
        velocity += (action - 1) * 0.001 + math.cos(3 * position) * (-0.0025)
        velocity = min(max(velocity, -cls.MAX_SPEED), cls.MAX_SPEED)
        position += velocity
        position = min(max(position, cls.MIN_POSITION), cls.MAX_POSITION)
        if position == cls.MIN_POSITION and velocity < 0:
            velocity = 0.
        return np.array((position, velocity), dtype=np.float64)


    @classmethod
    def goal_func(cls, state: np.ndarray) -> bool:
        return state[0] >= cls.GOAL_POSITION


    @classmethod
    def reward_func(cls, state, action, nstate, done) -> float:
        return -1.0


    def __init__(self, random_state=None, renderer=None):
        observation_space = Box(low=(self.MIN_POSITION, -self.MAX_SPEED),
                                high=(self.MAX_POSITION, self.MAX_SPEED))
        super().__init__(observation_space=observation_space,
                         action_space=Discrete(3),
                         random_state=random_state,
                         renderer=renderer)


    def initial_state(self) -> np.ndarray:
        return np.array((self.np_random.uniform(low=-0.6, high=-0.4), 0.))


    def transition(self, state, action):
        return self.transition_func(state, action)


    def goal(self, state):
        return self.goal_func(state)


    def reward(self, state, action, nstate, done):
        return self.reward_func(state, action, nstate, done)
