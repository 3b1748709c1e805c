import math
import warnings

import numpy as np

from ..environment import Environment
from ...helpers.spaces import Box, Discrete, MAX_FLOAT



class CartPole(Environment):
    """
    A pole is attached by an un-actuated joint to a cart moving along a
    frictionless track. The cart is pushed left (0) or right (1) with a fixed
    force. The episode ends when the pole leans more than 12 degrees from
    vertical, or the cart moves more than 2.4 units from the centre. A reward of
    +1 is given for every step, including the one that ends the episode.

    State: `(x, x_dot, theta, theta_dot)` - cart position, cart velocity, pole
    angle (radians from vertical), pole angular velocity.

    Class attributes:

    * `GRAVITY`, `MASSCART`, `MASSPOLE`: physical constants.
    * `LENGTH`: half of the pole's length.
    * `FORCE_MAG`: magnitude of the force applied to the cart.
    * `TAU`: seconds between state updates.
    * `THETA_THRESHOLD_RADIANS`, `X_THRESHOLD`: limits at which the episode fails.

    Attributes:

    * `steps_beyond_done`: NaN until a step ends the episode, then the number of
    steps taken since.
    """

    GRAVITY = 9.8
    MASSCART = 1.0
    MASSPOLE = 0.1
    TOTAL_MASS = MASSPOLE + MASSCART
    LENGTH = 0.5        # actually half the pole's length
    POLEMASS_LENGTH = MASSPOLE * LENGTH
    FORCE_MAG = 10.0
    TAU = 0.02

    THETA_THRESHOLD_RADIANS = 12 * 2 * math.pi / 360
    X_THRESHOLD = 2.4


    @classmethod
    def transition_func(cls, state: np.ndarray, action: int) -> np.ndarray:
        x, x_dot, theta, theta_dot = state
        force = cls.FORCE_MAG if action == 1 else -cls.FORCE_MAG
        costheta = math.cos(theta)
        sintheta = math.sin(theta)
        temp = (force + cls.POLEMASS_LENGTH * theta_dot * theta_dot * sintheta)\
               / cls.TOTAL_MASS
        thetaacc = (cls.GRAVITY * sintheta - costheta * temp) / \
            (cls.LENGTH * (4.0 / 3.0 - cls.MASSPOLE * costheta * costheta / cls.TOTAL_MASS))
        xacc = temp - cls.POLEMASS_LENGTH * thetaacc * costheta / cls.TOTAL_MASS
        # Positions advance with the velocities from before this step.
        x = x + cls.TAU * x_dot
        x_dot = x_dot + cls.TAU * xacc
        theta = theta + cls.TAU * theta_dot
        theta_dot = theta_dot + cls.TAU * thetaacc
        return np.array((x, x_dot, theta, theta_dot), dtype=np.float64)


    @classmethod
    def goal_func(cls, state: np.ndarray) -> bool:
        x, _, theta, _ = state
        return x < -cls.X_THRESHOLD \
               or x > cls.X_THRESHOLD \
               or theta < -cls.THETA_THRESHOLD_RADIANS \
               or theta > cls.THETA_THRESHOLD_RADIANS


    def __init__(self, random_state=None, renderer=None):
        # Angle limit set to 2 * THETA_THRESHOLD_RADIANS so failing observation
        # is still within bounds
        high = np.array((self.X_THRESHOLD * 2,
                         MAX_FLOAT,
                         self.THETA_THRESHOLD_RADIANS * 2,
                         MAX_FLOAT))
        self.steps_beyond_done = np.nan
        super().__init__(observation_space=Box(-high, high),
                         action_space=Discrete(2),
                         random_state=random_state,
                         renderer=renderer)


    def initial_state(self) -> np.ndarray:
        return self.np_random.uniform(low=-0.05, high=0.05, size=(4,))


    def transition(self, state, action):
        return self.transition_func(state, action)


    def goal(self, state):
        return self.goal_func(state)


    def reward(self, state, action, nstate, done) -> float:
        if not done:
            return 1.0
        if np.isnan(self.steps_beyond_done):
            # Pole just fell
            self.steps_beyond_done = 0
            return 1.0
        if self.steps_beyond_done == 0:
            # Once per episode, not once per process.
            with warnings.catch_warnings():
                warnings.simplefilter('always', RuntimeWarning)
                warnings.warn("You are calling 'step()' even though this "
                              "environment has already returned done = True. You "
                              "should always call 'reset()' once you receive "
                              "'done = True' -- any further steps are undefined "
                              "behavior.", RuntimeWarning)
        self.steps_beyond_done += 1
        return 0.0


    def reset(self, *, seed=None, options=None) -> np.ndarray:
        self.steps_beyond_done = np.nan
        return super().reset(seed=seed, options=options)
