"""
Defines the `Space` classes describing the values actions and observations can
take, and functions reporting the bounds of their variables.

Two spaces are defined:

* `Discrete(n)`: integers in `[0, n)`.
* `Box(low, high)`: real vectors bounded per dimension. A bound whose magnitude
is `MAX_FLOAT` (or infinite) marks that side of the dimension as unbounded.

Spaces draw samples from a `numpy.random.Generator`. An `Environment` shares its
own generator with its spaces so a single seed controls all sampling.
"""

from typing import Sequence, Tuple, Union

import numpy as np
from gym import spaces as gym_spaces

MAX_FLOAT = np.finfo(np.float64).max



class Space(gym_spaces.Space):
    """
    Base class for spaces. Thin layer over `gym.spaces.Space` whose random
    generator can be rebound, so an owning environment can share its generator.

    Args:
    * shape: Shape of a sample from the space.
    * dtype: numpy dtype of a sample.
    * seed: An `int` or a `np.random.Generator` used for sampling.
    """

    def __init__(self, shape=None, dtype=None,
                 seed: Union[int, np.random.Generator]=None):
        super().__init__(shape=shape, dtype=dtype, seed=seed)


    @property
    def np_random(self) -> np.random.Generator:
        if self._np_random is None:
            self.seed()
        return self._np_random


    @np_random.setter
    def np_random(self, value: np.random.Generator):
        self._np_random = value


    def sample(self, mask=None):
        raise NotImplementedError


    def contains(self, x) -> bool:
        raise NotImplementedError



class Discrete(Space):
    """
    The integers `{0, 1, ..., n-1}`.

    Args:
    * n: Number of elements. Must be positive.
    * seed: An `int` or `np.random.Generator` used for sampling.
    """

    def __init__(self, n: int, seed: Union[int, np.random.Generator]=None):
        if int(n) != n or n <= 0:
            raise ValueError('Discrete space size must be a positive integer, got: '\
                             + str(n))
        self.n = int(n)
        super().__init__(shape=(), dtype=np.int64, seed=seed)


    def sample(self, mask=None) -> int:
        return int(self.np_random.integers(self.n))


    def contains(self, x) -> bool:
        if isinstance(x, np.ndarray) and x.shape == () and \
                np.issubdtype(x.dtype, np.integer):
            x = int(x)
        if isinstance(x, (bool, np.bool_)) or not isinstance(x, (int, np.integer)):
            return False
        return 0 <= x < self.n


    def __repr__(self) -> str:
        return 'Discrete({})'.format(self.n)


    def __eq__(self, other) -> bool:
        return isinstance(other, Discrete) and self.n == other.n


    def __hash__(self) -> int:
        return hash((Discrete, self.n))



class Box(Space):
    """
    A box in R^n. Each dimension `i` spans `[low[i], high[i]]`, inclusive.
    Use `MAX_FLOAT` (or `np.inf`) for a side without a limit.

    Args:
    * low: Sequence of lower bounds.
    * high: Sequence of upper bounds, same length as `low`.
    * seed: An `int` or `np.random.Generator` used for sampling.

    Note: Bounds are read-only arrays; the space does not change once created.
    """

    def __init__(self, low: Sequence[float], high: Sequence[float],
                 seed: Union[int, np.random.Generator]=None):
        low = np.array(low, dtype=np.float64).ravel()
        high = np.array(high, dtype=np.float64).ravel()
        if low.shape != high.shape:
            raise ValueError('Box bounds have different lengths: {} and {}'\
                             .format(len(low), len(high)))
        if np.any(low > high):
            raise ValueError('Box lower bounds exceed upper bounds.')
        low.flags.writeable = False
        high.flags.writeable = False
        self.low = low
        self.high = high
        super().__init__(shape=low.shape, dtype=np.float64, seed=seed)


    @property
    def bounded_below(self) -> np.ndarray:
        return self.low > -MAX_FLOAT


    @property
    def bounded_above(self) -> np.ndarray:
        return self.high < MAX_FLOAT


    def sample(self, mask=None) -> np.ndarray:
        """
        Draws a vector within the box. Dimensions are sampled according to
        their bounds:

        * [a, b]: uniform distribution,
        * [a, oo): shifted exponential distribution,
        * (-oo, b]: shifted negative exponential distribution,
        * (-oo, oo): standard normal distribution.
        """
        below, above = self.bounded_below, self.bounded_above
        bounded = below & above
        upp_bounded = ~below & above
        low_bounded = below & ~above
        unbounded = ~below & ~above

        sample = np.empty(self.shape, dtype=np.float64)
        sample[unbounded] = self.np_random.normal(size=unbounded[unbounded].shape)
        sample[low_bounded] = self.low[low_bounded] + \
            self.np_random.exponential(size=low_bounded[low_bounded].shape)
        sample[upp_bounded] = self.high[upp_bounded] - \
            self.np_random.exponential(size=upp_bounded[upp_bounded].shape)
        sample[bounded] = self.np_random.uniform(low=self.low[bounded],
                                                 high=self.high[bounded])
        return np.clip(sample, self.low, self.high)


    def contains(self, x) -> bool:
        try:
            x = np.asarray(x, dtype=np.float64)
        except (TypeError, ValueError):
            return False
        if x.shape != self.shape:
            return False
        return bool(np.all(x >= self.low) and np.all(x <= self.high))


    def __repr__(self) -> str:
        return 'Box({}, {})'.format(self.low.tolist(), self.high.tolist())


    def __eq__(self, other) -> bool:
        return isinstance(other, Box) and np.array_equal(self.low, other.low)\
               and np.array_equal(self.high, other.high)


    def __hash__(self) -> int:
        return hash((Box, tuple(self.low.tolist()), tuple(self.high.tolist())))



def bounds(space: Space) -> Tuple[Tuple]:
    """
    Computes the inclusive bounds for each variable in a tuple representing the
    space. So a Discrete(3) has bounds of ((0, 2),). Unbounded limits are
    returned as None in bounds.

    Args:
    * space (Space): Space instance describing the sample.

    Returns:
    * A flat tuple of inclusive (low, high) bounds for each variable in state.
    """
    if isinstance(space, Discrete):
        return ((0, space.n-1),)
    elif isinstance(space, Box):
        bds = zip(space.low, space.high, space.bounded_below, space.bounded_above)
        return tuple((float(l) if lb else None, float(h) if hb else None)\
                     for l, h, lb, hb in bds)
    raise TypeError('Unsupported space: ' + repr(space))



def is_bounded(space: Space) -> Tuple[bool]:
    """
    For each variable in a tuple representing the space, returns a boolean
    indicating if it has finite limits on both sides.
    """
    if isinstance(space, Discrete):
        return (True,)
    elif isinstance(space, Box):
        return tuple(bool(b) for b in space.bounded_below & space.bounded_above)
    raise TypeError('Unsupported space: ' + repr(space))
