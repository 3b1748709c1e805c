"""
Defines the `Renderer` interface through which environments hand their state to
a visualization. The environments do not depend on any renderer being present.
"""

from typing import Callable

import numpy as np



class Renderer:
    """
    A renderer that draws nothing. Sub-classes override `render()` to display
    a state vector and `close()` to release display resources.
    """

    def __init__(self):
        self.closed = False


    def render(self, state: np.ndarray):
        pass


    def close(self):
        self.closed = True



class CallbackRenderer(Renderer):
    """
    Forwards each rendered state to a function. Useful for logging trajectories
    or driving an external display.

    Args:
    * func: A function accepting the state vector.
    """

    def __init__(self, func: Callable[[np.ndarray], None]):
        super().__init__()
        self.func = func


    def render(self, state: np.ndarray):
        if not self.closed:
            self.func(state)
