from .helpers.spaces import Space, Discrete, Box
from .environment import Environment, Renderer, CallbackRenderer
from .environment import CartPole, MountainCar
from .extras.simulate import make, simulate
