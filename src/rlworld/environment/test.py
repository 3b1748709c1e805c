import math
import unittest
import warnings
from numbers import Number

import numpy as np

from . import CallbackRenderer, Environment, Renderer
from .classic_control import CartPole, MountainCar
from ..helpers.spaces import Box, Discrete



class NumberLine(Environment):
    """
    Moves a point left (0) or right (1) on a number line until it hits +/-3.
    """

    def __init__(self, random_state=None, renderer=None):
        super().__init__(observation_space=Box((-3.,), (3.,)),
                         action_space=Discrete(2),
                         random_state=random_state, renderer=renderer)

    def initial_state(self):
        return (0.,)

    def transition(self, state, action):
        return state + (2 * action - 1)

    def goal(self, state):
        return abs(state[0]) >= 3

    def reward(self, state, action, nstate, done):
        return 10 if done else -1



class TestEnvironment(unittest.TestCase):


    def setUp(self):
        self.env = NumberLine(random_state=0)


    def test_transitions(self):
        self.env.reset()
        for i in range(2):
            ns, r, g, info = self.env.step(1)
            self.assertIsInstance(ns, np.ndarray)
            self.assertIsInstance(r, float)
            self.assertIsInstance(g, bool)
            self.assertEqual(info, {})
        ns, r, g, _ = self.env.step(1)
        self.assertEqual(ns[0], 3.)
        self.assertEqual(r, 10.)
        self.assertTrue(g)


    def test_reset(self):
        self.env.reset()
        self.assertEqual(self.env.t, 0)
        for i in range(10):
            self.env.step(i % 2)
        self.assertEqual(self.env.t, 10)
        self.env.reset()
        self.assertEqual(self.env.t, 0)


    def test_step_before_reset(self):
        with self.assertRaises(RuntimeError):
            self.env.step(0)
        with self.assertRaises(RuntimeError):
            self.env.render()


    def test_invalid_action(self):
        self.env.reset()
        for action in (2, -1, 0.5, None):
            with self.assertRaises(ValueError):
                self.env.step(action)
        self.assertEqual(self.env.t, 0)


    def test_observation_is_copy(self):
        obs = self.env.reset()
        obs[0] = 100.
        ns, _, _, _ = self.env.step(1)
        self.assertEqual(ns[0], 1.)
        ns[0] = -100.
        self.assertEqual(self.env.state[0], 1.)


    def test_spaces_share_generator(self):
        self.assertIs(self.env.action_space.np_random, self.env.np_random)
        self.assertIs(self.env.observation_space.np_random, self.env.np_random)
        self.env.seed(5)
        self.assertIs(self.env.action_space.np_random, self.env.np_random)


    def test_render(self):
        states = []
        env = NumberLine(renderer=CallbackRenderer(states.append))
        env.reset()
        env.render()
        env.step(1)
        env.render()
        self.assertEqual([s[0] for s in states], [0., 1.])
        states[-1][0] = 50.
        self.assertEqual(env.state[0], 1.)


    def test_close(self):
        renderer = Renderer()
        env = NumberLine(renderer=renderer)
        env.reset()
        env.close()
        env.close()
        self.assertTrue(renderer.closed)
        env = NumberLine()
        env.close()
        env.close()
        self.assertEqual(NumberLine().reset()[0], 0.)



class TestClassicControl(unittest.TestCase):


    def env_tester(self, env: Environment, steps: int=10000):
        obs = env.reset()
        self.assertTrue(env.observation_space.contains(obs))
        type_s = type(obs)
        for i in range(steps):
            s, r, d, info = env.step(i % env.action_space.n)
            self.assertEqual(type_s, type(s))
            self.assertIsInstance(d, bool)
            self.assertIsInstance(r, Number)
            self.assertTrue(np.all(np.isfinite(s)))
            if d:
                obs = env.reset()
                self.assertTrue(env.observation_space.contains(obs))
        env.close()


    def test_cartpole_rollout(self):
        self.env_tester(CartPole(random_state=0))


    def test_mountaincar_rollout(self):
        self.env_tester(MountainCar(random_state=0))


    def test_reset_in_observation_space(self):
        for env in (CartPole(), MountainCar()):
            for _ in range(100):
                self.assertTrue(env.observation_space.contains(env.reset()))


    def test_seeding(self):
        for cls in (CartPole, MountainCar):
            a, b = cls(random_state=3), cls(random_state=3)
            np.testing.assert_array_equal(a.reset(), b.reset())
            for _ in range(50):
                action = a.action_space.sample()
                self.assertEqual(action, b.action_space.sample())
                np.testing.assert_array_equal(a.step(action)[0], b.step(action)[0])
            np.testing.assert_array_equal(a.reset(seed=7), b.reset(seed=7))


    def test_context_manager(self):
        renderer = Renderer()
        with MountainCar(renderer=renderer) as env:
            env.reset()
            env.step(1)
        self.assertTrue(renderer.closed)



class TestCartPole(unittest.TestCase):


    def setUp(self):
        self.env = CartPole(random_state=0)
        self.env.reset()
        self.env.state = np.zeros(4)


    def test_spaces(self):
        self.assertEqual(self.env.action_space, Discrete(2))
        high = self.env.observation_space.high
        self.assertAlmostEqual(high[0], 4.8)
        self.assertAlmostEqual(high[2], 2 * 12 * 2 * math.pi / 360)
        np.testing.assert_array_equal(self.env.observation_space.low, -high)
        self.assertFalse(any(np.isinf(high)))


    def test_integration_order(self):
        s1, r, d, _ = self.env.step(1)
        # positions use velocities from before the update
        self.assertEqual(s1[0], 0.)
        self.assertEqual(s1[2], 0.)
        self.assertAlmostEqual(s1[1], 8. / 41.)
        self.assertAlmostEqual(s1[3], -12. / 41.)
        self.assertEqual(r, 1.)
        self.assertFalse(d)
        s2, _, _, _ = self.env.step(1)
        self.assertAlmostEqual(s2[0], CartPole.TAU * s1[1])
        self.assertAlmostEqual(s2[2], CartPole.TAU * s1[3])


    def test_pole_falls(self):
        counts = []
        for _ in range(2):
            self.env.reset()
            self.env.state = np.zeros(4)
            for i in range(1, 500):
                _, _, done, _ = self.env.step(1)
                if done:
                    break
            self.assertTrue(done)
            counts.append(i)
        self.assertEqual(counts[0], counts[1])
        self.assertLess(self.env.state[2], -CartPole.THETA_THRESHOLD_RADIANS)


    def test_reward_after_done(self):
        rewards = []
        done = False
        while not done:
            _, r, done, _ = self.env.step(1)
            rewards.append(r)
        self.assertTrue(all(r == 1. for r in rewards))
        self.assertEqual(self.env.steps_beyond_done, 0)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('default')
            for _ in range(5):
                _, r, done, _ = self.env.step(0)
                self.assertEqual(r, 0.)
                self.assertTrue(done)
        caught = [w for w in caught if issubclass(w.category, RuntimeWarning)]
        self.assertEqual(len(caught), 1)
        self.assertEqual(self.env.steps_beyond_done, 5)


    def test_warning_each_episode(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('default')
            for episode in range(3):
                self.env.reset()
                done = False
                while not done:
                    _, _, done, _ = self.env.step(1)
                self.env.step(1)
                self.env.step(1)
        caught = [w for w in caught if issubclass(w.category, RuntimeWarning)]
        self.assertEqual(len(caught), 3)


    def test_reset_signature(self):
        with self.assertRaises(TypeError):
            self.env.reset(3)
        a = self.env.reset(seed=3, options={})
        b = CartPole().reset(seed=3, options=None)
        np.testing.assert_array_equal(a, b)


    def test_reset_after_done(self):
        done = False
        while not done:
            _, _, done, _ = self.env.step(1)
        self.env.step(1)
        self.env.reset()
        self.assertTrue(np.isnan(self.env.steps_beyond_done))
        _, r, done, _ = self.env.step(0)
        self.assertFalse(done)
        self.assertEqual(r, 1.)



class TestMountainCar(unittest.TestCase):


    def setUp(self):
        self.env = MountainCar(random_state=0)


    def test_reset(self):
        for _ in range(100):
            position, velocity = self.env.reset()
            self.assertGreaterEqual(position, -0.6)
            self.assertLess(position, -0.4)
            self.assertEqual(velocity, 0.)


    def test_velocity_clamp(self):
        self.env.reset()
        self.env.state = np.array((-math.pi / 6, 0.0695))
        s, _, _, _ = self.env.step(2)
        self.assertEqual(s[1], MountainCar.MAX_SPEED)
        self.env.state = np.array((-math.pi / 6, -0.0695))
        s, _, _, _ = self.env.step(0)
        self.assertEqual(s[1], -MountainCar.MAX_SPEED)


    def test_left_wall(self):
        self.env.reset()
        self.env.state = np.array((MountainCar.MIN_POSITION + 0.01, -0.07))
        s, _, _, _ = self.env.step(0)
        self.assertEqual(s[0], MountainCar.MIN_POSITION)
        self.assertEqual(s[1], 0.)


    def test_extreme_actions(self):
        for action in (0, 2):
            self.env.reset()
            for _ in range(2000):
                s, r, d, _ = self.env.step(action)
                self.assertEqual(r, -1.)
                self.assertTrue(self.env.observation_space.contains(s))


    def test_reward_at_goal(self):
        self.env.reset()
        self.env.state = np.array((0.49, 0.07))
        s, r, d, _ = self.env.step(2)
        self.assertTrue(d)
        self.assertEqual(r, -1.)
        s, r, d, _ = self.env.step(2)
        self.assertEqual(r, -1.)


    def test_height(self):
        self.assertAlmostEqual(MountainCar.height(0.), 0.55)



if __name__ == '__main__':
    unittest.main(verbosity=0)
