import io
import unittest
from contextlib import redirect_stdout

import numpy as np

from .simulate import main, make, simulate
from ..environment import CartPole, MountainCar



class TestSimulate(unittest.TestCase):


    def test_make(self):
        self.assertIsInstance(make('CartPole'), CartPole)
        self.assertIsInstance(make('MountainCar', random_state=0), MountainCar)
        with self.assertRaises(KeyError):
            make('Acrobot')


    def test_random_policy(self):
        env = CartPole(random_state=0)
        rewards = simulate(env, episodes=4, verbose=False)
        self.assertEqual(len(rewards), 4)
        self.assertTrue(all(r >= 1. for r in rewards))


    def test_maxsteps(self):
        env = MountainCar(random_state=0)
        rewards = simulate(env, policy=lambda obs: 1, episodes=2, maxsteps=50,
                           verbose=False)
        self.assertEqual(rewards, [-50., -50.])


    def test_policy(self):
        # Push in the direction of motion to build momentum.
        policy = lambda obs: 2 if obs[1] >= 0 else 0
        rewards = simulate('MountainCar', policy=policy, episodes=2,
                           maxsteps=1000, verbose=False)
        self.assertTrue(all(-1000 < r < 0 for r in rewards))


    def test_main(self):
        out = io.StringIO()
        with redirect_stdout(out):
            rewards = main(['CartPole', '--episodes', '2', '--seed', '1'])
        self.assertEqual(len(rewards), 2)
        self.assertIn('Mean reward: {}'.format(np.mean(rewards)), out.getvalue())
        with redirect_stdout(io.StringIO()):
            self.assertEqual(main(['CartPole', '-e', '2', '-s', '1', '-q']), rewards)



if __name__ == '__main__':
    unittest.main(verbosity=0)
