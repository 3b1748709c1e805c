import unittest

import numpy as np

from . import spaces
from .spaces import Box, Discrete, MAX_FLOAT



class TestDiscrete(unittest.TestCase):


    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            Discrete(0)
        with self.assertRaises(ValueError):
            Discrete(-3)


    def test_sample_covers_range(self):
        space = Discrete(5, seed=0)
        samples = [space.sample() for _ in range(10000)]
        self.assertEqual(set(samples), set(range(5)))
        self.assertTrue(all(space.contains(s) for s in samples))
        self.assertIsInstance(samples[0], int)


    def test_contains(self):
        space = Discrete(3)
        self.assertTrue(space.contains(0))
        self.assertTrue(space.contains(2))
        self.assertTrue(space.contains(np.int64(1)))
        self.assertTrue(2 in space)
        self.assertFalse(space.contains(3))
        self.assertFalse(space.contains(-1))
        self.assertFalse(space.contains(1.5))
        self.assertFalse(space.contains('1'))
        self.assertFalse(space.contains(True))


    def test_seeded_sampling(self):
        a, b = Discrete(10, seed=42), Discrete(10, seed=42)
        self.assertEqual([a.sample() for _ in range(20)],
                         [b.sample() for _ in range(20)])


    def test_shared_generator(self):
        a, b = Discrete(10), Discrete(10)
        a.np_random = np.random.default_rng(1)
        b.np_random = np.random.default_rng(1)
        self.assertEqual(a.sample(), b.sample())


    def test_hashable(self):
        self.assertEqual(hash(Discrete(4)), hash(Discrete(4)))
        self.assertEqual(len({Discrete(4), Discrete(4), Discrete(5)}), 2)
        self.assertEqual({Discrete(2): 'a'}[Discrete(2)], 'a')



class TestBox(unittest.TestCase):


    def setUp(self):
        self.box = Box(low=(-1., 0.), high=(1., 2.), seed=0)
        self.unbounded = Box(low=(-MAX_FLOAT, 0., -np.inf), high=(MAX_FLOAT, MAX_FLOAT, 1.),
                             seed=0)


    def test_invalid_bounds(self):
        with self.assertRaises(ValueError):
            Box(low=(0., 0.), high=(1.,))
        with self.assertRaises(ValueError):
            Box(low=(2.,), high=(1.,))


    def test_contains(self):
        self.assertTrue(self.box.contains((-1., 2.)))
        self.assertTrue(self.box.contains(np.array((0., 1.))))
        self.assertFalse(self.box.contains((1.1, 1.)))
        self.assertFalse(self.box.contains((0., -0.1)))
        self.assertFalse(self.box.contains((0.,)))
        self.assertFalse(self.box.contains((np.nan, 1.)))
        self.assertFalse(self.box.contains('ab'))
        self.assertTrue(self.unbounded.contains((1e300, 5., -1e300)))


    def test_sample_within_bounds(self):
        for _ in range(1000):
            s = self.box.sample()
            self.assertEqual(s.shape, (2,))
            self.assertTrue(self.box.contains(s))
            s = self.unbounded.sample()
            self.assertTrue(np.all(np.isfinite(s)))
            self.assertTrue(self.unbounded.contains(s))


    def test_bounds_read_only(self):
        with self.assertRaises(ValueError):
            self.box.low[0] = 5.


    def test_hashable(self):
        a = Box(low=(-1., 0.), high=(1., 2.))
        self.assertEqual(a, self.box)
        self.assertEqual(hash(a), hash(self.box))
        self.assertEqual(hash(Box((0.,), (1.,))), hash(Box((-0.,), (1.,))))
        self.assertEqual(len({a, self.box, self.unbounded}), 2)



class TestSpaces(unittest.TestCase):


    def setUp(self):
        self.discspace = Discrete(3)
        self.boxspace = Box(low=(0., 0.), high=(3., 2.))
        self.halfbox = Box(low=(0., -MAX_FLOAT), high=(1., MAX_FLOAT))


    def test_bounds(self):
        self.assertEqual(spaces.bounds(self.discspace), ((0, 2),))
        self.assertEqual(spaces.bounds(self.halfbox), ((0., 1.), (None, None)))


    def test_is_bounded(self):
        self.assertEqual(spaces.is_bounded(self.boxspace), (True, True))
        self.assertEqual(spaces.is_bounded(self.halfbox), (True, False))



if __name__ == '__main__':
    unittest.main(verbosity=0)
