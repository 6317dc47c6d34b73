import random
import unittest
from collections import Counter

from termtris_bag import PieceBag, shuffle
from termtris_piece import KINDS


class ZeroRandom:
    """Always picks index 0 and remembers the ranges it was asked for."""
    def __init__(self):
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return 0


class ShuffleTests(unittest.TestCase):
    def test_fisher_yates_walks_down_from_last_index(self):
        rng = ZeroRandom()
        bag = list(range(7))
        shuffle(bag, rng)
        self.assertEqual(rng.calls, [7, 6, 5, 4, 3, 2])
        self.assertEqual(bag, [1, 2, 3, 4, 5, 6, 0])

    def test_shuffle_is_a_permutation(self):
        rng = random.Random(11)
        for _ in range(200):
            bag = list(KINDS)
            shuffle(bag, rng)
            self.assertEqual(sorted(bag), sorted(KINDS))

    def test_positions_are_roughly_uniform(self):
        rng = random.Random(1234)
        trials = 7000
        counts = [Counter() for _ in KINDS]
        for _ in range(trials):
            bag = list(KINDS)
            shuffle(bag, rng)
            for pos, kind in enumerate(bag):
                counts[pos][kind] += 1
        expected = trials / len(KINDS)
        for pos_counts in counts:
            for kind in KINDS:
                self.assertTrue(0.8 * expected < pos_counts[kind] < 1.2 * expected,
                                (kind, pos_counts[kind]))


class PieceBagTests(unittest.TestCase):
    def test_initial_bag_is_shuffled_identity(self):
        bag = PieceBag(ZeroRandom())
        self.assertEqual(bag.bag, ["Z", "S", "O", "T", "L", "J", "I"])
        self.assertEqual(bag.next_piece(), "Z")

    def test_each_cycle_deals_every_kind_once(self):
        bag = PieceBag(random.Random(3))
        for _ in range(50):
            draws = [bag.next_piece() for _ in KINDS]
            self.assertEqual(sorted(draws), sorted(KINDS))

    def test_reshuffles_when_exhausted(self):
        bag = PieceBag(random.Random(5))
        for _ in KINDS:
            bag.next_piece()
        self.assertEqual(bag.cursor, 7)
        bag.next_piece()
        self.assertEqual(bag.cursor, 1)

    def test_same_seed_same_sequence(self):
        a, b = PieceBag(random.Random(9)), PieceBag(random.Random(9))
        self.assertEqual([a.next_piece() for _ in range(30)],
                         [b.next_piece() for _ in range(30)])


if __name__ == "__main__":
    unittest.main()
