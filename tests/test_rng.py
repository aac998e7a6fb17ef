import unittest

from tetris_config import CONFIG
from tetris_piece import KINDS, O, S, Z
from tetris_rng import NESRandom, UniformRandom, make_randomizer


class TestRandomizers(unittest.TestCase):
    def test_given_same_seed_when_drawing_then_same_sequence(self):
        a = UniformRandom(7)
        b = UniformRandom(7)
        self.assertEqual([a.next_id() for _ in range(50)], [b.next_id() for _ in range(50)])

    def test_given_uniform_when_drawing_many_then_every_kind_appears(self):
        r = UniformRandom(1)
        seen = {r.next_id() for _ in range(500)}
        self.assertEqual(seen, set(KINDS))

    def test_given_nes_with_first_rule_when_drawing_first_then_never_szo(self):
        for seed in range(100):
            with self.subTest(seed=seed):
                self.assertNotIn(NESRandom(seed, True).next_id(), (S, Z, O))

    def test_given_nes_seed_when_drawing_then_reproducible_and_valid(self):
        a = NESRandom(12345)
        b = NESRandom(12345)
        seq = [a.next_id() for _ in range(200)]
        self.assertEqual(seq, [b.next_id() for _ in range(200)])
        self.assertTrue(set(seq) <= set(KINDS))

    def test_given_names_when_making_randomizer_then_matching_type(self):
        self.assertIsInstance(make_randomizer("uniform", 1), UniformRandom)
        nes = make_randomizer("nes", 1)
        self.assertIsInstance(nes, NESRandom)
        self.assertEqual(nes.avoid_szo_first, CONFIG["NES_FIRST_PIECE_AVOID_SZO"])

    def test_given_unknown_name_when_making_randomizer_then_value_error(self):
        with self.assertRaises(ValueError):
            make_randomizer("bag")


if __name__ == "__main__":
    unittest.main()
