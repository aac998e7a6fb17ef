
"""Piece randomizers: uniform and NES-style"""
import random
from typing import Optional
from tetris_config import CONFIG
from tetris_piece import KINDS, I, J, L, O, S, T, Z


class UniformRandom:
    """Every draw picks one of the seven kinds with equal probability."""
    IDS = sorted(KINDS)

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_id(self) -> int:
        return self.rng.choice(self.IDS)


class NESRandom:
    PIECES = [I, J, L, O, S, T, Z]

    def __init__(self, seed: Optional[int] = None, avoid_szo_first: bool = True):
        if seed is None:
            seed = random.getrandbits(32)
        self.state = seed & 0xFFFFFFFF
        self.prev_index = None
        self.avoid_szo_first = avoid_szo_first

    def _lcg_next(self):
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self):
        return (self._lcg_next() >> 16) & 0x7FFF

    def _rand_choice7(self):
        return self._rand() % 7

    def next_id(self) -> int:
        cand = self._rand_choice7()
        if self.prev_index is None and self.avoid_szo_first:
            bad = {self.PIECES.index(S), self.PIECES.index(Z), self.PIECES.index(O)}
            while cand in bad:
                cand = self._rand_choice7()
        # one coin-flip reroll on a repeat
        if self.prev_index is not None and cand == self.prev_index:
            if (self._rand() & 1) == 1:
                cand = self._rand_choice7()
        self.prev_index = cand
        return self.PIECES[cand]


def make_randomizer(name: Optional[str] = None, seed: Optional[int] = None):
    name = name or CONFIG["RANDOMIZER"]
    if seed is None:
        seed = CONFIG["SEED"]
    if name == "uniform":
        return UniformRandom(seed)
    if name == "nes":
        return NESRandom(seed, CONFIG["NES_FIRST_PIECE_AVOID_SZO"])
    raise ValueError(f"unknown randomizer {name!r}")
