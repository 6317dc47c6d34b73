"""7-bag randomizer"""
import logging
import random
from typing import List, Optional

from termtris_piece import KINDS

log = logging.getLogger(__name__)


def shuffle(bag: list, rng) -> None:
    """Fisher-Yates shuffle in place; rng only needs randrange(n)."""
    for i in range(len(bag) - 1, 0, -1):
        j = rng.randrange(i + 1)
        bag[i], bag[j] = bag[j], bag[i]


class PieceBag:
    """Deals every kind exactly once per cycle, reshuffling when exhausted."""

    def __init__(self, rng: Optional[random.Random] = None, kinds: List[str] = KINDS):
        self.rng = rng if rng is not None else random.Random()
        self.bag = list(kinds)
        shuffle(self.bag, self.rng)
        self.cursor = 0

    def next_piece(self) -> str:
        if self.cursor >= len(self.bag):
            shuffle(self.bag, self.rng)
            self.cursor = 0
            log.debug("bag reshuffled: %s", "".join(self.bag))
        kind = self.bag[self.cursor]
        self.cursor += 1
        return kind
