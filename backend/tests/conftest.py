"""
Shared fixtures: a scripted random source so rule outcomes are deterministic.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class ScriptedRandom(random.Random):
    """
    random.Random whose draws come from scripted lists.

    - random(): pops ``floats``; defaults to 0.99 (no snake turns)
    - randrange(): pops ``ints``; defaults to 0
    - choice(): pops ``choices`` (must be in the sequence); defaults to seq[0]

    Every sequence passed to choice() is recorded in ``seen_choices``.
    """

    def __init__(self, floats=(), ints=(), choices=()):
        super().__init__(0)
        self.floats = list(floats)
        self.ints = list(ints)
        self.choices = list(choices)
        self.seen_choices = []

    def random(self):
        return self.floats.pop(0) if self.floats else 0.99

    def randrange(self, *args, **kwargs):
        return self.ints.pop(0) if self.ints else 0

    def choice(self, seq):
        self.seen_choices.append(list(seq))
        if self.choices:
            pick = self.choices.pop(0)
            assert pick in seq, f"{pick!r} not among {seq!r}"
            return pick
        return seq[0]


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom
