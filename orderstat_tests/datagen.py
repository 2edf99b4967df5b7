'''
seeded test data for the selection suites.
'''

import numpy as np
from faker import Faker
from typing import Any, Dict, List, Optional


class Generator:
    """reproducible source of numbers, words and records."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def integers(self, count: int, low: int = 0, high: int = 50) -> List[int]:
        """integers in [low, high); duplicates are likely for small ranges"""
        # convert numpy scalars to native python ints
        return [int(x) for x in self._rng.integers(low, high, size=count)]

    def floats(self, count: int, low: float = -100.0, high: float = 100.0) -> List[float]:
        return [float(x) for x in self._rng.uniform(low, high, size=count)]

    def words(self, count: int) -> List[str]:
        return [self._fake.word() for _ in range(count)]

    def people(self, count: int) -> List[Dict[str, Any]]:
        return [
            {
                'id': i,
                'name': self._fake.first_name(),
                'age': self._fake.pyint(min_value=18, max_value=65),
                'city': self._fake.city(),
            }
            for i in range(count)
        ]


def generate(seed: Optional[int] = None) -> Generator:
    return Generator(seed)
