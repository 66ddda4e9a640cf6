"""The Bag population container and its Monte Carlo estimators."""

import logging
import numbers
from typing import Any, Callable, Iterable, List, Optional

import numpy as np

from .config import get_default_max_sims
from .errors import EmptyPopulation, InvalidRange, InvalidSampleSize
from .utils import predicate_name

logger = logging.getLogger(__name__)

# Upper bound on the number of indices one() holds in memory at a time
DRAW_CHUNK = 100_000


def _check_max_sims(max_sims: int) -> int:
    if isinstance(max_sims, bool) or not isinstance(max_sims, numbers.Integral):
        raise TypeError(
            f"max_sims must be an integer, got {type(max_sims).__name__} {max_sims!r}"
        )
    if max_sims <= 0:
        raise ValueError(f"max_sims must be > 0, got {max_sims}")
    return int(max_sims)


class Bag:
    """
    A fixed population of items to draw from.

    Probabilities are not derived analytically: every estimation call
    runs max_sims independent trials against the unmodified population
    and returns the fraction of trials in which the predicate held.
    Accuracy therefore scales with max_sims, with a standard error of
    roughly sqrt(p * (1 - p) / max_sims).

    Items are held by reference in a tuple and are never copied or
    mutated, so a Bag may be shared read-only between threads. Each
    estimation call draws from its own random generator.
    """

    def __init__(self, items: Iterable[Any], max_sims: Optional[int] = None):
        self._items = tuple(items)
        if max_sims is None:
            max_sims = get_default_max_sims()
        self.max_sims = _check_max_sims(max_sims)

    @classmethod
    def from_range(cls, min: int, max: int, max_sims: Optional[int] = None) -> "Bag":
        """
        Build a Bag of the integers in [min, max), ascending.

        Example:
            Bag.from_range(1, 11)  # 1 through 10

        Raises InvalidRange if max <= min.
        """
        if max <= min:
            raise InvalidRange(min, max)
        return cls(range(min, max), max_sims=max_sims)

    @classmethod
    def from_vec(cls, items: Iterable[Any], max_sims: Optional[int] = None) -> "Bag":
        """
        Build a Bag from any sequence, keeping order and duplicates.

        Example:
            Bag.from_vec(["spider", "fish", "tiger", "pigeon"])
        """
        return cls(items, max_sims=max_sims)

    @property
    def items(self) -> tuple:
        return self._items

    def set_max_sims(self, max_sims: int) -> None:
        """Set the number of simulations used by later one()/sample() calls."""
        self.max_sims = _check_max_sims(max_sims)

    def one(self, predicate: Callable[[Any], bool]) -> float:
        """
        Probability that predicate holds for a single random item.

        Each of the max_sims trials picks one item uniformly, with
        replacement. Exceptions raised by the predicate abort the call.

        Example:
            bag = Bag.from_range(1, 11)
            bag.one(lambda v: v % 2 == 0)  # ~0.5
        """
        if not self._items:
            raise EmptyPopulation("Cannot draw from an empty Bag")

        n = self.max_sims
        population = len(self._items)
        debug = logger.isEnabledFor(logging.DEBUG)
        if debug:
            logger.debug(
                "one(%s): %d sims over %d items",
                predicate_name(predicate), n, population,
            )

        rng = np.random.default_rng()
        picks_in_favor = 0
        for start in range(0, n, DRAW_CHUNK):
            indices = rng.integers(0, population, size=min(DRAW_CHUNK, n - start))
            for idx in indices:
                if predicate(self._items[idx]):
                    picks_in_favor += 1

        p = picks_in_favor / n
        if debug:
            logger.debug("one(%s) = %f", predicate_name(predicate), p)
        return p

    def sample(self, sample_size: int, predicate: Callable[[List[Any]], bool]) -> float:
        """
        Probability that predicate holds for sample_size items drawn together.

        Each trial draws sample_size distinct positions without
        replacement; the full population is restored before the next
        trial. The predicate receives the drawn items as a list whose
        order carries no meaning.

        Example:
            Odds of getting a 2 in your first 3 picks from 1 - 10:

            bag = Bag.from_range(1, 11)
            bag.sample(3, lambda values: 2 in values)  # ~0.3

        Raises InvalidSampleSize unless 0 < sample_size <= len(bag).
        """
        if not self._items:
            raise EmptyPopulation("Cannot draw from an empty Bag")
        population = len(self._items)
        if sample_size <= 0 or sample_size > population:
            raise InvalidSampleSize(sample_size, population)

        n = self.max_sims
        debug = logger.isEnabledFor(logging.DEBUG)
        if debug:
            logger.debug(
                "sample(%d, %s): %d sims over %d items",
                sample_size, predicate_name(predicate), n, population,
            )

        rng = np.random.default_rng()
        picks_in_favor = 0
        for _ in range(n):
            drawn = rng.choice(population, size=sample_size, replace=False)
            if predicate([self._items[idx] for idx in drawn]):
                picks_in_favor += 1

        p = picks_in_favor / n
        if debug:
            logger.debug("sample(%d, %s) = %f", sample_size, predicate_name(predicate), p)
        return p

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Bag(n={len(self._items)}, max_sims={self.max_sims})"
