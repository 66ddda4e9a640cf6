"""Error types raised by mendel."""


class MendelError(Exception):
    """Base class for all mendel errors."""


class EmptyPopulation(MendelError):
    """An estimation was requested from a Bag holding no items."""


class InvalidSampleSize(MendelError, ValueError):
    """sample_size is zero or larger than the population."""

    def __init__(self, sample_size: int, population: int):
        self.sample_size = sample_size
        self.population = population
        super().__init__(
            f"sample_size must satisfy 0 < sample_size <= {population}, "
            f"got {sample_size}"
        )


class InvalidRange(MendelError, ValueError):
    """from_range was given max <= min."""

    def __init__(self, min: int, max: int):
        self.min = min
        self.max = max
        super().__init__(f"Empty or inverted range [{min}, {max})")


class InvalidConfiguration(MendelError, ValueError):
    """MENDEL_MAX_SIMS could not be parsed as a positive integer."""
