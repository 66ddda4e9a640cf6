"""Utility functions for mendel."""

import math
from typing import Callable


class NamedCallable:
    """
    A predicate carrying its own display name.

    The name is exposed as __name__, so log records and anything else
    that reads function names treat it like a def'd function.
    """

    def __init__(self, fn: Callable[..., bool], name: str):
        self.fn = fn
        self.__name__ = name

    @property
    def name(self) -> str:
        return self.__name__

    def __call__(self, *args, **kwargs):
        return self.fn(*args, **kwargs)

    def __repr__(self):
        return f"<predicate {self.__name__}>"


def named(name: str) -> Callable[[Callable[..., bool]], NamedCallable]:
    """
    Decorator form of NamedCallable.

    Example:
        @named("no blue balls")
        def no_blue(balls):
            return all(b.color != "blue" for b in balls)
    """
    def wrap(fn: Callable[..., bool]) -> NamedCallable:
        return NamedCallable(fn, name)
    return wrap


def predicate_name(fn) -> str:
    """
    Short display name for a predicate, used in log records.

    Example:
        predicate_name(NamedCallable(f, "is_even"))  -> "is_even"
        predicate_name(lambda v: v > 2)              -> "λ"
        predicate_name(str.isupper)                  -> "isupper"
    """
    name = getattr(fn, "__name__", None)
    if name == "<lambda>":
        return "λ"
    return name or repr(fn)


def standard_error(p: float, n: int) -> float:
    """
    Standard error of a probability estimated from n independent trials.

    Estimation calls report only the ratio; use this to bound it:
        p = bag.one(pred)
        tolerance = 3 * standard_error(p, bag.max_sims)
    """
    if n <= 0:
        raise ValueError("n must be > 0")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be in [0, 1], got {p}")
    return math.sqrt(p * (1 - p) / n)
