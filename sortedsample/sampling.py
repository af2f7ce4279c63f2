"""Multinomial sampling with replacement in linear time, with sorted output.

Weights need not be normalised. Indices are produced in ascending order.
Sums over weights and exponential draws use Kahan compensation, so that
prefix sums stay accurate however many terms there are.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol

_U32_MAX = 2**32 - 1


class RandomSource(Protocol):
    """What the samplers need from a random number generator."""

    def random(self) -> float: ...

    def expovariate(self, lambd: float) -> float: ...


class _KahanSum:
    """Running sum with Kahan compensation."""

    __slots__ = ("total", "_compensation")

    def __init__(self, start: float = 0.0) -> None:
        self.total = start
        self._compensation = 0.0

    def add(self, x: float) -> None:
        y = x - self._compensation
        t = self.total + y
        self._compensation = (t - self.total) - y
        self.total = t


def _check_count(n: int, what: str = "n") -> int:
    n = operator.index(n)
    if not 0 <= n <= _U32_MAX:
        raise ValueError(f"{what} must be between 0 and {_U32_MAX}, got {n}")
    return n


def _as_weights(weights: Iterable[float]) -> tuple[float, ...]:
    values = tuple(float(w) for w in weights)
    if not values:
        raise ValueError("weights must be nonempty")
    if len(values) > _U32_MAX:
        raise ValueError("number of weights must fit in 32 bits")
    return values


def _total_weight(weights: Sequence[float]) -> float:
    """Kahan sum of the weights in index order, after validating each one."""
    total = _KahanSum()
    for w in weights:
        if not (math.isfinite(w) and w >= 0.0):
            raise ValueError(f"weight must be finite and >= 0, got {w!r}")
        total.add(w)
    if not total.total > 0.0:
        raise ValueError("total weight must be strictly positive")
    return total.total


def first_uniform(rng: RandomSource, k: int) -> float:
    """Draw the minimum of ``k`` iid Uniform(0, 1) variates, i.e. Beta(1, k).

    Uses the inverse CDF ``1 - (1 - u) ** (1 / k)``; constant time in ``k``.
    """
    k = operator.index(k)
    if k < 1:
        raise ValueError("k must be at least 1")
    u = rng.random()
    if k == 1:
        return u
    return 1.0 - (1.0 - u) ** (1.0 / k)


class SortedUniforms(Iterator[float]):
    """Iterator over ``n`` Uniform(0, 1) variates in ascending order, in O(n).

    The values are distributed as the order statistics of ``n`` iid
    uniforms, produced by the spacings recurrence
    ``U(i) = U(i-1) + (1 - U(i-1)) * Z`` with ``Z ~ Beta(1, n - i + 1)``.
    """

    def __init__(self, rng: RandomSource, n: int) -> None:
        self._rng = rng
        self._remaining = _check_count(n)
        self._last = 0.0

    def __iter__(self) -> SortedUniforms:
        return self

    def __next__(self) -> float:
        if self._remaining == 0:
            raise StopIteration
        spacing = first_uniform(self._rng, self._remaining)
        self._last += (1.0 - self._last) * spacing
        self._remaining -= 1
        return self._last

    def __len__(self) -> int:
        return self._remaining


class SampleIndices(Iterator[int]):
    """Iterator over ``n`` indices into ``weights``, drawn with replacement.

    Each index is chosen with probability proportional to its weight;
    indices come out in ascending order. The weights are validated when
    the iterator is created, not when it is first advanced.
    """

    def __init__(self, rng: RandomSource, weights: Iterable[float], n: int) -> None:
        self._weights = _as_weights(weights)
        n = _check_count(n)
        self._total = _total_weight(self._weights)
        self._sorted = SortedUniforms(rng, n)
        self._index = 0
        # The merge walks the weights in the same order as the total was
        # summed, so once every weight is consumed the two agree exactly.
        self._cumulative = _KahanSum(self._weights[0])

    def __iter__(self) -> SampleIndices:
        return self

    def __next__(self) -> int:
        u = next(self._sorted)
        target = self._total * u
        while target > self._cumulative.total:
            self._index += 1
            self._cumulative.add(self._weights[self._index])
        return self._index

    def __len__(self) -> int:
        return len(self._sorted)


def sample_indices(rng: RandomSource, weights: Iterable[float], n: int) -> SampleIndices:
    """Return an iterator of ``n`` weighted indices in ascending order.

    Runs in O(len(weights) + n) time. Raises ``ValueError`` at once if the
    weights are empty, contain a negative or non-finite value, or sum to zero.
    """
    return SampleIndices(rng, weights, n)


def sample_indices_buffered(rng: RandomSource, weights: Iterable[float], n: int) -> list[int]:
    """Return ``n`` weighted indices in ascending order as a list.

    Same distribution as :func:`sample_indices`, but the sorted uniforms
    come from normalised partial sums of ``n + 1`` exponential draws
    instead of one power per index.
    """
    values = _as_weights(weights)
    n = _check_count(n)
    if n == 0:
        return []
    total = _total_weight(values)

    draws = [rng.expovariate(1.0) for _ in range(n)]
    grand = _KahanSum()
    for e in draws:
        grand.add(e)
    # The extra draw only contributes to the normaliser, so S_n / G < 1.
    grand.add(rng.expovariate(1.0))

    inv_grand = 1.0 / grand.total
    partial = _KahanSum()
    cumulative = _KahanSum(values[0])
    index = 0
    out: list[int] = []
    for e in draws:
        partial.add(e)
        u = partial.total * inv_grand
        target = min(total * u, total)
        while target > cumulative.total:
            index += 1
            cumulative.add(values[index])
        out.append(index)
    return out