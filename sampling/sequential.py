"""
Sequential random sampling of an integer interval (Vitter, 1987).

Draws `count` distinct integers uniformly without replacement from
[low, high] and emits them in increasing order, in O(count) expected time
regardless of the interval width.

Method D skips over unselected candidates by drawing the skip length S from
its exact distribution (rejection against a continuous envelope). It is used
while alpha_inverse * n < N, where n is the remaining sample size and N the
remaining population; once the ratio n/N is large, Method A (sequential
skip search) is cheaper and finishes the sample.

Reference: J. S. Vitter, "An Efficient Algorithm for Sequential Random
Sampling", ACM Trans. Math. Softw. 13(1), 58-67.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from validation.errors import InvalidInput, SampleTooLarge

logger = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass
class SamplerConfig:
    # Vitter's recommended switch-over constant between Methods D and A
    alpha_inverse: int = 13

    def __post_init__(self) -> None:
        if int(self.alpha_inverse) < 1:
            raise ValueError("alpha_inverse must be >= 1")


def _require_int(name: str, val: object) -> int:
    if isinstance(val, bool) or not isinstance(val, (int, np.integer)):
        raise TypeError(f"{name} must be an integer; got type {type(val).__name__}.")
    return int(val)


def _open_unit(rng: np.random.Generator) -> float:
    """Uniform draw on the open interval (0, 1)."""
    while True:
        u = float(rng.random())
        if u > 0.0:
            return u


def _method_a(rng: np.random.Generator, low: int, high: int, n: int, out: List[int]) -> None:
    """Append a sorted sample of size n from [low, high] using Vitter's Method A."""
    N = float(high - low + 1)
    top = N - n
    cur = low - 1
    while n >= 2:
        v = _open_unit(rng)
        s = 1
        quot = top / N
        while quot > v:
            s += 1
            top -= 1.0
            N -= 1.0
            quot = quot * top / N
        cur += s
        out.append(cur)
        N -= 1.0
        n -= 1
    # last element: uniform over the N remaining candidates
    s = int(math.floor(round(N) * rng.random()))
    out.append(cur + s + 1)


def _method_d(
    rng: np.random.Generator,
    low: int,
    high: int,
    n: int,
    alpha_inverse: int,
    out: List[int],
) -> None:
    """Append a sorted sample of size n from [low, high] using Vitter's Method D."""
    N = high - low + 1
    ninv = 1.0 / n
    vprime = math.exp(math.log(_open_unit(rng)) * ninv)
    qu1 = N - n + 1
    threshold = alpha_inverse * n
    cur = low - 1

    while n > 1 and threshold < N:
        nmin1inv = 1.0 / (n - 1)
        while True:
            # Step D2: draw X from the envelope until S = floor(X) is admissible
            while True:
                x = N * (1.0 - vprime)
                s = int(math.floor(x))
                if s < qu1:
                    break
                vprime = math.exp(math.log(_open_unit(rng)) * ninv)
            u = _open_unit(rng)
            y1 = math.exp(math.log(u * N / qu1) * nmin1inv)
            vprime = y1 * (1.0 - x / N) * (qu1 / (qu1 - s))
            if vprime <= 1.0:
                # squeeze test accepted; vprime is already a valid next draw
                break

            # Step D3: exact acceptance test
            y2 = 1.0
            top = N - 1.0
            if n - 1 > s:
                bottom = float(N - n)
                limit = N - s
            else:
                bottom = float(N - s - 1)
                limit = qu1
            for _ in range(N - 1, limit - 1, -1):
                y2 = y2 * top / bottom
                top -= 1.0
                bottom -= 1.0
            if N / (N - x) >= y1 * math.exp(math.log(y2) * nmin1inv):
                vprime = math.exp(math.log(_open_unit(rng)) * nmin1inv)
                break
            vprime = math.exp(math.log(_open_unit(rng)) * ninv)

        cur += s + 1
        out.append(cur)
        N -= s + 1
        n -= 1
        ninv = nmin1inv
        qu1 -= s
        threshold -= alpha_inverse

    if n > 1:
        logger.debug("switching to method A with n=%d remaining out of N=%d", n, N)
        _method_a(rng, cur + 1, high, n, out)
    else:
        # rounding can push vprime to exactly 1.0
        s = min(int(math.floor(N * vprime)), N - 1)
        out.append(cur + s + 1)


def sample_sequence(
    low: int,
    high: int,
    count: int,
    rng: Optional[np.random.Generator] = None,
    cfg: Optional[SamplerConfig] = None,
) -> np.ndarray:
    """
    Draw `count` distinct integers uniformly from [low, high], sorted ascending.

    Every count-subset of the interval is equally likely. Expected running
    time is O(count), independent of high - low.

    Parameters
    ----------
    low, high : int
        Inclusive interval bounds, low <= high.
    count : int
        Sample size, 0 <= count <= high - low + 1.
    rng : np.random.Generator, optional
        Source of randomness; a fresh default_rng() is used when omitted.
    cfg : SamplerConfig, optional
        Method switch-over tuning.

    Returns
    -------
    np.ndarray
        Strictly increasing int64 array of length `count`.

    Raises
    ------
    TypeError
        If any of low, high, count is not an integer.
    InvalidInput
        If low or high is outside the int64 range, low > high or count < 0.
    SampleTooLarge
        If count > high - low + 1.
    """
    _cfg = cfg or SamplerConfig()
    lo = _require_int("low", low)
    hi = _require_int("high", high)
    k = _require_int("count", count)
    for name, val in (("low", lo), ("high", hi)):
        if not _INT64_MIN <= val <= _INT64_MAX:
            raise InvalidInput(f"{name} must fit in int64, got {val}")
    if lo > hi:
        raise InvalidInput(f"low must not exceed high, got low={lo} high={hi}")
    if k < 0:
        raise InvalidInput(f"count must be >= 0, got {k}")
    population = hi - lo + 1
    if k > population:
        raise SampleTooLarge("length too big for this interval")

    if k == 0:
        return np.empty(0, dtype=np.int64)
    if k == population:
        return np.arange(k, dtype=np.int64) + np.int64(lo)

    _rng = rng if rng is not None else np.random.default_rng()
    out: List[int] = []
    if int(_cfg.alpha_inverse) * k < population:
        logger.debug("method D: count=%d population=%d", k, population)
        _method_d(_rng, lo, hi, k, int(_cfg.alpha_inverse), out)
    else:
        logger.debug("method A: count=%d population=%d", k, population)
        _method_a(_rng, lo, hi, k, out)
    return np.asarray(out, dtype=np.int64)


__all__ = ["SamplerConfig", "sample_sequence"]
