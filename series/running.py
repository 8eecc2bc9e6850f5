"""
Sliding-window (running) mean of a numeric sequence.

For a sequence v of length n and a window width w (1 <= w <= n) the output m
has length n - w + 1 with m[i] = mean(v[i : i + w]).

Strategies (RunningMeanConfig.strategy)
- "window":  every window is averaged independently. O(n*w) arithmetic, but
             vectorised, and each value is exactly the mean of its slice.
- "running": a running sum (add the entering element, subtract the leaving
             one). O(n). The sum is recomputed from scratch every
             `resync_every` windows to bound floating-point drift, so values
             can differ from "window" in the last few ulps.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from validation.errors import InvalidInput

_STRATEGIES = ("window", "running")


@dataclass
class RunningMeanConfig:
    strategy: str = "window"
    resync_every: int = 1024

    def __post_init__(self) -> None:
        if self.strategy not in _STRATEGIES:
            raise ValueError(f"strategy must be one of {_STRATEGIES}, got {self.strategy!r}")
        if int(self.resync_every) < 1:
            raise ValueError("resync_every must be >= 1")


def _require_width(width: object) -> int:
    if isinstance(width, bool) or not isinstance(width, (int, np.integer)):
        raise TypeError(f"width must be an integer; got type {type(width).__name__}.")
    return int(width)


def _window_means(v: np.ndarray, w: int) -> np.ndarray:
    windows = np.lib.stride_tricks.sliding_window_view(v, w)
    return windows.mean(axis=1)


def _running_means(v: np.ndarray, w: int, resync_every: int) -> np.ndarray:
    n_out = v.shape[0] - w + 1
    out = np.empty(n_out, dtype=np.float64)
    for start in range(0, n_out, resync_every):
        stop = min(start + resync_every, n_out)
        # exact sum for the first window of the block, then incremental deltas
        deltas = np.empty(stop - start, dtype=np.float64)
        deltas[0] = v[start:start + w].sum()
        if stop - start > 1:
            deltas[1:] = v[start + w:stop + w - 1] - v[start:stop - 1]
        out[start:stop] = np.cumsum(deltas)
    return out / float(w)


def running_mean(
    sequence: Sequence[float],
    width: int,
    cfg: Optional[RunningMeanConfig] = None,
) -> np.ndarray:
    """
    Compute the running mean of `sequence` over windows of `width` elements.

    Parameters
    ----------
    sequence : Sequence[float]
        1-D numeric sequence; coerced to float64.
    width : int
        Window width, 1 <= width <= len(sequence).
    cfg : RunningMeanConfig, optional
        Strategy selection; defaults to per-window averaging.

    Returns
    -------
    np.ndarray
        Fresh float64 array of length len(sequence) - width + 1.

    Raises
    ------
    TypeError
        If width is not an integer.
    InvalidInput
        If sequence is not 1-D, width <= 0 or width > len(sequence).
    """
    _cfg = cfg or RunningMeanConfig()
    w = _require_width(width)
    v = np.asarray(sequence, dtype=np.float64)
    if v.ndim != 1:
        raise InvalidInput(f"sequence must be one-dimensional, got shape {v.shape}")
    if w <= 0:
        raise InvalidInput(f"width must be positive, got {w}")
    if v.shape[0] < w:
        raise InvalidInput("Vector too short for this width.")

    if _cfg.strategy == "running":
        return _running_means(v, w, int(_cfg.resync_every))
    return _window_means(v, w)


__all__ = ["RunningMeanConfig", "running_mean"]
