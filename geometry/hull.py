"""Planar convex hull via Andrew's monotone chain."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np

from validation.errors import InvalidInput

Point = Tuple[float, float]


@dataclass(frozen=True)
class HullResult:
    hull_indices: np.ndarray  # int64 indices into the input, shape (h,)
    hull_coords: np.ndarray   # float64 coordinates, shape (h, 2)

    def __len__(self) -> int:
        return int(self.hull_indices.shape[0])


def _cross(o: np.ndarray, a: np.ndarray, b: np.ndarray) -> float:
    return float((a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0]))


def _as_points(points: Union[Sequence[Point], np.ndarray]) -> np.ndarray:
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        return pts.reshape(0, 2)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidInput(f"points must have shape (n, 2), got {pts.shape}")
    if not np.all(np.isfinite(pts)):
        raise InvalidInput("points must have finite coordinates")
    return pts


def _unique_sorted(pts: np.ndarray) -> np.ndarray:
    """Indices sorted by (x, y), keeping only the first index of each location."""
    order = np.lexsort((pts[:, 1], pts[:, 0]))
    keep: List[int] = []
    for idx in order:
        if keep and pts[keep[-1], 0] == pts[idx, 0] and pts[keep[-1], 1] == pts[idx, 1]:
            continue
        keep.append(int(idx))
    return np.asarray(keep, dtype=np.int64)


def _chain(pts: np.ndarray, order: Sequence[int]) -> List[int]:
    chain: List[int] = []
    for idx in order:
        # strict left turn required, so collinear points are dropped
        while len(chain) >= 2 and _cross(pts[chain[-2]], pts[chain[-1]], pts[idx]) <= 0.0:
            chain.pop()
        chain.append(int(idx))
    return chain


def convex_hull(points: Union[Sequence[Point], np.ndarray]) -> HullResult:
    """
    Compute the convex hull of a planar point set.

    Vertices are returned counter-clockwise starting at the lowest-x
    (then lowest-y) point. Points lying on a hull edge are excluded.
    Duplicate locations are collapsed to their first input index.

    Degenerate inputs
    - no points: empty result
    - one or two distinct points without duplicates: returned in input order
    - all points collinear: the two extreme points
    """
    pts = _as_points(points)
    n = pts.shape[0]
    order = _unique_sorted(pts)

    if n <= 2 and order.shape[0] == n:
        idx = np.arange(n, dtype=np.int64)
    elif order.shape[0] <= 2:
        idx = order
    else:
        lower = _chain(pts, order)
        upper = _chain(pts, order[::-1])
        idx = np.asarray(lower[:-1] + upper[:-1], dtype=np.int64)

    return HullResult(hull_indices=idx, hull_coords=pts[idx].copy())


__all__ = ["HullResult", "convex_hull", "Point"]
