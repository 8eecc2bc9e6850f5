"""
Resolution of the vertex-type vector used by bipartite graph routines.

The graph is only ever touched through the narrow VertexAttributeSource
protocol, so any object that can answer "is there a vertex attribute named
X" and "give me its values" works here.

Coercion follows R's as.logical:
- bool / numpy.bool_ are kept as-is
- numbers: non-zero -> True, zero -> False, NaN -> missing
- strings: "TRUE"/"true"/"True"/"T" -> True, "FALSE"/"false"/"False"/"F" -> False,
  anything else -> missing
- None -> missing
Any missing entry is rejected.
"""
from __future__ import annotations

import logging
import math
from numbers import Number
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from .errors import InvalidInput, MissingVertexTypes

logger = logging.getLogger(__name__)

TYPE_ATTRIBUTE = "type"

_TRUE_STRINGS = frozenset({"TRUE", "true", "True", "T"})
_FALSE_STRINGS = frozenset({"FALSE", "false", "False", "F"})


@runtime_checkable
class VertexAttributeSource(Protocol):
    def has_vertex_attribute(self, name: str) -> bool: ...

    def vertex_attribute(self, name: str) -> Sequence[Any]: ...


def _coerce_bool(value: Any) -> Optional[bool]:
    """Return the boolean for `value`, or None when it maps to a missing value."""
    if value is None:
        return None
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
        return None
    if isinstance(value, Number):
        f = float(value)  # type: ignore[arg-type]
        if math.isnan(f):
            return None
        return f != 0.0
    return None


def resolve_vertex_types(
    types: Optional[Sequence[Any]],
    graph: Optional[VertexAttributeSource],
    required: bool = True,
) -> Optional[np.ndarray]:
    """
    Resolve the vertex types for `graph`.

    When `types` is None and the graph carries a ``type`` vertex attribute,
    that attribute is used. Non-boolean vectors are coerced with a logged
    warning.

    Returns
    -------
    np.ndarray | None
        A fresh boolean array, or None when nothing was available and
        `required` is False.

    Raises
    ------
    InvalidInput
        If any entry is None, NaN or a string that is not a boolean literal.
    MissingVertexTypes
        If no types are available and `required` is True.
    """
    if types is None and graph is not None and graph.has_vertex_attribute(TYPE_ATTRIBUTE):
        types = graph.vertex_attribute(TYPE_ATTRIBUTE)

    if types is None:
        if required:
            raise MissingVertexTypes(
                "Not a bipartite graph, supply `types` argument "
                "or add a vertex attribute named `type`"
            )
        return None

    arr = np.asarray(types)
    if arr.dtype == np.bool_:
        return arr.astype(bool).ravel()

    logger.warning("vertex types converted to boolean")
    coerced = [_coerce_bool(v) for v in arr.astype(object).ravel()]
    if any(c is None for c in coerced):
        raise InvalidInput("None/NaN is not allowed in vertex types")
    return np.array(coerced, dtype=bool)


__all__ = ["VertexAttributeSource", "resolve_vertex_types", "TYPE_ATTRIBUTE"]
