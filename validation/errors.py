from __future__ import annotations


class InvalidInput(ValueError):
    """Malformed size, width, shape or choice argument."""


class SampleTooLarge(InvalidInput):
    """Requested sample size exceeds the number of integers in the interval."""


class MissingVertexTypes(ValueError):
    """No vertex types were supplied and the graph carries no ``type`` attribute."""


__all__ = ["InvalidInput", "SampleTooLarge", "MissingVertexTypes"]
