from .errors import InvalidInput, SampleTooLarge, MissingVertexTypes
from .args import match_arg
from .vertex_types import VertexAttributeSource, resolve_vertex_types, TYPE_ATTRIBUTE

__all__ = [
    "InvalidInput",
    "SampleTooLarge",
    "MissingVertexTypes",
    "match_arg",
    "VertexAttributeSource",
    "resolve_vertex_types",
    "TYPE_ATTRIBUTE",
]
