"""Generic document tree consumed by the rule checkers."""

from podvalidator.tree.nodes import (
    MappingNode,
    Node,
    ScalarNode,
    ScalarType,
    SequenceNode,
    get_value,
    scalar_text,
)

__all__ = [
    "MappingNode",
    "Node",
    "ScalarNode",
    "ScalarType",
    "SequenceNode",
    "get_value",
    "scalar_text",
]
