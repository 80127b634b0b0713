"""Immutable document tree nodes. Checkers only ever read these."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ScalarType(StrEnum):
    INTEGER = "integer"
    TEXT = "text"
    OTHER = "other"  # bool, float, null, timestamp, ...


@dataclass(frozen=True)
class ScalarNode:
    """A leaf value: raw source text plus the type the parser resolved."""

    value: str
    type: ScalarType = ScalarType.TEXT
    line: int = 0  # 1-based, 0 when unknown

    @property
    def is_integer(self) -> bool:
        return self.type is ScalarType.INTEGER


@dataclass(frozen=True)
class MappingNode:
    """Ordered key/value pairs. Duplicate keys are kept as they appear."""

    pairs: tuple[tuple[Node, Node], ...] = field(default_factory=tuple)
    line: int = 0


@dataclass(frozen=True)
class SequenceNode:
    """Ordered list of child nodes."""

    items: tuple[Node, ...] = field(default_factory=tuple)
    line: int = 0


Node = ScalarNode | MappingNode | SequenceNode


def get_value(node: Node | None, key: str) -> Node | None:
    """Return the value stored under ``key`` in a mapping node.

    Anything other than a mapping yields ``None``. When the source repeats a
    key, the first occurrence wins.
    """
    if not isinstance(node, MappingNode):
        return None
    for key_node, value_node in node.pairs:
        if isinstance(key_node, ScalarNode) and key_node.value == key:
            return value_node
    return None


def scalar_text(node: Node) -> str:
    """Raw text of a scalar; collections have no text and give ``""``."""
    if isinstance(node, ScalarNode):
        return node.value
    return ""
