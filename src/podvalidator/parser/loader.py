"""YAML loader that builds the line-annotated node tree."""

from __future__ import annotations

import logging
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml import nodes as yaml_nodes
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from podvalidator.exceptions import DocumentLoadError, DocumentReadError, YAMLSafetyError
from podvalidator.tree.nodes import MappingNode, Node, ScalarNode, ScalarType, SequenceNode

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 64

_INT_TAGS = frozenset({"tag:yaml.org,2002:int", "!!int"})
_STR_TAGS = frozenset({"tag:yaml.org,2002:str", "!!str"})


class TrackedLoader:
    """Parses YAML text into :mod:`podvalidator.tree.nodes` objects.

    Uses ruamel.yaml's composer, which keeps the start mark and the resolved
    tag of every node. Aliases are expanded into independent copies so the
    result is a strict tree.
    """

    def __init__(
        self,
        max_document_size: int = _MAX_DOCUMENT_SIZE,
        max_node_count: int = _MAX_NODE_COUNT,
        max_depth: int = _MAX_DEPTH,
    ) -> None:
        self._yaml = YAML()
        self._max_document_size = max_document_size
        self._max_node_count = max_node_count
        self._max_depth = max_depth

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> Node | None:
        """Read and parse a YAML file. ``None`` means the document is empty."""
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise DocumentReadError(f"cannot read {path}: {exc.strerror or exc}") from exc
        return self.load_bytes(data)

    def load_bytes(self, data: bytes) -> Node | None:
        try:
            content = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise DocumentLoadError(f"document is not valid UTF-8: {exc.reason}") from exc
        return self.load_string(content)

    def load_string(self, content: str) -> Node | None:
        """Parse YAML from a string. ``None`` means the document is empty."""
        if len(content) > self._max_document_size:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self._max_document_size:,} limit)"
            )
        # Only the first document of a stream is validated.
        documents = self._yaml.compose_all(content)
        try:
            root = next(documents, None)
        except MarkedYAMLError as exc:
            raise DocumentLoadError(_describe(exc)) from exc
        except YAMLError as exc:
            raise DocumentLoadError(f"yaml: {exc}") from exc
        finally:
            documents.close()
        if root is None:
            logger.debug("document has no root node")
            return None
        return _Converter(self._max_node_count, self._max_depth).convert(root)


class _Converter:
    """One-shot translation of a ruamel node graph, enforcing the limits."""

    def __init__(self, max_node_count: int, max_depth: int) -> None:
        self._max_node_count = max_node_count
        self._max_depth = max_depth
        self._count = 0

    def convert(self, node: yaml_nodes.Node, depth: int = 0) -> Node:
        self._count += 1
        if self._count > self._max_node_count:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum node count ({self._max_node_count:,})"
            )
        if depth > self._max_depth:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum nesting depth ({self._max_depth})"
            )

        line = node.start_mark.line + 1 if node.start_mark is not None else 0
        if isinstance(node, yaml_nodes.MappingNode):
            pairs = tuple(
                (self.convert(key, depth + 1), self.convert(value, depth + 1))
                for key, value in node.value
            )
            return MappingNode(pairs=pairs, line=line)
        if isinstance(node, yaml_nodes.SequenceNode):
            items = tuple(self.convert(item, depth + 1) for item in node.value)
            return SequenceNode(items=items, line=line)
        return ScalarNode(value=str(node.value), type=_classify(node.tag), line=line)


def _classify(tag: object) -> ScalarType:
    text = str(tag) if tag is not None else ""
    if text in _INT_TAGS:
        return ScalarType.INTEGER
    if text in _STR_TAGS:
        return ScalarType.TEXT
    return ScalarType.OTHER


def _describe(exc: MarkedYAMLError) -> str:
    problem = exc.problem or exc.context or "invalid YAML"
    mark = exc.problem_mark or exc.context_mark
    if mark is None:
        return f"yaml: {problem}"
    return f"yaml: line {mark.line + 1}: {problem}"
