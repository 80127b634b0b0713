"""Rule checkers for the ``v1/Pod`` manifest schema.

Each ``check_*`` method validates one region of the document and returns its
findings in traversal order. Checkers never stop at the first problem; the
only early returns are where the data the remaining rules need does not exist
(a ``containers`` value that is not a list, a probe without ``httpGet``).
"""

from __future__ import annotations

import re

from podvalidator.models.errors import Finding
from podvalidator.tree.nodes import Node, ScalarNode, SequenceNode, get_value, scalar_text

SUPPORTED_API_VERSION = "v1"
SUPPORTED_KIND = "Pod"
SUPPORTED_OS = frozenset({"linux", "windows"})
SUPPORTED_PROTOCOLS = frozenset({"TCP", "UDP"})
PROBE_FIELDS = ("readinessProbe", "livenessProbe")
RESOURCE_SECTIONS = ("requests", "limits")

IMAGE_RE = re.compile(r"registry\.bigbrother\.io/[^:]+:[^:]+")
MEMORY_RE = re.compile(r"[0-9]+(Ki|Mi|Gi)")
DECIMAL_RE = re.compile(r"[-+]?[0-9]+")

_MIN_PORT = 1
_MAX_PORT = 65535


def _as_int(node: Node) -> int | None:
    # Plain decimal only; hex, octal, binary and underscored forms give None.
    text = scalar_text(node)
    if not DECIMAL_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:  # beyond the interpreter's digit limit
        return None


def _port_in_range(node: Node) -> bool:
    value = _as_int(node)
    return value is not None and _MIN_PORT <= value <= _MAX_PORT


def _is_integer(node: Node) -> bool:
    return isinstance(node, ScalarNode) and node.is_integer


class PodValidator:
    """Validates a parsed manifest against the fixed Pod schema."""

    def validate(self, root: Node) -> list[Finding]:
        return self.check_pod(root)

    def check_pod(self, node: Node) -> list[Finding]:
        findings: list[Finding] = []

        api_version = get_value(node, "apiVersion")
        if api_version is None:
            findings.append(Finding.missing("apiVersion is required"))
        elif scalar_text(api_version) != SUPPORTED_API_VERSION:
            findings.append(
                Finding.at(
                    f"apiVersion has unsupported value '{scalar_text(api_version)}'",
                    api_version,
                )
            )

        kind = get_value(node, "kind")
        if kind is None:
            findings.append(Finding.missing("kind is required"))
        elif scalar_text(kind) != SUPPORTED_KIND:
            findings.append(Finding.at(f"kind has unsupported value '{scalar_text(kind)}'", kind))

        metadata = get_value(node, "metadata")
        if metadata is None:
            findings.append(Finding.missing("metadata is required"))
        else:
            findings.extend(self.check_metadata(metadata))

        spec = get_value(node, "spec")
        if spec is None:
            findings.append(Finding.missing("spec is required"))
        else:
            findings.extend(self.check_spec(spec))

        return findings

    def check_metadata(self, node: Node) -> list[Finding]:
        # An empty name reports the same message as a missing one.
        name = get_value(node, "name")
        if name is None or scalar_text(name) == "":
            return [Finding.at("name is required", name)]
        return []

    def check_spec(self, node: Node) -> list[Finding]:
        findings: list[Finding] = []

        os_node = get_value(node, "os")
        if os_node is not None and scalar_text(os_node) not in SUPPORTED_OS:
            findings.append(
                Finding.at(f"os has unsupported value '{scalar_text(os_node)}'", os_node)
            )

        containers = get_value(node, "containers")
        if not isinstance(containers, SequenceNode):
            findings.append(Finding.missing("spec.containers is required"))
            return findings

        seen: set[str] = set()
        for container in containers.items:
            findings.extend(self.check_container(container, seen))
        return findings

    def check_container(self, node: Node, seen: set[str]) -> list[Finding]:
        """Validate one entry of ``spec.containers``.

        ``seen`` holds the names of the earlier entries of the same list and
        is updated in place; a repeated name is reported with the generic
        invalid-format message.
        """
        findings: list[Finding] = []

        name = get_value(node, "name")
        if name is None or scalar_text(name) == "":
            findings.append(Finding.at("name is required", name))
        elif scalar_text(name) in seen:
            findings.append(
                Finding.at(f"containers.name has invalid format '{scalar_text(name)}'", name)
            )
        else:
            seen.add(scalar_text(name))

        image = get_value(node, "image")
        if image is None:
            findings.append(Finding.missing("image is required"))
        elif not IMAGE_RE.fullmatch(scalar_text(image)):
            findings.append(Finding.at(f"image has invalid format '{scalar_text(image)}'", image))

        ports = get_value(node, "ports")
        if isinstance(ports, SequenceNode):
            for port in ports.items:
                findings.extend(self.check_container_port(port))

        for label in PROBE_FIELDS:
            probe = get_value(node, label)
            if probe is not None:
                findings.extend(self.check_probe(probe, label))

        resources = get_value(node, "resources")
        if resources is None:
            findings.append(Finding.missing("resources is required"))
        else:
            findings.extend(self.check_resources(resources))

        return findings

    def check_container_port(self, node: Node) -> list[Finding]:
        findings: list[Finding] = []

        container_port = get_value(node, "containerPort")
        if container_port is None:
            findings.append(Finding.missing("containerPort is required"))
        elif not _is_integer(container_port):
            findings.append(Finding.at("containerPort must be int", container_port))
        elif not _port_in_range(container_port):
            findings.append(Finding.at("containerPort value out of range", container_port))

        protocol = get_value(node, "protocol")
        if protocol is not None and scalar_text(protocol) not in SUPPORTED_PROTOCOLS:
            findings.append(
                Finding.at(f"protocol has unsupported value '{scalar_text(protocol)}'", protocol)
            )

        return findings

    def check_probe(self, node: Node, label: str) -> list[Finding]:
        """Validate a probe block; ``label`` prefixes every message."""
        http_get = get_value(node, "httpGet")
        if http_get is None:
            return [Finding.missing(f"{label}.httpGet is required")]

        findings: list[Finding] = []

        path = get_value(http_get, "path")
        path_text = scalar_text(path) if path is not None else ""
        if not path_text.startswith("/"):
            findings.append(
                Finding.at(f"{label}.httpGet.path has invalid format '{path_text}'", path)
            )

        port = get_value(http_get, "port")
        if port is None or not _is_integer(port):
            findings.append(Finding.at(f"{label}.httpGet.port must be int", port))
        elif not _port_in_range(port):
            findings.append(Finding.at(f"{label}.httpGet.port value out of range", port))

        return findings

    def check_resources(self, node: Node) -> list[Finding]:
        findings: list[Finding] = []

        for section_name in RESOURCE_SECTIONS:
            section = get_value(node, section_name)
            if section is None:
                continue

            cpu = get_value(section, "cpu")
            if cpu is not None and not _is_integer(cpu):
                findings.append(Finding.at("cpu must be int", cpu))

            memory = get_value(section, "memory")
            if memory is not None and not MEMORY_RE.fullmatch(scalar_text(memory)):
                findings.append(
                    Finding.at(f"memory has invalid format '{scalar_text(memory)}'", memory)
                )

        return findings
