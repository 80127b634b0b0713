"""Exceptions raised before any rule runs."""

from __future__ import annotations


class PodValidatorError(Exception):
    """Base exception for fatal, non-validation failures."""


class DocumentLoadError(PodValidatorError):
    """The document could not be read, decoded or parsed."""


class YAMLSafetyError(PodValidatorError):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: these indicate potentially malicious input
    (e.g., billion-laughs aliases, excessive nesting, oversized documents).
    """


class DocumentReadError(DocumentLoadError):
    """The document's bytes could not be read from their source."""
