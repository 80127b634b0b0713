"""YAML parsing with line fidelity for the Pod validator."""

from podvalidator.parser.loader import TrackedLoader

__all__ = ["TrackedLoader"]
