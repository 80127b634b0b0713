"""Pydantic models for validation findings and results."""

from podvalidator.models.errors import Finding, ValidationResult

__all__ = ["Finding", "ValidationResult"]
