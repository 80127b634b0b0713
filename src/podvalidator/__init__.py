"""Pod manifest validator: line-aware schema checks for YAML Pod descriptors."""

from podvalidator.models.errors import Finding, ValidationResult
from podvalidator.service.driver import (
    FatalError,
    FatalReason,
    ManifestValidator,
    Outcome,
    Success,
    ValidationFailed,
)

__version__ = "0.1.0"

__all__ = [
    "FatalError",
    "FatalReason",
    "Finding",
    "ManifestValidator",
    "Outcome",
    "Success",
    "ValidationFailed",
    "ValidationResult",
    "__version__",
]
