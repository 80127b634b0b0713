"""Driver layer shared by the CLI and library callers."""

from podvalidator.service.driver import (
    FatalError,
    FatalReason,
    ManifestValidator,
    Outcome,
    Success,
    ValidationFailed,
)

__all__ = [
    "FatalError",
    "FatalReason",
    "ManifestValidator",
    "Outcome",
    "Success",
    "ValidationFailed",
]
