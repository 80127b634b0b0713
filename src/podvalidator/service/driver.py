"""Load a manifest, run the Pod rules, and map the result to an outcome."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from podvalidator.exceptions import DocumentLoadError, DocumentReadError, YAMLSafetyError
from podvalidator.models.errors import Finding, ValidationResult
from podvalidator.parser.loader import TrackedLoader
from podvalidator.tree.nodes import Node
from podvalidator.validator.pod import PodValidator

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT_MESSAGE = "document is empty"

# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


class FatalReason(StrEnum):
    READ_ERROR = "read_error"
    PARSE_ERROR = "parse_error"
    EMPTY_DOCUMENT = "empty_document"


@dataclass(frozen=True)
class Success:
    """The manifest produced no findings."""

    exit_code: int = field(default=0, init=False)

    @property
    def findings(self) -> list[Finding]:
        return []


@dataclass(frozen=True)
class ValidationFailed:
    """One or more findings, in traversal order."""

    findings: list[Finding]
    exit_code: int = field(default=1, init=False)


@dataclass(frozen=True)
class FatalError:
    """Validation never ran: the document was unreadable, unparsable or empty."""

    message: str
    reason: FatalReason

    @property
    def exit_code(self) -> int:
        return 1 if self.reason is FatalReason.EMPTY_DOCUMENT else 2


Outcome = Success | ValidationFailed | FatalError


def to_result(outcome: Success | ValidationFailed) -> ValidationResult:
    return ValidationResult.from_findings(outcome.findings)


# ---------------------------------------------------------------------------
# ManifestValidator
# ---------------------------------------------------------------------------


class ManifestValidator:
    """Runs one validation pass per call. Holds no per-document state."""

    def __init__(
        self,
        loader: TrackedLoader | None = None,
        validator: PodValidator | None = None,
    ) -> None:
        self._loader = loader or TrackedLoader()
        self._validator = validator or PodValidator()

    def validate_file(self, path: Path) -> Outcome:
        logger.debug("validating %s", path)
        return self._run(lambda: self._loader.load(path))

    def validate_bytes(self, data: bytes) -> Outcome:
        return self._run(lambda: self._loader.load_bytes(data))

    def validate_string(self, content: str) -> Outcome:
        return self._run(lambda: self._loader.load_string(content))

    def validate_node(self, root: Node | None) -> Outcome:
        """Validate an already-parsed tree; ``None`` is the empty document."""
        if root is None:
            logger.warning("validation aborted: %s", EMPTY_DOCUMENT_MESSAGE)
            return FatalError(EMPTY_DOCUMENT_MESSAGE, FatalReason.EMPTY_DOCUMENT)

        findings = self._validator.validate(root)
        logger.debug("validation finished with %d finding(s)", len(findings))
        if findings:
            return ValidationFailed(findings)
        return Success()

    def _run(self, load: Callable[[], Node | None]) -> Outcome:
        try:
            root = load()
        except DocumentReadError as exc:
            logger.warning("validation aborted: %s", exc)
            return FatalError(str(exc), FatalReason.READ_ERROR)
        except (DocumentLoadError, YAMLSafetyError) as exc:
            logger.warning("validation aborted: %s", exc)
            return FatalError(str(exc), FatalReason.PARSE_ERROR)
        return self.validate_node(root)
