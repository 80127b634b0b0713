"""Tests for the ManifestValidator driver and its outcomes."""

from __future__ import annotations

from pathlib import Path

import pytest

from podvalidator.models.errors import Finding
from podvalidator.parser.loader import TrackedLoader
from podvalidator.service.driver import (
    EMPTY_DOCUMENT_MESSAGE,
    FatalError,
    FatalReason,
    ManifestValidator,
    Success,
    ValidationFailed,
    to_result,
)
from tests.conftest import BROKEN_POD_YAML, FULL_POD_YAML, MINIMAL_POD_YAML


class TestOutcomes:
    def test_valid_manifest_succeeds(self, manifest_validator: ManifestValidator) -> None:
        outcome = manifest_validator.validate_string(MINIMAL_POD_YAML)
        assert isinstance(outcome, Success)
        assert outcome.exit_code == 0
        assert outcome.findings == []

    def test_findings_fail_validation(self, manifest_validator: ManifestValidator) -> None:
        outcome = manifest_validator.validate_string(
            MINIMAL_POD_YAML.replace('"registry.bigbrother.io/app:1.0"', '"badimage"')
        )
        assert isinstance(outcome, ValidationFailed)
        assert outcome.exit_code == 1
        assert outcome.findings == [
            Finding(message="image has invalid format 'badimage'", line=8)
        ]

    @pytest.mark.parametrize("content", [b"", b"   \n", b"# nothing here\n"])
    def test_empty_document_is_fatal(
        self, manifest_validator: ManifestValidator, content: bytes
    ) -> None:
        outcome = manifest_validator.validate_bytes(content)
        assert outcome == FatalError(EMPTY_DOCUMENT_MESSAGE, FatalReason.EMPTY_DOCUMENT)
        assert outcome.exit_code == 1

    def test_parse_error_is_fatal(self, manifest_validator: ManifestValidator) -> None:
        outcome = manifest_validator.validate_string("kind: [Pod\n")
        assert isinstance(outcome, FatalError)
        assert outcome.reason is FatalReason.PARSE_ERROR
        assert outcome.message.startswith("yaml: ")
        assert outcome.exit_code == 2

    def test_undecodable_bytes_are_fatal(self, manifest_validator: ManifestValidator) -> None:
        outcome = manifest_validator.validate_bytes(b"\xff\xfe\x00")
        assert isinstance(outcome, FatalError)
        assert outcome.reason is FatalReason.PARSE_ERROR

    def test_safety_violation_is_fatal(self) -> None:
        driver = ManifestValidator(loader=TrackedLoader(max_document_size=10))
        outcome = driver.validate_string(MINIMAL_POD_YAML)
        assert isinstance(outcome, FatalError)
        assert outcome.reason is FatalReason.PARSE_ERROR
        assert "maximum size" in outcome.message

    def test_missing_file_is_a_read_error(
        self, manifest_validator: ManifestValidator, tmp_path: Path
    ) -> None:
        outcome = manifest_validator.validate_file(tmp_path / "absent.yaml")
        assert isinstance(outcome, FatalError)
        assert outcome.reason is FatalReason.READ_ERROR
        assert outcome.exit_code == 2

    def test_validate_file(self, manifest_validator: ManifestValidator, tmp_path: Path) -> None:
        manifest = tmp_path / "pod.yaml"
        manifest.write_text(FULL_POD_YAML, encoding="utf-8")
        assert isinstance(manifest_validator.validate_file(manifest), Success)

    def test_validate_node_accepts_none(self, manifest_validator: ManifestValidator) -> None:
        outcome = manifest_validator.validate_node(None)
        assert isinstance(outcome, FatalError)
        assert outcome.reason is FatalReason.EMPTY_DOCUMENT

    def test_only_first_document_is_validated(
        self, manifest_validator: ManifestValidator
    ) -> None:
        content = MINIMAL_POD_YAML + "---\nkind: Nonsense\n"
        assert isinstance(manifest_validator.validate_string(content), Success)

    def test_null_document_is_validated(self, manifest_validator: ManifestValidator) -> None:
        outcome = manifest_validator.validate_string("---\n")
        assert isinstance(outcome, ValidationFailed)
        assert len(outcome.findings) == 4


class TestRepeatability:
    def test_same_input_same_findings(self, manifest_validator: ManifestValidator) -> None:
        first = manifest_validator.validate_string(BROKEN_POD_YAML)
        second = manifest_validator.validate_string(BROKEN_POD_YAML)
        assert isinstance(first, ValidationFailed)
        assert first == second


class TestToResult:
    def test_success_result(self) -> None:
        result = to_result(Success())
        assert result.valid
        assert result.findings == []

    def test_failed_result(self) -> None:
        findings = [Finding(message="kind is required")]
        result = to_result(ValidationFailed(findings))
        assert not result.valid
        assert result.findings == findings
