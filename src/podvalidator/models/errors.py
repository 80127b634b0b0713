"""Structured findings with YAML source line tracking."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from podvalidator.tree.nodes import Node


class Finding(BaseModel):
    """One validation problem, pointing at the offending line when known."""

    model_config = ConfigDict(frozen=True)

    message: str
    line: int | None = Field(default=None, gt=0)

    @classmethod
    def at(cls, message: str, node: Node | None) -> Finding:
        """Blame ``node``; nodes without a known line produce no line."""
        line = node.line if node is not None and node.line > 0 else None
        return cls(message=message, line=line)

    @classmethod
    def missing(cls, message: str) -> Finding:
        return cls(message=message)

    def render(self, source: str) -> str:
        if self.line is not None:
            return f"{source}:{self.line} {self.message}"
        return f"{source}: {self.message}"


class ValidationResult(BaseModel):
    """Result of validating one manifest."""

    valid: bool
    findings: list[Finding] = []

    @classmethod
    def from_findings(cls, findings: list[Finding]) -> ValidationResult:
        return cls(valid=not findings, findings=list(findings))
