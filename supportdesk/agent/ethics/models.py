"""Ethics validation models."""

from enum import Enum

from pydantic import BaseModel, Field


class EthicsCheck(str, Enum):
    """Advisory checks run against every response."""

    BIASED_LANGUAGE = "biased_language"
    DISCRIMINATORY_CONTENT = "discriminatory_content"
    TRANSPARENCY = "transparency"
    ESCALATION_REASONING = "escalation_reasoning"


class EthicsIssue(BaseModel):
    """A single finding from one check."""

    check: EthicsCheck = Field(..., description="Check that raised the finding")
    message: str = Field(..., description="Human-readable description")


class ValidationResult(BaseModel):
    """Outcome of validating one response.

    Findings are advisory; a failed validation never blocks delivery.
    """

    issues: list[EthicsIssue] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]
