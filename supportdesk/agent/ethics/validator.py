"""Fairness precondition and advisory response checks."""

from supportdesk.agent.ethics.models import EthicsCheck, EthicsIssue, ValidationResult
from supportdesk.config.models.pipeline import EthicsConfig
from supportdesk.conversation.models import Query, Response


class EthicsValidator:
    """Checks queries before processing and responses after generation.

    ``ensure_fairness`` is a hard gate the agent applies up front.
    ``validate`` runs every response check independently and only
    reports; it never rewrites or rejects the response.
    """

    def __init__(self, config: EthicsConfig | None = None) -> None:
        self._config = config or EthicsConfig()
        self._biased_terms = tuple(term.lower() for term in self._config.biased_terms)
        self._discriminatory_terms = tuple(
            term.lower() for term in self._config.discriminatory_terms
        )

    @property
    def config(self) -> EthicsConfig:
        return self._config

    def ensure_fairness(self, query: Query) -> bool:
        """True iff the query carries a non-empty customer identifier."""
        return bool(query.customer_id)

    def validate(
        self,
        response: Response,
        query: Query,  # noqa: ARG002
    ) -> ValidationResult:
        issues: list[EthicsIssue] = []

        if self.contains_biased_language(response.text):
            issues.append(
                EthicsIssue(
                    check=EthicsCheck.BIASED_LANGUAGE,
                    message="Response contains potentially biased language",
                )
            )

        if self.contains_discriminatory_content(response.text):
            issues.append(
                EthicsIssue(
                    check=EthicsCheck.DISCRIMINATORY_CONTENT,
                    message="Response may contain discriminatory content",
                )
            )

        if not self.is_transparent(response):
            issues.append(
                EthicsIssue(
                    check=EthicsCheck.TRANSPARENCY,
                    message="Response lacks transparency about AI involvement",
                )
            )

        if response.requires_escalation and response.escalation_reason is None:
            issues.append(
                EthicsIssue(
                    check=EthicsCheck.ESCALATION_REASONING,
                    message="Escalation lacks clear reasoning",
                )
            )

        return ValidationResult(issues=issues)

    def contains_biased_language(self, text: str) -> bool:
        lowered = text.lower()
        hits = sum(1 for term in self._biased_terms if term in lowered)
        return hits > self._config.biased_term_limit

    def contains_discriminatory_content(self, text: str) -> bool:
        lowered = text.lower()
        return any(term in lowered for term in self._discriminatory_terms)

    def is_transparent(self, response: Response) -> bool:
        # Confidence stands in for an explicit AI-disclosure check
        return response.confidence > self._config.min_transparent_confidence
