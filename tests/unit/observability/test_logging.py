"""Tests for structured logging."""

import json
from datetime import datetime

import pytest
import structlog

from supportdesk.agent import SupportAgent
from supportdesk.agent.ethics import EthicsValidator
from supportdesk.config.models.observability import LoggingConfig
from supportdesk.config.models.pipeline import EthicsConfig
from supportdesk.conversation.models import ConversationContext, Query
from supportdesk.observability.logging import (
    PIIRedactor,
    get_logger,
    setup_logging,
    setup_logging_from_config,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self, capsys) -> None:
        """Should emit one JSON object per event."""
        setup_logging(level="INFO", format="json", redact_pii=False)
        get_logger("test").info("test_message", intent="HELP_REQUEST")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "test_message"
        assert payload["intent"] == "HELP_REQUEST"
        assert payload["level"] == "info"

    def test_setup_console_format(self) -> None:
        """Should configure console format for development."""
        setup_logging(level="DEBUG", format="console", redact_pii=False)
        # Should not raise
        get_logger("test").debug("test_message")

    def test_level_filters_lower_events(self, capsys) -> None:
        setup_logging(level="WARNING", format="json", redact_pii=False)
        logger = get_logger("test")
        logger.info("hidden")
        logger.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_setup_from_config(self, capsys) -> None:
        setup_logging_from_config(LoggingConfig(level="INFO", format="json", redact_pii=True))
        get_logger("test").info("contact", note="reach me at user@example.com")

        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["note"] == "reach me at [EMAIL]"


class TestContextBinding:
    """Tests for context binding via structlog.contextvars."""

    def test_bound_context_appears_in_logs(self, capsys) -> None:
        setup_logging(level="INFO", format="json", redact_pii=False)

        with structlog.contextvars.bound_contextvars(customer_id="C001", query_id="Q001"):
            get_logger("test").info("turn")

        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["customer_id"] == "C001"
        assert payload["query_id"] == "Q001"


class TestPIIRedactor:
    """Tests for PII redaction processor."""

    def test_redacts_sensitive_keys(self) -> None:
        redactor = PIIRedactor()
        result = redactor(None, "info", {"event": "x", "password": "hunter2", "token": "abc"})
        assert result["password"] == "[REDACTED]"
        assert result["token"] == "[REDACTED]"
        assert result["event"] == "x"

    def test_redacts_patterns_in_values(self) -> None:
        redactor = PIIRedactor()
        result = redactor(
            None,
            "info",
            {"event": "x", "text": "mail a@b.com or ssn 123-45-6789"},
        )
        assert result["text"] == "mail [EMAIL] or ssn [SSN]"

    def test_redacts_nested_structures(self) -> None:
        redactor = PIIRedactor()
        result = redactor(
            None,
            "info",
            {"event": "x", "meta": {"email": "a@b.com"}, "items": ["a@b.com", 3]},
        )
        assert result["meta"]["email"] == "[REDACTED]"
        assert result["items"] == ["[EMAIL]", 3]

    @pytest.mark.parametrize(
        "text",
        [
            "call 555-123-4567 today",
            "call (555) 123-4567 today",
            "call +1 555 123 4567 today",
            "call 5551234567 today",
        ],
    )
    def test_redacts_phone_numbers(self, text: str) -> None:
        result = PIIRedactor()(None, "info", {"event": "x", "text": text})
        assert result["text"] == "call [PHONE] today"

    @pytest.mark.parametrize(
        "text",
        [
            "2026-10-19T17:15:31.002613Z",
            "order 12345678901234 shipped",
            "ticket 2026-10-19-0042",
        ],
    )
    def test_leaves_dates_and_long_numbers(self, text: str) -> None:
        result = PIIRedactor()(None, "info", {"event": "x", "text": text})
        assert result["text"] == text


class TestRedactedOutput:
    """Redaction must not touch fields added by structlog itself."""

    @staticmethod
    def events(err: str) -> dict[str, dict]:
        payloads = [json.loads(line) for line in err.strip().splitlines()]
        return {payload["event"]: payload for payload in payloads}

    def test_timestamp_survives_redaction(self, capsys) -> None:
        setup_logging(level="INFO", format="json", redact_pii=True)
        get_logger("test").info("turn", note="phone 555-123-4567")

        payload = self.events(capsys.readouterr().err)["turn"]
        assert payload["note"] == "phone [PHONE]"
        assert "[PHONE]" not in payload["timestamp"]
        datetime.fromisoformat(payload["timestamp"])

    def test_agent_events_keep_timestamps(self, capsys) -> None:
        setup_logging(level="INFO", format="json", redact_pii=True)
        agent = SupportAgent(
            ethics=EthicsValidator(EthicsConfig(min_transparent_confidence=0.95))
        )
        agent.process_query(
            Query(query_id="Q001", customer_id="C001", text="How to reset my password?"),
            ConversationContext(customer_id="C001"),
        )

        events = self.events(capsys.readouterr().err)
        for name in ("query_processed", "ethics_validation_issues"):
            timestamp = events[name]["timestamp"]
            assert "[PHONE]" not in timestamp
            datetime.fromisoformat(timestamp)
        assert events["ethics_validation_issues"]["query_id"] == "Q001"
