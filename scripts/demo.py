#!/usr/bin/env python3
"""Walk three sample queries through the support pipeline.

Settings come from config/*.toml and SUPPORTDESK_* environment variables;
command-line flags override individual values.

Usage:
    python scripts/demo.py
    python scripts/demo.py --paradigm rule_based --log-level WARNING
    SUPPORTDESK_ENV=production python scripts/demo.py
"""

import argparse

from supportdesk.agent import AIParadigm
from supportdesk.config import get_settings
from supportdesk.config.settings import Settings
from supportdesk.conversation.models import Query
from supportdesk.observability.logging import LEVELS, setup_logging_from_config
from supportdesk.service import CustomerSupportService

SAMPLE_QUERIES = [
    ("Help Request", "Q001", "RETAIL001", "How do I reset my password for Retail Giant account?"),
    ("Technical Issue", "Q002", "PHARMA001", "The prescription refill system is not working"),
    ("Urgent Query", "Q003", "BANK001", "URGENT! Suspicious activity on my Global Bank account!"),
]


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return a copy of settings with any command-line overrides applied."""
    update = {}
    if args.paradigm:
        update["agent"] = settings.agent.model_copy(update={"paradigm": args.paradigm})
    if args.log_level:
        logging_config = settings.observability.logging.model_copy(
            update={"level": args.log_level}
        )
        update["observability"] = settings.observability.model_copy(
            update={"logging": logging_config}
        )
    return settings.model_copy(update=update) if update else settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Customer support agent demo")
    parser.add_argument(
        "--paradigm",
        choices=[p.value for p in AIParadigm],
        help="Override agent.paradigm",
    )
    parser.add_argument(
        "--log-level",
        choices=list(LEVELS),
        help="Override observability.logging.level",
    )
    args = parser.parse_args()

    settings = apply_overrides(get_settings(), args)
    setup_logging_from_config(settings.observability.logging)

    service = CustomerSupportService.from_settings(settings)

    print("=== AI Customer Support Agent Demo ===\n")
    print(f"Using AI Paradigm: {service.paradigm.description}\n")

    for number, (title, query_id, customer_id, text) in enumerate(SAMPLE_QUERIES, start=1):
        print(f"--- Demo {number}: {title} ---")
        response = service.handle_query(
            Query(query_id=query_id, customer_id=customer_id, text=text)
        )
        print(f"Query: {text}")
        print(f"Response: {response.text}")
        print(f"Confidence: {response.confidence * 100:.2f}%")
        print(f"Requires Escalation: {response.requires_escalation}")
        if response.requires_escalation:
            print(f"Escalation Reason: {response.escalation_reason}")
        print()

    print("--- System Statistics ---")
    print(f"Active Conversations: {service.active_conversation_count()}")


if __name__ == "__main__":
    main()
