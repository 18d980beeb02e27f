"""Tests for rule-based perception and the backend registry."""

import pytest

from supportdesk.agent.enums import Intent, Sentiment
from supportdesk.agent.perception import (
    PerceptionMechanism,
    PerceptionResult,
    RuleBasedPerception,
    available_backends,
    create_perception,
    register_perception,
)


@pytest.fixture
def perception() -> RuleBasedPerception:
    return RuleBasedPerception()


class TestIntentDetection:
    """Intent rules are evaluated in fixed precedence order."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("I want a refund", Intent.REFUND_REQUEST),
            ("Can I get my money back?", Intent.REFUND_REQUEST),
            ("How to change my address", Intent.HELP_REQUEST),
            ("I need help with my order", Intent.HELP_REQUEST),
            ("The app is not working", Intent.TECHNICAL_ISSUE),
            ("My screen is broken", Intent.TECHNICAL_ISSUE),
            ("Question about billing", Intent.BILLING_INQUIRY),
            ("Why this charge?", Intent.BILLING_INQUIRY),
            ("What are your opening hours?", Intent.GENERAL_INQUIRY),
        ],
    )
    def test_intent_rules(self, perception, make_query, text, expected) -> None:
        assert perception.analyze(make_query(text)).intent == expected

    def test_refund_wins_over_billing(self, perception, make_query) -> None:
        result = perception.analyze(make_query("I want a refund because the billing is wrong"))
        assert result.intent == Intent.REFUND_REQUEST

    def test_help_wins_over_technical(self, perception, make_query) -> None:
        result = perception.analyze(make_query("How to fix it when the printer is broken"))
        assert result.intent == Intent.HELP_REQUEST

    def test_case_insensitive(self, perception, make_query) -> None:
        assert perception.analyze(make_query("REFUND please")).intent == Intent.REFUND_REQUEST


class TestSentimentDetection:
    """Sentiment compares negative and positive keyword hits."""

    def test_negative(self, perception, make_query) -> None:
        result = perception.analyze(make_query("I am frustrated and angry"))
        assert result.sentiment == Sentiment.NEGATIVE

    def test_positive(self, perception, make_query) -> None:
        result = perception.analyze(make_query("Thank you, that was great"))
        assert result.sentiment == Sentiment.POSITIVE

    def test_tie_is_neutral(self, perception, make_query) -> None:
        result = perception.analyze(make_query("Thank you, but I am angry"))
        assert result.sentiment == Sentiment.NEUTRAL

    def test_no_hits_is_neutral(self, perception, make_query) -> None:
        assert perception.analyze(make_query("where is it")).sentiment == Sentiment.NEUTRAL


class TestUrgency:
    """Urgency accumulates keyword, punctuation and casing signals."""

    def test_base_urgency(self, perception, make_query) -> None:
        assert perception.analyze(make_query("where is my parcel")).urgency == pytest.approx(0.3)

    def test_single_keyword(self, perception, make_query) -> None:
        assert perception.analyze(make_query("this is urgent")).urgency == pytest.approx(0.5)

    def test_keywords_are_additive(self, perception, make_query) -> None:
        result = perception.analyze(make_query("critical issue, please fix asap"))
        assert result.urgency == pytest.approx(0.7)

    def test_exclamation(self, perception, make_query) -> None:
        assert perception.analyze(make_query("where is it!")).urgency == pytest.approx(0.45)

    def test_shouting_uses_original_casing(self, perception, make_query) -> None:
        assert perception.analyze(make_query("where is my ORDER")).urgency == pytest.approx(0.45)
        assert perception.analyze(make_query("where is my order")).urgency == pytest.approx(0.3)

    def test_capped_at_one(self, perception, make_query) -> None:
        result = perception.analyze(
            make_query("urgent emergency critical asap immediately")
        )
        assert result.urgency == 1.0

    def test_monotonic_in_keyword_hits(self, perception, make_query) -> None:
        texts = [
            "please look",
            "please look urgent",
            "please look urgent critical",
            "please look urgent critical asap",
            "please look urgent critical asap emergency",
        ]
        scores = [perception.analyze(make_query(t)).urgency for t in texts]
        assert scores == sorted(scores)
        assert scores[-1] == 1.0

    def test_urgent_scenario(self, perception, make_query) -> None:
        result = perception.analyze(make_query("URGENT! Need help immediately!"))
        assert result.urgency >= 0.7


class TestKeywordExtraction:
    """Keywords are long, non-stop words in original order."""

    def test_filters_short_and_stop_words(self, perception, make_query) -> None:
        result = perception.analyze(make_query("the box that came from you is damaged"))
        assert result.keywords == ("came", "damaged")

    def test_limited_to_five(self, perception, make_query) -> None:
        result = perception.analyze(
            make_query("alpha bravo charlie delta foxtrot golf hotel india")
        )
        assert result.keywords == ("alpha", "bravo", "charlie", "delta", "foxtrot")

    def test_keywords_are_lowercased(self, perception, make_query) -> None:
        assert perception.analyze(make_query("Password Reset")).keywords == (
            "password",
            "reset",
        )


class TestDeterminism:
    def test_same_input_same_output(self, perception, make_query) -> None:
        query = make_query("URGENT! my billing is broken and I am frustrated")
        assert perception.analyze(query) == perception.analyze(query)


class TestBackendRegistry:
    """Tests for configuration-driven backend selection."""

    def test_rule_based_registered(self) -> None:
        assert "rule_based" in available_backends()
        assert isinstance(create_perception("rule_based"), RuleBasedPerception)

    def test_unknown_backend_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown perception backend"):
            create_perception("does_not_exist")

    def test_register_alternate_backend(self, make_query) -> None:
        class AlwaysBilling(PerceptionMechanism):
            name = "always_billing"

            def analyze(self, query):
                return PerceptionResult(
                    intent=Intent.BILLING_INQUIRY,
                    sentiment=Sentiment.NEUTRAL,
                    urgency=0.3,
                )

        register_perception("always_billing", AlwaysBilling)

        backend = create_perception("always_billing")
        assert backend.analyze(make_query("anything")).intent == Intent.BILLING_INQUIRY
