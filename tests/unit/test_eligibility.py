"""Unit tests for the submission gate."""

from url_batch.eligibility import EligibilityGate
from url_batch.models import BlockingCode, EligibilityInput


def state(**overrides):
    values = dict(
        unique_count=5,
        duplicate_count=0,
        required_credits=5,
        available_credits=10,
        has_unresolved_validation_error=False,
        submission_in_flight=False,
    )
    values.update(overrides)
    return EligibilityInput(**values)


class TestEligibilityGate:
    """Test blocking reasons."""

    def setup_method(self):
        self.gate = EligibilityGate()

    def test_clean_batch_can_submit(self):
        result = self.gate.evaluate(state())

        assert result.can_submit is True
        assert result.blocking_reasons == []

    def test_insufficient_credits(self):
        result = self.gate.evaluate(state(unique_count=50, required_credits=50, available_credits=10))

        assert result.can_submit is False
        assert result.codes == [BlockingCode.INSUFFICIENT_CREDITS]
        assert result.blocking_reasons == ["Insufficient credits: need 50, have 10."]

    def test_exact_balance_is_enough(self):
        assert self.gate.evaluate(state(required_credits=10, available_credits=10)).can_submit

    def test_no_valid_urls(self):
        result = self.gate.evaluate(state(unique_count=0, required_credits=0))

        assert result.codes == [BlockingCode.NO_VALID_URLS]

    def test_over_capacity(self):
        result = self.gate.evaluate(
            state(unique_count=10001, required_credits=10001, available_credits=20000)
        )

        assert result.codes == [BlockingCode.OVER_CAPACITY]
        assert result.blocking_reasons == ["Maximum 10,000 URLs per task."]

    def test_cap_is_inclusive(self):
        result = self.gate.evaluate(
            state(unique_count=10000, required_credits=10000, available_credits=10000)
        )

        assert result.can_submit is True

    def test_custom_cap(self):
        result = EligibilityGate(max_urls_per_task=3).evaluate(state())

        assert result.codes == [BlockingCode.OVER_CAPACITY]
        assert result.blocking_reasons == ["Maximum 3 URLs per task."]

    def test_unknown_balance(self):
        result = self.gate.evaluate(state(available_credits=None))

        assert result.codes == [BlockingCode.CREDITS_UNAVAILABLE]

    def test_reports_every_reason(self):
        result = self.gate.evaluate(
            state(
                unique_count=0,
                duplicate_count=2,
                required_credits=0,
                available_credits=0,
                has_unresolved_validation_error=True,
                submission_in_flight=True,
            )
        )

        assert result.codes == [
            BlockingCode.NO_VALID_URLS,
            BlockingCode.DUPLICATES_PRESENT,
            BlockingCode.VALIDATION_ERRORS,
            BlockingCode.SUBMISSION_IN_FLIGHT,
        ]
        assert len(result.blocking_reasons) == 4
