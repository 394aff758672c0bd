"""Tests for CostCalculator."""

from __future__ import annotations

import pytest

from recruit_sandbox.logging.cost_calculator import (
    MODEL_PRICING,
    SPEECH_COST_PER_1K_CHARS,
    calculate_cost,
)


class TestCostCalculator:
    def test_sonnet_cost(self):
        # 1M input + 1M output for Sonnet: $3.00 + $15.00 = $18.00
        cost = calculate_cost([("claude-sonnet-4-5-20250929", 1_000_000, 1_000_000)])
        assert cost == pytest.approx(18.00)

    def test_multiple_calls(self):
        calls = [
            ("claude-haiku-4-5-20251001", 1000, 500),
            ("claude-sonnet-4-5-20250929", 2000, 1000),
        ]
        expected = (
            (1000 / 1e6) * 1.00 + (500 / 1e6) * 5.00
            + (2000 / 1e6) * 3.00 + (1000 / 1e6) * 15.00
        )
        assert calculate_cost(calls) == pytest.approx(expected)

    def test_speech_cost(self):
        cost = calculate_cost([], speech_chars=2000)
        assert cost == pytest.approx(2 * SPEECH_COST_PER_1K_CHARS)

    def test_unknown_model_ignored(self):
        assert calculate_cost([("unknown-model", 1000, 1000)]) == 0.0

    def test_empty(self):
        assert calculate_cost([]) == 0.0

    def test_all_models_have_both_prices(self):
        for pricing in MODEL_PRICING.values():
            assert set(pricing) == {"input", "output"}
