"""Cost calculator for Claude API and speech synthesis usage."""

from __future__ import annotations

# Pricing per 1M tokens (USD). Thinking tokens are billed as output.
MODEL_PRICING: dict[str, dict[str, float]] = {
    "claude-haiku-4-5-20251001": {"input": 1.00, "output": 5.00},
    "claude-sonnet-4-5-20250929": {"input": 3.00, "output": 15.00},
    "claude-opus-4-1-20250805": {"input": 15.00, "output": 75.00},
}

SPEECH_COST_PER_1K_CHARS = 0.015


def calculate_cost(
    calls: list[tuple[str, int, int]],
    speech_chars: int = 0,
) -> float:
    """Calculate total cost for a set of API calls and synthesized speech.

    Args:
        calls: List of (model_id, input_tokens, output_tokens) tuples.
        speech_chars: Number of characters sent to speech synthesis.

    Returns:
        Total estimated cost in USD.
    """
    total = 0.0
    for model_id, input_tokens, output_tokens in calls:
        pricing = MODEL_PRICING.get(model_id)
        if pricing is None:
            continue
        total += (input_tokens / 1_000_000) * pricing["input"]
        total += (output_tokens / 1_000_000) * pricing["output"]
    total += (speech_chars / 1000) * SPEECH_COST_PER_1K_CHARS
    return total
