"""
Cost estimate for a lookup, from the token usage the backend reports.
"""

from decimal import Decimal, ROUND_HALF_UP

from lexilens.core.result import Usage


# USD per 1K tokens
PROMPT_RATE = Decimal("0.0015")
COMPLETION_RATE = Decimal("0.002")

FOUR_PLACES = Decimal("0.0001")


def estimate_cost(prompt_tokens: int, completion_tokens: int) -> Decimal:
    if prompt_tokens < 0 or completion_tokens < 0:
        raise ValueError("token counts must be non-negative")

    cost = (prompt_tokens * PROMPT_RATE + completion_tokens * COMPLETION_RATE) / 1000
    return cost.quantize(FOUR_PLACES, rounding=ROUND_HALF_UP)


def format_usage(usage: Usage) -> str:
    cost = estimate_cost(usage.prompt_tokens, usage.completion_tokens)
    return f"{usage.total_tokens} tokens used ≈ ${cost} USD"
