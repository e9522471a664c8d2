"""Usage report for remote prompt-optimization calls."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

# USD per 1M tokens: (input, output)
MODEL_PRICING = MappingProxyType({
    "claude-haiku-4-5-20251001": (1.00, 5.00),
    "claude-sonnet-4-5-20250929": (3.00, 15.00),
})


@dataclass(frozen=True)
class UsageReport:
    """Token totals and estimated spend for one or more optimize runs."""

    input_tokens: int = 0
    output_tokens: int = 0
    calls: int = 0
    cost_usd: float = 0.0
    unpriced_models: tuple[str, ...] = ()

    def describe(self) -> str:
        text = (
            f"{self.calls} call(s), {self.input_tokens} input / {self.output_tokens} output tokens, "
            f"~${self.cost_usd:.4f}"
        )
        if self.unpriced_models:
            text += f" (no price for {', '.join(self.unpriced_models)})"
        return text


def call_cost(model_id: str, input_tokens: int, output_tokens: int) -> float | None:
    """USD cost of a single call, or None when the model has no known price."""
    pricing = MODEL_PRICING.get(model_id)
    if pricing is None:
        return None
    input_price, output_price = pricing
    return (input_tokens * input_price + output_tokens * output_price) / 1_000_000


def usage_report(summary: dict) -> UsageReport:
    """Build a report from ``LLMClient.get_token_summary()`` output."""
    calls = summary.get("calls", [])
    total = 0.0
    unpriced: list[str] = []
    for model_id, input_tokens, output_tokens in calls:
        cost = call_cost(model_id, input_tokens, output_tokens)
        if cost is None:
            if model_id not in unpriced:
                unpriced.append(model_id)
            continue
        total += cost
    return UsageReport(
        input_tokens=summary.get("input", 0),
        output_tokens=summary.get("output", 0),
        calls=len(calls),
        cost_usd=total,
        unpriced_models=tuple(unpriced),
    )
