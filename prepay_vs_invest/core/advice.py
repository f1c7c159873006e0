from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Optional

import openai

from .inputs import LoanInput
from .simulator import PREPAY, SimulationResult

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Unable to generate AI advice at this moment."


@dataclass
class AdvisorConfig:
    model: str = field(default_factory=lambda: os.getenv("PREPAY_ADVISOR_MODEL", "gpt-4o-mini"))
    max_tokens: int = 400
    fallback_message: str = FALLBACK_MESSAGE


def _money(value: float) -> str:
    return f"{round(value):,}"


def build_advice_prompt(loan_input: LoanInput, result: SimulationResult) -> str:
    summary = result.summary
    loan_free_years = summary.aggressive_tenure_months / 12
    winner = "Aggressive Prepayment" if summary.winning_strategy == PREPAY else "Regular Payment + SIP"

    prompt = f"""
Act as a senior financial planner. Analyze this "Loan Prepayment vs Investment" comparison.

**Scenario:**
- Loan: {_money(loan_input.principal)} @ {loan_input.interest_rate}% for {loan_input.tenure_years} Years.
- Investment Potential: {loan_input.sip_return_rate}% return.
- Aggressive Strategy: Pay {loan_input.extra_emi_per_year} extra EMI/year + {loan_input.step_up_percentage}% annual step-up.
- *Comparison Rule:* In the Aggressive strategy, once the loan is closed, the entire monthly budget is diverted to SIP until year {loan_input.tenure_years}.

**Results:**
1. **Strategy A (Don't Prepay, Invest Surplus):**
   - Final Net Wealth: {_money(summary.final_wealth_regular)}
   - Loan Interest Paid: {_money(summary.regular_total_interest)}

2. **Strategy B (Prepay Aggressively, Then Invest):**
   - Final Net Wealth: {_money(summary.final_wealth_aggressive)}
   - Loan Interest Paid: {_money(summary.aggressive_total_interest)}
   - Loan Free in: {loan_free_years:.1f} Years.

**Verdict:**
- Winner: **{winner}**
- Wealth Gap: {_money(summary.net_wealth_difference)}

**Task:**
Provide a recommendation (under 150 words).
1. Acknowledge the winner mathematically.
2. Mention the intangible value of being debt-free early (Strategy B clears loan in {loan_free_years:.1f} years).
3. Advise based on risk (Market returns are variable, loan interest is fixed saved cost).

Format with markdown.
"""
    return prompt.strip()


def _default_client() -> Optional[Any]:
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        logger.warning("OPENAI_API_KEY environment variable not set; skipping advice")
        return None
    return openai.OpenAI(api_key=api_key)


def generate_advice(
    loan_input: LoanInput,
    result: SimulationResult,
    client: Optional[Any] = None,
    config: Optional[AdvisorConfig] = None,
) -> str:
    """Narrative recommendation for a finished simulation; falls back to a fixed message on any failure."""
    config = config or AdvisorConfig()
    client = client or _default_client()
    if client is None:
        return config.fallback_message

    try:
        response = client.chat.completions.create(
            model=config.model,
            messages=[{"role": "user", "content": build_advice_prompt(loan_input, result)}],
            max_completion_tokens=config.max_tokens,
        )
        content = response.choices[0].message.content
    except Exception as exc:  # advice is optional; never break the caller
        logger.warning("Advice request failed: %s", exc)
        return config.fallback_message

    if not content:
        logger.warning("Advice response was empty")
        return config.fallback_message
    return content.strip()
