from __future__ import annotations

from .inputs import LoanInput


def base_scenario() -> LoanInput:
    """Provide a reasonable starting point for the UI."""
    return LoanInput(
        principal=5_000_000,
        interest_rate=8.5,
        tenure_years=20,
        sip_return_rate=12.0,
        extra_emi_per_year=1,
        step_up_percentage=5.0,
    )


def flat_scenario() -> LoanInput:
    """Same loan with no extra capacity: both strategies pay the installment only."""
    return LoanInput(
        principal=5_000_000,
        interest_rate=8.5,
        tenure_years=20,
        sip_return_rate=12.0,
        extra_emi_per_year=0,
        step_up_percentage=0.0,
    )
