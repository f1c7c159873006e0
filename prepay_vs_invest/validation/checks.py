from __future__ import annotations

import numpy as np

from prepay_vs_invest.core.inputs import LoanInput


class InvalidInput(ValueError):
    """Loan parameters that cannot be simulated."""


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidInput(message)


def _finite(value) -> bool:
    try:
        return bool(np.isfinite(float(value)))
    except (TypeError, ValueError):
        return False


def validate_loan_input(inputs: LoanInput) -> None:
    for name in (
        "principal",
        "interest_rate",
        "tenure_years",
        "sip_return_rate",
        "extra_emi_per_year",
        "step_up_percentage",
    ):
        _require(_finite(getattr(inputs, name)), f"{name.replace('_', ' ').capitalize()} must be a finite number.")

    _require(inputs.principal > 0, "Loan amount must be positive.")
    _require(float(inputs.tenure_years).is_integer(), "Tenure must be a whole number of years.")
    _require(inputs.tenure_years > 0, "Tenure must be positive.")
    _require(inputs.interest_rate >= 0, "Interest rate cannot be negative.")
    _require(inputs.sip_return_rate >= 0, "Investment return cannot be negative.")
    _require(inputs.extra_emi_per_year >= 0, "Extra EMIs per year cannot be negative.")
    _require(inputs.step_up_percentage >= 0, "Step-up percentage cannot be negative.")
