from __future__ import annotations

import math


def year_of_month(month: int) -> int:
    return math.ceil(month / 12)


def base_capacity(installment: float, step_up_percentage: float, year: int) -> float:
    """Installment grown by the annual step-up; year 1 is not stepped up."""
    return installment * ((1 + step_up_percentage / 100) ** (year - 1))


def extra_payment(installment: float, extra_emi_per_year: float, month: int) -> float:
    """Lump-sum capacity, paid in the last month of each loan year."""
    if extra_emi_per_year > 0 and month % 12 == 0:
        return installment * extra_emi_per_year
    return 0.0


def monthly_budget(installment: float, step_up_percentage: float, extra_emi_per_year: float, month: int) -> float:
    """Total amount the borrower can deploy in ``month`` (1-based), shared by both strategies."""
    year = year_of_month(month)
    return base_capacity(installment, step_up_percentage, year) + extra_payment(installment, extra_emi_per_year, month)
