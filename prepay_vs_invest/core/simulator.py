from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Tuple

import pandas as pd

from prepay_vs_invest.validation.checks import validate_loan_input

from .engine import EngineState, MonthlySnapshot, advance_month
from .inputs import LoanInput
from .loan import monthly_installment

logger = logging.getLogger(__name__)

PREPAY = "Prepay"
INVEST = "Invest"


@dataclass(frozen=True)
class SimulationSummary:
    regular_total_interest: float
    aggressive_total_interest: float
    regular_tenure_months: int
    aggressive_tenure_months: int
    interest_saved: float
    final_wealth_regular: float
    final_wealth_aggressive: float
    total_invested_regular: float
    total_invested_aggressive: float
    winning_strategy: str
    net_wealth_difference: float

    def years_saved(self, total_months: int) -> float:
        """Years of loan tenure the prepay strategy avoids."""
        return (total_months - self.aggressive_tenure_months) / 12

    @property
    def recommendation(self) -> str:
        if self.winning_strategy == PREPAY:
            return "Prepay Aggressively"
        return "Don't Prepay, Invest Surplus"


@dataclass(frozen=True)
class SimulationResult:
    input: LoanInput
    base_installment: float
    monthly: Tuple[MonthlySnapshot, ...]
    summary: SimulationSummary

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame.from_records([asdict(s) for s in self.monthly]).set_index("month")

    def yearly_breakdown(self) -> pd.DataFrame:
        """Year-end rows: the last snapshot of every loan year."""
        return self.to_frame().reset_index().groupby("year").last()

    def roi_breakdown(self) -> pd.DataFrame:
        rows = []
        for label, invested, final in (
            ("Invest Surplus", self.summary.total_invested_regular, self.summary.final_wealth_regular),
            ("Prepay First", self.summary.total_invested_aggressive, self.summary.final_wealth_aggressive),
        ):
            gained = max(0.0, final - invested)
            roi = gained / invested * 100 if invested > 0 else 0.0
            rows.append({"strategy": label, "invested": invested, "gained": gained, "final_wealth": final, "roi_pct": roi})
        return pd.DataFrame(rows).set_index("strategy")


def pick_winner(final_wealth_regular: float, final_wealth_aggressive: float) -> str:
    """Prepay only wins outright; a tie goes to investing the surplus."""
    return PREPAY if final_wealth_aggressive > final_wealth_regular else INVEST


def _summarize(state: EngineState, total_months: int) -> SimulationSummary:
    regular, aggressive = state.regular, state.aggressive

    final_wealth_regular = regular.investment.value - max(0.0, regular.loan.balance)
    final_wealth_aggressive = aggressive.investment.value - max(0.0, aggressive.loan.balance)

    return SimulationSummary(
        regular_total_interest=regular.loan.cumulative_interest,
        aggressive_total_interest=aggressive.loan.cumulative_interest,
        regular_tenure_months=regular.loan.closed_month or total_months,
        aggressive_tenure_months=aggressive.loan.closed_month or total_months,
        interest_saved=regular.loan.cumulative_interest - aggressive.loan.cumulative_interest,
        final_wealth_regular=final_wealth_regular,
        final_wealth_aggressive=final_wealth_aggressive,
        total_invested_regular=regular.investment.total_contributed,
        total_invested_aggressive=aggressive.investment.total_contributed,
        winning_strategy=pick_winner(final_wealth_regular, final_wealth_aggressive),
        net_wealth_difference=abs(final_wealth_aggressive - final_wealth_regular),
    )


def simulate(loan_input: LoanInput) -> SimulationResult:
    validate_loan_input(loan_input)

    total_months = loan_input.total_months
    installment = monthly_installment(loan_input.principal, loan_input.monthly_rate, total_months)

    state = EngineState.opening(loan_input.principal)
    snapshots = []
    for month in range(1, total_months + 1):
        state, snapshot = advance_month(state, month, loan_input, installment)
        snapshots.append(snapshot)

    summary = _summarize(state, total_months)
    logger.debug(
        "Simulated %d months: installment=%.2f winner=%s difference=%.2f",
        total_months,
        installment,
        summary.winning_strategy,
        summary.net_wealth_difference,
    )
    return SimulationResult(input=loan_input, base_installment=installment, monthly=tuple(snapshots), summary=summary)
