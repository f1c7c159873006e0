from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .budget import monthly_budget, year_of_month
from .inputs import LoanInput
from .investment import InvestmentTrack
from .loan import LoanTrack


@dataclass(frozen=True)
class StrategyState:
    loan: LoanTrack
    investment: InvestmentTrack = InvestmentTrack()


@dataclass(frozen=True)
class EngineState:
    regular: StrategyState
    aggressive: StrategyState

    @classmethod
    def opening(cls, principal: float) -> EngineState:
        return cls(regular=StrategyState(LoanTrack(principal)), aggressive=StrategyState(LoanTrack(principal)))


@dataclass(frozen=True)
class MonthlySnapshot:
    month: int
    year: int
    loan_balance_regular: float
    loan_balance_aggressive: float
    investment_value_regular: float
    investment_value_aggressive: float
    cumulative_interest_regular: float
    cumulative_interest_aggressive: float
    total_contributed_regular: float
    total_contributed_aggressive: float


def advance_strategy(
    state: StrategyState,
    proposed_payment: float,
    budget: float,
    loan_rate: float,
    investment_rate: float,
    month: int,
) -> StrategyState:
    """One month of a strategy: the loan takes what it needs, the rest of the budget is invested.

    On the closing month only the clamped payment counts against the budget.
    """
    loan, step = state.loan.pay(proposed_payment, loan_rate, month)
    contribution = max(budget - step.amount_paid, 0.0)
    return StrategyState(loan=loan, investment=state.investment.contribute(contribution, investment_rate))


def advance_month(
    state: EngineState, month: int, loan_input: LoanInput, installment: float
) -> Tuple[EngineState, MonthlySnapshot]:
    """Pure per-month transition shared by both strategies."""
    budget = monthly_budget(installment, loan_input.step_up_percentage, loan_input.extra_emi_per_year, month)
    loan_rate = loan_input.monthly_rate
    investment_rate = loan_input.sip_monthly_rate

    # Invest surplus: only the contractual installment goes to the lender.
    regular = advance_strategy(state.regular, installment, budget, loan_rate, investment_rate, month)
    # Prepay first: the full budget goes to the lender until the loan closes.
    aggressive = advance_strategy(state.aggressive, budget, budget, loan_rate, investment_rate, month)

    snapshot = MonthlySnapshot(
        month=month,
        year=year_of_month(month),
        loan_balance_regular=max(0.0, regular.loan.balance),
        loan_balance_aggressive=max(0.0, aggressive.loan.balance),
        investment_value_regular=regular.investment.value,
        investment_value_aggressive=aggressive.investment.value,
        cumulative_interest_regular=regular.loan.cumulative_interest,
        cumulative_interest_aggressive=aggressive.loan.cumulative_interest,
        total_contributed_regular=regular.investment.total_contributed,
        total_contributed_aggressive=aggressive.investment.total_contributed,
    )
    return EngineState(regular=regular, aggressive=aggressive), snapshot
