import pytest

from prepay_vs_invest.core.engine import EngineState, StrategyState, advance_month, advance_strategy
from prepay_vs_invest.core.inputs import LoanInput
from prepay_vs_invest.core.loan import LoanTrack


def test_open_regular_strategy_invests_surplus_over_installment():
    state = advance_strategy(StrategyState(LoanTrack(10_000)), 500, 800, 0.0, 0.0, month=1)
    assert state.loan.balance == 9_500
    assert state.investment.total_contributed == 300


def test_open_aggressive_strategy_invests_nothing():
    state = advance_strategy(StrategyState(LoanTrack(10_000)), 800, 800, 0.0, 0.0, month=1)
    assert state.loan.balance == 9_200
    assert state.investment.total_contributed == 0
    assert state.investment.value == 0


def test_closing_month_invests_budget_left_after_actual_payment():
    state = advance_strategy(StrategyState(LoanTrack(300)), 500, 800, 0.0, 0.0, month=4)
    assert state.loan.closed_month == 4
    assert state.investment.total_contributed == 500


def test_closed_strategy_invests_whole_budget():
    closed = StrategyState(LoanTrack(0.0, closed_month=1))
    state = advance_strategy(closed, 500, 800, 0.01, 0.0, month=2)
    assert state.investment.total_contributed == 800
    assert state.loan.cumulative_interest == 0


def test_advance_month_is_pure():
    loan_input = LoanInput(120_000, 6.0, 10, 8.0, 1, 5)
    state = EngineState.opening(loan_input.principal)
    first = advance_month(state, 12, loan_input, 1_332.25)
    second = advance_month(state, 12, loan_input, 1_332.25)
    assert first == second
    assert state == EngineState.opening(loan_input.principal)


def test_advance_month_snapshot_fields():
    loan_input = LoanInput(120_000, 12.0, 10, 12.0, 1, 0)
    state, snapshot = advance_month(EngineState.opening(120_000), 12, loan_input, 2_000)
    assert snapshot.month == 12
    assert snapshot.year == 1
    # Regular pays 2,000; aggressive pays 4,000 (installment + one extra EMI).
    assert snapshot.loan_balance_regular == pytest.approx(120_000 - 800)
    assert snapshot.loan_balance_aggressive == pytest.approx(120_000 - 2_800)
    assert snapshot.total_contributed_regular == pytest.approx(2_000)
    assert snapshot.investment_value_regular == pytest.approx(2_020)
    assert snapshot.total_contributed_aggressive == 0
    assert snapshot.cumulative_interest_regular == pytest.approx(1_200)
    assert state.aggressive.loan.balance == snapshot.loan_balance_aggressive
