import math

import pytest

from prepay_vs_invest.core.loan import LoanTrack, monthly_installment


def test_installment_zero_rate_is_straight_line():
    assert monthly_installment(1_200_000, 0.0, 120) == 10_000


def test_installment_matches_closed_form():
    r = 8.5 / 12 / 100
    emi = monthly_installment(5_000_000, r, 240)
    assert emi == pytest.approx(43_391, abs=2)
    assert math.isfinite(emi)


def test_installment_amortizes_principal():
    r = 0.01
    emi = monthly_installment(10_000, r, 12)
    track = LoanTrack(10_000)
    for month in range(1, 12):
        track, _ = track.pay(emi, r, month)
    assert track.balance == pytest.approx(emi / (1 + r), rel=1e-9)


def test_pay_reduces_balance_and_accrues_interest():
    track, step = LoanTrack(1_000).pay(100, 0.01, month=1)
    assert step.interest == pytest.approx(10)
    assert step.amount_paid == 100
    assert step.unused == 0
    assert track.balance == pytest.approx(910)
    assert track.cumulative_interest == pytest.approx(10)
    assert not track.is_closed


def test_overpayment_closes_and_returns_remainder():
    track, step = LoanTrack(500).pay(1_000, 0.01, month=7)
    assert track.is_closed
    assert track.closed_month == 7
    assert track.balance == 0
    assert step.amount_paid == pytest.approx(505)
    assert step.unused == pytest.approx(495)
    assert track.cumulative_interest == pytest.approx(5)


def test_closed_track_is_inert():
    closed, _ = LoanTrack(500).pay(1_000, 0.01, month=1)
    after, step = closed.pay(1_000, 0.01, month=2)
    assert after is closed
    assert step.amount_paid == 0
    assert step.interest == 0
    assert after.closed_month == 1


def test_exact_payoff_does_not_close_until_next_month():
    track, step = LoanTrack(100).pay(100, 0.0, month=1)
    assert track.balance == 0
    assert not track.is_closed

    track, step = track.pay(100, 0.0, month=2)
    assert track.closed_month == 2
    assert step.unused == 100
