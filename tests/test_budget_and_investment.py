import pytest

from prepay_vs_invest.core.budget import monthly_budget, year_of_month
from prepay_vs_invest.core.investment import InvestmentTrack


def test_year_of_month():
    assert [year_of_month(m) for m in (1, 12, 13, 24, 25)] == [1, 1, 2, 2, 3]


def test_first_year_has_no_step_up():
    for month in range(1, 12):
        assert monthly_budget(1_000, 10, 0, month) == 1_000


def test_step_up_compounds_per_year():
    assert monthly_budget(1_000, 10, 0, 13) == pytest.approx(1_100)
    assert monthly_budget(1_000, 10, 0, 25) == pytest.approx(1_210)


def test_extra_payment_only_at_year_end():
    assert monthly_budget(1_000, 0, 1, 11) == 1_000
    assert monthly_budget(1_000, 0, 1, 12) == 2_000
    assert monthly_budget(1_000, 0, 2, 24) == 3_000
    assert monthly_budget(1_000, 5, 1, 24) == pytest.approx(1_050 + 1_000)


def test_contribution_grows_in_the_month_it_is_made():
    track = InvestmentTrack().contribute(1_000, 0.01)
    assert track.value == pytest.approx(1_010)
    assert track.total_contributed == 1_000


def test_zero_contribution_only_grows():
    track = InvestmentTrack(value=1_000, total_contributed=800).contribute(0, 0.01)
    assert track.value == pytest.approx(1_010)
    assert track.total_contributed == 800
