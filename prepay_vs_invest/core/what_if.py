from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .inputs import LoanInput
from .simulator import PREPAY, SimulationResult, simulate


def run_what_if(base: LoanInput, **overrides) -> SimulationResult:
    """Deterministic re-run of ``base`` with some fields changed."""
    return simulate(replace(base, **overrides))


def sip_return_sweep(base: LoanInput, rates: Optional[Iterable[float]] = None) -> pd.DataFrame:
    """Final wealth of both strategies across a range of investment returns (annual %)."""
    if rates is None:
        rates = np.arange(0.0, 20.5, 0.5)

    records = []
    for rate in rates:
        summary = run_what_if(base, sip_return_rate=float(rate)).summary
        records.append(
            {
                "sip_return_rate": float(rate),
                "final_wealth_regular": summary.final_wealth_regular,
                "final_wealth_aggressive": summary.final_wealth_aggressive,
                "wealth_difference": summary.final_wealth_aggressive - summary.final_wealth_regular,
                "winning_strategy": summary.winning_strategy,
            }
        )
    return pd.DataFrame.from_records(records).set_index("sip_return_rate")


def breakeven_sip_rate(
    base: LoanInput, low: float = 0.0, high: float = 30.0, tol: float = 1e-4, max_iter: int = 100
) -> Optional[float]:
    """Investment return (annual %) at which prepaying stops winning.

    Returns None if the winner is the same at both ends of ``[low, high]``.
    """
    def prepay_wins(rate: float) -> bool:
        return run_what_if(base, sip_return_rate=rate).summary.winning_strategy == PREPAY

    low_wins, high_wins = prepay_wins(low), prepay_wins(high)
    if low_wins == high_wins:
        return None

    for _ in range(max_iter):
        if high - low <= tol:
            break
        mid = (low + high) / 2
        if prepay_wins(mid) == low_wins:
            low = mid
        else:
            high = mid
    return (low + high) / 2
