from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvestmentTrack:
    value: float = 0.0
    total_contributed: float = 0.0

    def contribute(self, amount: float, monthly_rate: float) -> InvestmentTrack:
        """Add this month's contribution, then grow the whole pot by one month."""
        return InvestmentTrack(
            value=(self.value + amount) * (1 + monthly_rate),
            total_contributed=self.total_contributed + amount,
        )
