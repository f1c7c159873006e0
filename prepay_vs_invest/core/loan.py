from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple


def monthly_installment(principal: float, monthly_rate: float, term_months: int) -> float:
    if term_months <= 0:
        return 0.0
    if monthly_rate == 0:
        return principal / term_months
    factor = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * factor / (factor - 1)


@dataclass(frozen=True)
class LoanStep:
    interest: float = 0.0
    amount_paid: float = 0.0
    unused: float = 0.0


@dataclass(frozen=True)
class LoanTrack:
    """Outstanding balance of one strategy's loan. Closure is one-way."""

    balance: float
    cumulative_interest: float = 0.0
    closed_month: Optional[int] = None

    @property
    def is_closed(self) -> bool:
        return self.closed_month is not None

    def pay(self, payment: float, monthly_rate: float, month: int) -> Tuple[LoanTrack, LoanStep]:
        """Apply one month of interest and a proposed payment.

        If the payment would take the balance below zero, only
        ``balance + interest`` is absorbed and the rest comes back as ``unused``.
        """
        if self.is_closed:
            return self, LoanStep()

        interest = self.balance * monthly_rate
        principal_paid = payment - interest
        cumulative_interest = self.cumulative_interest + interest

        if self.balance - principal_paid < 0:
            amount_paid = self.balance + interest
            closed = replace(self, balance=0.0, cumulative_interest=cumulative_interest, closed_month=month)
            return closed, LoanStep(interest=interest, amount_paid=amount_paid, unused=payment - amount_paid)

        opened = replace(self, balance=self.balance - principal_paid, cumulative_interest=cumulative_interest)
        return opened, LoanStep(interest=interest, amount_paid=payment)
