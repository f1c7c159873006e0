from dataclasses import dataclass


@dataclass(frozen=True)
class LoanInput:
    principal: float
    interest_rate: float  # annual %, e.g. 8.5
    tenure_years: int
    sip_return_rate: float  # annual %, e.g. 12.0
    extra_emi_per_year: float = 0.0
    step_up_percentage: float = 0.0

    @property
    def total_months(self) -> int:
        return int(self.tenure_years) * 12

    @property
    def monthly_rate(self) -> float:
        return self.interest_rate / 12 / 100

    @property
    def sip_monthly_rate(self) -> float:
        return self.sip_return_rate / 12 / 100
