from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))


import streamlit as st

from prepay_vs_invest.core.advice import generate_advice
from prepay_vs_invest.core.inputs import LoanInput
from prepay_vs_invest.core.scenarios import base_scenario
from prepay_vs_invest.core.simulator import PREPAY, SimulationResult, simulate
from prepay_vs_invest.core.what_if import breakeven_sip_rate, sip_return_sweep
from prepay_vs_invest.validation.checks import InvalidInput

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Loan vs SIP Strategizer", layout="wide")


def sidebar_inputs() -> LoanInput:
    defaults = base_scenario()
    with st.sidebar.expander("Loan", expanded=True):
        principal = st.number_input(
            "Loan amount", min_value=0, max_value=1_000_000_000, value=int(defaults.principal), step=100_000
        )
        interest_rate = st.number_input(
            "Interest rate (annual %)", min_value=0.0, max_value=30.0, value=defaults.interest_rate, step=0.05, format="%.2f"
        )
        tenure_years = st.slider("Tenure (years)", min_value=1, max_value=40, value=defaults.tenure_years)

    with st.sidebar.expander("Investment", expanded=True):
        sip_return = st.number_input(
            "SIP expected return (annual %)", min_value=0.0, max_value=30.0, value=defaults.sip_return_rate, step=0.5
        )

    with st.sidebar.expander("Prepayment capacity", expanded=True):
        extra_emi = st.number_input(
            "Extra EMIs / year", min_value=0.0, max_value=12.0, value=float(defaults.extra_emi_per_year), step=0.5
        )
        step_up = st.number_input(
            "Annual step-up (%)", min_value=0.0, max_value=50.0, value=defaults.step_up_percentage, step=0.5
        )

    return LoanInput(
        principal=float(principal),
        interest_rate=float(interest_rate),
        tenure_years=int(tenure_years),
        sip_return_rate=float(sip_return),
        extra_emi_per_year=float(extra_emi),
        step_up_percentage=float(step_up),
    )


def render_verdict(result: SimulationResult) -> None:
    summary = result.summary
    strategy = "B" if summary.winning_strategy == PREPAY else "A"
    message = (
        f"**Recommendation: {summary.recommendation}.** Strategy {strategy} results in "
        f"${summary.net_wealth_difference:,.0f} more wealth after {result.input.tenure_years} years."
    )
    if summary.winning_strategy == PREPAY:
        st.success(message)
    else:
        st.info(message)

    cols = st.columns(4)
    cols[0].metric("Invest surplus wealth", f"${summary.final_wealth_regular:,.0f}")
    cols[1].metric("Prepay first wealth", f"${summary.final_wealth_aggressive:,.0f}")
    cols[2].metric("Interest saved", f"${summary.interest_saved:,.0f}")
    cols[3].metric("Loan-free sooner by", f"{summary.years_saved(result.input.total_months):.1f} yrs")


def render_charts(result: SimulationResult) -> None:
    df = result.to_frame()
    st.markdown("**Investment value**")
    wealth = df[["investment_value_regular", "investment_value_aggressive"]].rename(
        columns={"investment_value_regular": "A: Invest surplus", "investment_value_aggressive": "B: Prepay first"}
    )
    st.line_chart(wealth, height=280)

    st.markdown("**Outstanding loan balance**")
    balances = df[["loan_balance_regular", "loan_balance_aggressive"]].rename(
        columns={"loan_balance_regular": "A: Invest surplus", "loan_balance_aggressive": "B: Prepay first"}
    )
    st.line_chart(balances, height=280)


def render_roi(result: SimulationResult) -> None:
    st.subheader("Return on invested amounts")
    df = result.roi_breakdown().reset_index()
    for col in ["invested", "gained", "final_wealth"]:
        df[col] = df[col].map(lambda x: f"${x:,.0f}")
    df["roi_pct"] = df["roi_pct"].map(lambda x: f"{x:.0f}%")
    df.columns = ["Strategy", "Principal invested", "Wealth gained", "Total value", "ROI"]
    st.table(df)


def render_breakdown(result: SimulationResult) -> None:
    st.subheader("Comparison breakdown")
    view = st.radio("View", options=["Yearly", "Monthly"], horizontal=True)
    df = result.yearly_breakdown() if view == "Yearly" else result.to_frame()
    columns = {
        "loan_balance_aggressive": "Loan bal (Prepay)",
        "investment_value_regular": "Wealth (A: Invest)",
        "investment_value_aggressive": "Wealth (B: Prepay)",
        "total_contributed_regular": "Invested (A)",
        "total_contributed_aggressive": "Invested (B)",
    }
    table = df[list(columns)].rename(columns=columns)
    st.dataframe(table.style.format("{:,.0f}"), use_container_width=True)


def render_sensitivity(loan_input: LoanInput) -> None:
    st.subheader("Sensitivity to investment return")
    sweep = sip_return_sweep(loan_input)
    st.line_chart(sweep[["final_wealth_regular", "final_wealth_aggressive"]], height=280)
    breakeven = breakeven_sip_rate(loan_input)
    if breakeven is None:
        st.caption("The winner does not change for returns between 0% and 30%.")
    else:
        st.caption(f"Prepaying stops winning at roughly {breakeven:.2f}% annual investment return.")


def main():
    st.title("Loan vs SIP Strategizer")
    st.write('Compare "Invest Surplus" vs "Prepay Loan then Invest" strategies.')

    loan_input = sidebar_inputs()

    try:
        result = simulate(loan_input)
    except InvalidInput as exc:
        st.error(f"Unable to run simulation: {exc}")
        return

    st.metric("Base EMI", f"${result.base_installment:,.0f} / month")
    render_verdict(result)

    tab_charts, tab_table, tab_sensitivity, tab_advice = st.tabs(
        ["Charts", "Breakdown", "Sensitivity", "AI advice"]
    )

    with tab_charts:
        render_charts(result)
        render_roi(result)

    with tab_table:
        render_breakdown(result)

    with tab_sensitivity:
        render_sensitivity(loan_input)

    with tab_advice:
        if st.button("Get AI advice", type="primary"):
            with st.spinner("Asking the advisor..."):
                st.markdown(generate_advice(loan_input, result))
        else:
            st.info("Click **Get AI advice** for a narrative recommendation.")


if __name__ == "__main__":
    main()
