"""
Loan Amortization Schedule

Builds the period-by-period payoff schedule of a mortgage, seeded from the
first-period payment breakdown. Each period is re-rounded to cents and the
final period absorbs the accumulated rounding drift so the schedule always
ends at a zero balance.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from app.calculations.payment import (
    LoanParameters,
    PaymentBreakdown,
    calculate_payment_breakdown,
    periodic_rate,
)


@dataclass(frozen=True)
class AmortizationEntry:
    """One row of the amortization schedule."""

    payment_amount: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float
    cumulative_interest: float
    cumulative_principal: float
    payment_date: date


def _iteration_count(total_periods: float) -> int:
    """Number of loop iterations after the seed entry (ceil for fractional terms)."""
    if not math.isfinite(total_periods) or total_periods <= 0:
        return 0
    # Strip float noise such as 1.1 * 10 == 11.000000000000002
    return math.ceil(round(total_periods, 9))


def generate_amortization_schedule(
    breakdown: PaymentBreakdown,
    annual_rate_percent: float,
    payments_per_year: int,
    term_years: float,
    start_date: Optional[date] = None,
) -> List[AmortizationEntry]:
    """
    Generate the full amortization schedule.

    The first entry is built directly from the payment breakdown; every later
    entry is derived from the one before it. The result has
    ``payments_per_year * term_years + 1`` entries.

    Args:
        breakdown: First-period figures from calculate_payment_breakdown
        annual_rate_percent: Annual interest rate in percent (e.g. 5.0)
        payments_per_year: Number of payments per year
        term_years: Loan term in years
        start_date: Date of the first entry (defaults to today)

    Returns:
        List of AmortizationEntry, last entry with a remaining balance of 0
    """
    if start_date is None:
        start_date = date.today()

    rate = periodic_rate(annual_rate_percent, payments_per_year)
    iterations = _iteration_count(term_years * payments_per_year)

    prior = AmortizationEntry(
        payment_amount=breakdown.monthly_payment,
        principal_portion=breakdown.monthly_principal,
        interest_portion=breakdown.monthly_interest,
        remaining_balance=breakdown.remaining_balance_after_first_payment,
        cumulative_interest=breakdown.monthly_interest,
        cumulative_principal=breakdown.monthly_principal,
        payment_date=start_date,
    )
    schedule = [prior]

    for i in range(iterations):
        if i == iterations - 1:
            # Final-period correction
            payment = prior.payment_amount + (
                prior.remaining_balance - prior.principal_portion
            )
            balance = 0.0
        else:
            payment = prior.payment_amount
            balance = round(
                round(prior.remaining_balance, 2) - round(prior.principal_portion, 2), 2
            )

        # Interest accrues on the prior balance
        interest = round(prior.remaining_balance * rate, 2)
        principal = round(payment - interest, 2)

        entry = AmortizationEntry(
            payment_amount=payment,
            principal_portion=principal,
            interest_portion=interest,
            remaining_balance=balance,
            cumulative_interest=prior.cumulative_interest + interest,
            cumulative_principal=prior.cumulative_principal + principal,
            payment_date=start_date + relativedelta(months=i + 1),
        )
        schedule.append(entry)
        prior = entry

    return schedule


def schedule_for_loan(
    params: LoanParameters, start_date: Optional[date] = None
) -> List[AmortizationEntry]:
    """Compute the payment breakdown and generate the schedule in one call."""
    breakdown = calculate_payment_breakdown(params)
    return generate_amortization_schedule(
        breakdown,
        annual_rate_percent=params.annual_rate_percent,
        payments_per_year=params.payments_per_year,
        term_years=params.term_years,
        start_date=start_date,
    )


def summarize_schedule(schedule: List[AmortizationEntry]) -> Dict[str, float]:
    """Calculate totals over a schedule."""
    if not schedule:
        return {
            "payments": 0,
            "total_paid": 0.0,
            "total_interest": 0.0,
            "total_principal": 0.0,
            "final_balance": 0.0,
        }

    last = schedule[-1]
    return {
        "payments": len(schedule),
        "total_paid": sum(entry.payment_amount for entry in schedule),
        "total_interest": last.cumulative_interest,
        "total_principal": last.cumulative_principal,
        "final_balance": last.remaining_balance,
    }


def yearly_summary(
    schedule: List[AmortizationEntry], payments_per_year: int = 12
) -> List[Dict]:
    """
    Aggregate a schedule by loan year.

    The schedule carries one entry more than the number of payments; that
    final entry is counted in the last loan year.

    Args:
        schedule: Amortization schedule
        payments_per_year: Entries per year

    Returns:
        List of dicts with keys: year, principal, interest, payments, ending_balance
    """
    per_year = max(int(payments_per_year), 1)
    last_year = max(math.ceil((len(schedule) - 1) / per_year), 1)
    years: List[Dict] = []

    for index, entry in enumerate(schedule):
        year = min(index // per_year + 1, last_year)
        if not years or years[-1]["year"] != year:
            years.append(
                {
                    "year": year,
                    "principal": 0.0,
                    "interest": 0.0,
                    "payments": 0.0,
                    "ending_balance": 0.0,
                }
            )
        row = years[-1]
        row["principal"] += entry.principal_portion
        row["interest"] += entry.interest_portion
        row["payments"] += entry.payment_amount
        row["ending_balance"] = entry.remaining_balance

    return years
