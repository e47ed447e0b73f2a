"""
Mortgage Payment Calculations

Computes the single-period payment breakdown of an amortizing loan using the
standard annuity formula:

    payment = P * i * (1 + i)^n / ((1 + i)^n - 1)

Degenerate inputs (zero rate, zero term) are not rejected. They flow through
the arithmetic and come back as nan/inf, so callers must gate their inputs
before calling (see app.calculations.form).
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class LoanParameters:
    """Inputs for one payment computation."""

    principal: float  # Financed amount (price minus down payment)
    annual_rate_percent: float  # e.g. 5.0 for 5%
    term_years: float
    payments_per_year: int = 12
    monthly_property_tax: float = 0.0
    monthly_insurance: float = 0.0
    simple_mode: bool = False  # Exclude tax and insurance from the total


@dataclass(frozen=True)
class PaymentBreakdown:
    """Payment figures for the first period of a loan."""

    monthly_payment: float  # Principal + interest, rounded down to whole units
    total_monthly_payment: float  # Rounded payment plus tax/insurance unless simple mode
    monthly_interest: float
    monthly_principal: float
    remaining_balance_after_first_payment: float
    lifetime_total: float
    monthly_tax: float = 0.0
    monthly_insurance: float = 0.0
    total_periods: float = 0.0


def periodic_rate(annual_rate_percent: float, payments_per_year: int) -> float:
    """Annual percentage rate converted to a per-period decimal rate."""
    with np.errstate(divide="ignore", invalid="ignore"):
        rate = np.float64(annual_rate_percent) / 100 / np.float64(payments_per_year)
    return float(rate)


def calculate_payment_breakdown(params: LoanParameters) -> PaymentBreakdown:
    """
    Calculate the payment breakdown for a loan.

    The principal/interest split is for period 1 only and is based on the
    original principal, not on the rounded payment.

    Args:
        params: Loan parameters

    Returns:
        PaymentBreakdown (fields may be nan/inf for degenerate inputs)
    """
    principal = np.float64(params.principal)
    rate = np.float64(periodic_rate(params.annual_rate_percent, params.payments_per_year))
    total_periods = np.float64(params.term_years) * params.payments_per_year

    if params.simple_mode:
        extras = np.float64(0)
    else:
        extras = np.float64(params.monthly_property_tax) + np.float64(params.monthly_insurance)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        period_interest = principal * rate
        growth_factor = (1 + rate) ** total_periods
        raw_payment = period_interest * growth_factor / (growth_factor - 1)

        monthly_payment = np.floor(raw_payment)
        # Half-up rounding
        total_monthly_payment = np.floor(raw_payment + 0.5) + extras

        monthly_principal = monthly_payment - period_interest
        remaining_balance = principal - monthly_principal
        lifetime_total = total_monthly_payment * total_periods

    return PaymentBreakdown(
        monthly_payment=float(monthly_payment),
        total_monthly_payment=float(total_monthly_payment),
        monthly_interest=float(period_interest),
        monthly_principal=float(monthly_principal),
        remaining_balance_after_first_payment=float(remaining_balance),
        lifetime_total=float(lifetime_total),
        monthly_tax=float(params.monthly_property_tax),
        monthly_insurance=float(params.monthly_insurance),
        total_periods=float(total_periods),
    )
