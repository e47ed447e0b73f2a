"""
Mortgage Form Inputs

Holds the raw values of the mortgage calculator form, its defaults, and the
recalculation gate that decides whether the inputs are fit to be handed to
the calculation engine. The engine itself never validates.
"""

from dataclasses import dataclass
from typing import List, Optional

from app.calculations.currency import parse_grouped
from app.calculations.payment import LoanParameters
from app.config import get_settings

DOWN_PAYMENT_MESSAGE = "Down payment must be less than the Price"


@dataclass(frozen=True)
class MortgageFormValues:
    """Raw form values. Price and down payment are comma-grouped strings."""

    price: str
    down_payment: str
    interest: float  # Annual rate in percent
    term: float  # Years
    property_tax: float = 0.0  # Monthly
    insurance: float = 0.0  # Monthly


def default_form_values(simple_mode: bool = False) -> MortgageFormValues:
    """Initial form values; simple mode drops tax and insurance."""
    if simple_mode:
        return MortgageFormValues(
            price="300,000",
            down_payment="100,000",
            interest=5,
            term=30,
            property_tax=0,
            insurance=0,
        )
    return MortgageFormValues(
        price="300,000",
        down_payment="100,000",
        interest=5,
        term=30,
        property_tax=150,
        insurance=300,
    )


def is_down_payment_greater(values: MortgageFormValues) -> bool:
    return parse_grouped(values.down_payment) >= parse_grouped(values.price)


def validation_errors(
    values: MortgageFormValues,
    payments_per_year: int = 12,
    max_rate: Optional[float] = None,
    max_term: Optional[float] = None,
    max_payments_per_year: Optional[int] = None,
) -> List[str]:
    """
    Check form values against the recalculation preconditions.

    Limits left as None are taken from the application settings.

    Returns:
        List of error messages (empty when the form may be recalculated)
    """
    settings = get_settings()
    if max_rate is None:
        max_rate = settings.max_annual_rate_percent
    if max_term is None:
        max_term = settings.max_term_years
    if max_payments_per_year is None:
        max_payments_per_year = settings.max_payments_per_year

    errors = []
    price = parse_grouped(values.price)
    down_payment = parse_grouped(values.down_payment)

    if price <= 0:
        errors.append("Price must be greater than 0")
    if down_payment <= 0:
        errors.append("Down payment must be greater than 0")
    if price > 0 and down_payment >= price:
        errors.append(DOWN_PAYMENT_MESSAGE)
    if not 0 < values.interest <= max_rate:
        errors.append(f"Interest rate must be greater than 0 and at most {max_rate:g}")
    if not 0 < values.term <= max_term:
        errors.append(f"Loan term must be greater than 0 and at most {max_term:g} years")
    if not 1 <= payments_per_year <= max_payments_per_year:
        errors.append(f"Payments per year must be between 1 and {max_payments_per_year}")

    return errors


def is_recalculable(
    values: MortgageFormValues,
    payments_per_year: int = 12,
    max_rate: Optional[float] = None,
    max_term: Optional[float] = None,
    max_payments_per_year: Optional[int] = None,
) -> bool:
    return not validation_errors(
        values,
        payments_per_year=payments_per_year,
        max_rate=max_rate,
        max_term=max_term,
        max_payments_per_year=max_payments_per_year,
    )


def to_loan_parameters(
    values: MortgageFormValues,
    payments_per_year: int = 12,
    simple_mode: bool = False,
) -> LoanParameters:
    """Build engine inputs; the financed principal is price minus down payment."""
    return LoanParameters(
        principal=float(parse_grouped(values.price) - parse_grouped(values.down_payment)),
        annual_rate_percent=float(values.interest),
        term_years=float(values.term),
        payments_per_year=payments_per_year,
        monthly_property_tax=float(values.property_tax),
        monthly_insurance=float(values.insurance),
        simple_mode=simple_mode,
    )
