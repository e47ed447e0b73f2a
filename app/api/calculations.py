"""
Mortgage calculation API endpoints.

These endpoints accept raw form inputs and return calculated results.
Inputs are checked against the recalculation gate before they reach the
calculation engine.
"""

import logging
from dataclasses import asdict
from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from app.calculations import amortization, charts, currency, form, payment
from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter()


class MortgageInput(BaseModel):
    """Input for mortgage calculations."""

    # Comma-grouped whole amounts, e.g. "300,000"
    price: str
    down_payment: str

    interest: float  # Annual rate in percent
    term: float  # Years
    property_tax: float = 0.0  # Monthly
    insurance: float = 0.0  # Monthly

    payments_per_year: int = Field(settings.default_payments_per_year, ge=1)
    simple_mode: bool = False
    start_date: Optional[date] = None


class FormDefaults(BaseModel):
    """Initial calculator form values."""

    price: str
    down_payment: str
    interest: float
    term: float
    property_tax: float
    insurance: float


class PaymentResponse(BaseModel):
    """Response with the payment breakdown."""

    breakdown: Dict[str, float]
    monthly_total_display: str
    lifetime_total_display: str
    slices: List[dict]


class ScheduleResponse(BaseModel):
    """Response with the amortization schedule."""

    schedule: List[dict]
    summary: Dict[str, float]
    yearly: List[dict]
    chart: Dict[str, list]


class CurrencyInput(BaseModel):
    """Input for currency normalization."""

    value: str


class CurrencyResponse(BaseModel):
    formatted: str
    amount: int


def _gated_parameters(inputs: MortgageInput) -> payment.LoanParameters:
    """Apply the recalculation gate and build engine inputs."""
    values = form.MortgageFormValues(
        price=inputs.price,
        down_payment=inputs.down_payment,
        interest=inputs.interest,
        term=inputs.term,
        property_tax=inputs.property_tax,
        insurance=inputs.insurance,
    )
    errors = form.validation_errors(values, payments_per_year=inputs.payments_per_year)
    if errors:
        logger.warning(f"Rejected mortgage inputs: {'; '.join(errors)}")
        raise HTTPException(status_code=400, detail=errors)

    return form.to_loan_parameters(
        values,
        payments_per_year=inputs.payments_per_year,
        simple_mode=inputs.simple_mode,
    )


@router.get("/mortgage/defaults", response_model=FormDefaults)
async def mortgage_defaults(simple_mode: bool = False):
    """Return the initial form values."""
    return FormDefaults(**asdict(form.default_form_values(simple_mode)))


@router.post("/mortgage/payment", response_model=PaymentResponse)
async def calculate_mortgage_payment(inputs: MortgageInput):
    """Calculate the payment breakdown for a mortgage."""
    params = _gated_parameters(inputs)
    logger.debug(f"Calculating payment for {params}")

    breakdown = payment.calculate_payment_breakdown(params)

    return PaymentResponse(
        breakdown=asdict(breakdown),
        monthly_total_display=currency.format_amount(breakdown.total_monthly_payment),
        lifetime_total_display=currency.format_amount(breakdown.lifetime_total),
        slices=charts.payment_slices(breakdown),
    )


@router.post("/mortgage/schedule", response_model=ScheduleResponse)
async def calculate_mortgage_schedule(inputs: MortgageInput):
    """Generate the amortization schedule for a mortgage."""
    params = _gated_parameters(inputs)
    logger.debug(f"Generating schedule for {params}")

    schedule = amortization.schedule_for_loan(params, start_date=inputs.start_date)

    return ScheduleResponse(
        schedule=[
            {**asdict(entry), "payment_date": entry.payment_date.isoformat()}
            for entry in schedule
        ],
        summary=amortization.summarize_schedule(schedule),
        yearly=amortization.yearly_summary(schedule, params.payments_per_year),
        chart=charts.line_series(schedule, max_points=settings.chart_max_points),
    )


@router.post("/currency", response_model=CurrencyResponse)
async def normalize_currency(inputs: CurrencyInput):
    """Format a raw currency string and return its whole amount."""
    formatted = currency.format_grouped(inputs.value)
    return CurrencyResponse(formatted=formatted, amount=currency.parse_grouped(formatted))
