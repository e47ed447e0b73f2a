"""
Chart Data

Shapes engine output for the payment pie chart and the amortization line
chart. Rendering is left to the frontend.
"""

from typing import Dict, List

from app.calculations.amortization import AmortizationEntry
from app.calculations.payment import PaymentBreakdown

DEFAULT_MAX_POINTS = 151


def payment_slices(breakdown: PaymentBreakdown) -> List[Dict]:
    """Pie slices for one period's payment."""
    return [
        {"label": "Principal & Interest", "value": breakdown.monthly_payment},
        {"label": "Interest", "value": breakdown.monthly_interest},
        {"label": "Tax", "value": breakdown.monthly_tax},
        {"label": "Insurance", "value": breakdown.monthly_insurance},
    ]


def thin_schedule(
    schedule: List[AmortizationEntry], max_points: int = DEFAULT_MAX_POINTS
) -> List[AmortizationEntry]:
    """
    Reduce a long schedule for plotting.

    Schedules longer than ``max_points`` keep every other entry (even
    indices) plus the final entry, so the zero end balance is always drawn.
    """
    if len(schedule) <= max_points:
        return list(schedule)
    last = len(schedule) - 1
    return [entry for i, entry in enumerate(schedule) if i % 2 == 0 or i == last]


def line_series(
    schedule: List[AmortizationEntry], max_points: int = DEFAULT_MAX_POINTS
) -> Dict[str, List]:
    """Balance, cumulative principal and cumulative interest series by date."""
    points = thin_schedule(schedule, max_points)
    return {
        "dates": [entry.payment_date.isoformat() for entry in points],
        "balance": [entry.remaining_balance for entry in points],
        "principal": [entry.cumulative_principal for entry in points],
        "interest": [entry.cumulative_interest for entry in points],
    }
