"""
Mortgage Calculation Engine

Pure calculation modules for mortgage payments and amortization schedules.
No I/O and no shared state; every call is independent.
"""

from app.calculations import currency, payment, amortization, form, charts

__all__ = ["currency", "payment", "amortization", "form", "charts"]
