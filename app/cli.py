"""
Command-line interface for the mortgage calculator.

Computes the payment breakdown or the full amortization schedule from the
same inputs as the calculator form. Output is printed to the terminal or
exported to JSON/CSV.
"""

import csv
import json
import logging
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import List, Optional

import click

from app.calculations import amortization, currency, form, payment
from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def loan_options(func):
    """Attach the loan input options shared by every command."""
    options = [
        click.option("--price", required=True, help="Property price, e.g. 300,000"),
        click.option("--down-payment", "down_payment", required=True, help="Down payment, e.g. 60,000"),
        click.option("--rate", "interest", required=True, type=float, help="Annual interest rate (percent)"),
        click.option("--term", required=True, type=float, help="Loan term in years"),
        click.option("--tax", "property_tax", type=float, default=0.0, show_default=True, help="Monthly property tax"),
        click.option("--insurance", type=float, default=0.0, show_default=True, help="Monthly insurance"),
        click.option(
            "--payments-per-year",
            "payments_per_year",
            type=click.IntRange(min=1),
            default=settings.default_payments_per_year,
            show_default=True,
        ),
        click.option("--simple", "simple_mode", is_flag=True, help="Exclude tax and insurance from the total"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_parameters(
    price: str,
    down_payment: str,
    interest: float,
    term: float,
    property_tax: float,
    insurance: float,
    payments_per_year: int,
    simple_mode: bool,
) -> payment.LoanParameters:
    """Gate the raw options and convert them into loan parameters."""
    values = form.MortgageFormValues(
        price=price,
        down_payment=down_payment,
        interest=interest,
        term=term,
        property_tax=property_tax,
        insurance=insurance,
    )
    errors = form.validation_errors(values, payments_per_year=payments_per_year)
    if errors:
        raise click.UsageError("; ".join(errors))
    return form.to_loan_parameters(values, payments_per_year=payments_per_year, simple_mode=simple_mode)


def print_breakdown(breakdown: payment.PaymentBreakdown) -> None:
    click.echo("Payment")
    click.echo("-" * 48)
    click.echo(f"Principal & interest : {breakdown.monthly_payment:,.2f}")
    click.echo(f"First interest       : {breakdown.monthly_interest:,.2f}")
    click.echo(f"First principal      : {breakdown.monthly_principal:,.2f}")
    click.echo(f"Balance after first  : {breakdown.remaining_balance_after_first_payment:,.2f}")
    click.echo(f"Total per period     : {currency.format_amount(breakdown.total_monthly_payment)}")
    click.echo(f"Lifetime total       : {currency.format_amount(breakdown.lifetime_total)}")
    click.echo("-" * 48)


def print_schedule(schedule: List[amortization.AmortizationEntry]) -> None:
    headers = ["Period", "Date", "Payment", "Principal", "Interest", "Balance", "AccPrincipal", "AccInterest"]
    click.echo("\t".join(headers))
    for period, entry in enumerate(schedule, start=1):
        row = [
            str(period),
            entry.payment_date.isoformat(),
            f"{entry.payment_amount:.2f}",
            f"{entry.principal_portion:.2f}",
            f"{entry.interest_portion:.2f}",
            f"{entry.remaining_balance:.2f}",
            f"{entry.cumulative_principal:.2f}",
            f"{entry.cumulative_interest:.2f}",
        ]
        click.echo("\t".join(row))


def print_yearly(rows: List[dict]) -> None:
    click.echo("\t".join(["Year", "Payments", "Principal", "Interest", "EndBal"]))
    for row in rows:
        click.echo(
            f"{row['year']}\t{row['payments']:.2f}\t{row['principal']:.2f}"
            f"\t{row['interest']:.2f}\t{row['ending_balance']:.2f}"
        )


def export_to_json(path: Path, schedule: List[amortization.AmortizationEntry]) -> None:
    data = {
        "summary": amortization.summarize_schedule(schedule),
        "schedule": [
            {**asdict(entry), "payment_date": entry.payment_date.isoformat()}
            for entry in schedule
        ],
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, schedule: List[amortization.AmortizationEntry]) -> None:
    fields = [
        "payment_date",
        "payment_amount",
        "principal_portion",
        "interest_portion",
        "remaining_balance",
        "cumulative_principal",
        "cumulative_interest",
    ]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fields)
        writer.writeheader()
        for entry in schedule:
            row = asdict(entry)
            row["payment_date"] = entry.payment_date.isoformat()
            writer.writerow(row)


@click.group()
def cli() -> None:
    """Mortgage payment and amortization calculator."""


@cli.command("payment")
@loan_options
def payment_command(**options) -> None:
    """Print the payment breakdown for a loan."""
    params = build_parameters(**options)
    print_breakdown(payment.calculate_payment_breakdown(params))


@cli.command("schedule")
@loan_options
@click.option("--start-date", "start_date", type=click.DateTime(formats=["%Y-%m-%d"]), help="First payment date (YYYY-MM-DD)")
@click.option("--yearly", is_flag=True, help="Print totals per loan year instead of every period")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Output file path (.json or .csv)")
def schedule_command(start_date, yearly: bool, output: Optional[Path], **options) -> None:
    """Compute and print the full amortization schedule."""
    params = build_parameters(**options)
    first: Optional[date] = start_date.date() if start_date else None
    schedule = amortization.schedule_for_loan(params, start_date=first)
    logger.debug(f"Generated {len(schedule)} schedule entries")

    if output:
        suffix = output.suffix.lower()
        if suffix == ".json":
            export_to_json(output, schedule)
        elif suffix == ".csv":
            export_to_csv(output, schedule)
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv")
        click.echo(f"Schedule exported to {output}")
        return

    if yearly:
        print_yearly(amortization.yearly_summary(schedule, params.payments_per_year))
    else:
        print_schedule(schedule)


if __name__ == "__main__":
    cli()
