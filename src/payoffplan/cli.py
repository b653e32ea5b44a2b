"""Command line interface for PayoffPlan."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .exceptions import PayoffPlanError
from .logging_config import setup_logging
from .models.debt import PayoffStrategy
from .models.schedule import PayoffSummary
from .services.comparison import compare_strategies, extra_payment_impact, total_minimum_payments
from .services.debts import calculate_payoff_schedule
from .services.export_csv import export_schedule_csv
from .services.formatting import format_currency, format_payoff_time
from .services.import_csv import load_debts_csv

STRATEGY_CHOICES = click.Choice([s.value for s in PayoffStrategy], case_sensitive=False)


def _load(ctx: click.Context, debts_csv: Path):
    try:
        return load_debts_csv(debts_csv)
    except PayoffPlanError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)


def _months_text(months: int) -> str:
    return format_payoff_time(months) if months > 0 else "0 months"


def _echo_summary(summary: PayoffSummary) -> None:
    label = summary.strategy.label
    if not summary.will_pay_off:
        click.echo(f"{label}: will not pay off under current settings; increase your payment.")
        return
    payoff = summary.payoff_date.strftime("%b %Y") if summary.payoff_date else "now"
    click.echo(
        f"{label}: {format_payoff_time(summary.months)} "
        f"(debt-free {payoff}), {format_currency(summary.total_interest)} interest"
    )


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Plan debt payoff with the avalanche or snowball strategy."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@cli.command("plan")
@click.argument("debts_csv", type=click.Path(path_type=Path))
@click.option("--extra", "extra", type=float, default=0.0, show_default=True,
              help="Extra amount paid each month on top of minimums")
@click.option("--strategy", type=STRATEGY_CHOICES, default="avalanche", show_default=True)
@click.option("--csv", "csv_out", type=click.Path(path_type=Path), default=None,
              help="Write the month-by-month schedule to this CSV file")
@click.pass_context
def plan(ctx: click.Context, debts_csv: Path, extra: float, strategy: str,
         csv_out: Path | None) -> None:
    """Show the payoff schedule for one strategy."""

    config: BaseConfig = ctx.obj
    debts = _load(ctx, debts_csv)
    schedule = calculate_payoff_schedule(
        debts=debts, extra_payment=extra, strategy=strategy, max_months=config.MAX_MONTHS
    )

    if not schedule:
        click.echo("Already debt-free.")
        return

    click.echo(f"Order: {schedule.strategy.description}")
    minimums = total_minimum_payments(debts)
    click.echo(
        f"Monthly payment: {format_currency(minimums + schedule.extra_payment)} "
        f"({format_currency(minimums)} min + {format_currency(schedule.extra_payment)} extra)"
    )
    if not schedule.will_pay_off:
        click.echo(
            f"Warning: debts will not be paid off under current settings "
            f"({format_currency(schedule[-1].total_remaining)} still owed after "
            f"{format_payoff_time(schedule.months)}). Increase your payment.",
            err=True,
        )
    else:
        click.echo(f"Debt-free in: {format_payoff_time(schedule.months)}")
        click.echo(f"Total interest: {format_currency(schedule.total_interest)}")
        if schedule.extra_payment > 0:
            impact = extra_payment_impact(
                debts=debts, extra_payment=extra, strategy=strategy, max_months=config.MAX_MONTHS
            )
            if not impact.baseline_pays_off:
                click.echo(
                    f"Without the extra {format_currency(schedule.extra_payment)}/month "
                    "these debts never pay off."
                )
            else:
                click.echo(
                    f"Extra {format_currency(schedule.extra_payment)}/month saves: "
                    f"{_months_text(impact.months_saved)} and "
                    f"{format_currency(impact.interest_saved)} in interest"
                )

    if csv_out is not None:
        path = export_schedule_csv(schedule=schedule, output_path=csv_out)
        click.echo(f"Schedule written: {path}")


@cli.command("compare")
@click.argument("debts_csv", type=click.Path(path_type=Path))
@click.option("--extra", "extra", type=float, default=0.0, show_default=True,
              help="Extra amount paid each month on top of minimums")
@click.pass_context
def compare(ctx: click.Context, debts_csv: Path, extra: float) -> None:
    """Compare avalanche and snowball side by side."""

    config: BaseConfig = ctx.obj
    debts = _load(ctx, debts_csv)
    comparison = compare_strategies(
        debts=debts, extra_payment=extra, max_months=config.MAX_MONTHS
    )
    if not comparison.avalanche_schedule and not comparison.snowball_schedule:
        click.echo("Already debt-free.")
        return

    for strategy in PayoffStrategy:
        _echo_summary(comparison.summary_for(strategy))
    if comparison.interest_saved > 0:
        click.echo(
            f"Avalanche saves {format_currency(comparison.interest_saved)} in interest, "
            "but Snowball gives you quicker wins."
        )
    click.echo(f"Recommended: {comparison.recommended.label}")


def main() -> None:
    cli(prog_name="payoffplan")


if __name__ == "__main__":  # pragma: no cover
    main()
