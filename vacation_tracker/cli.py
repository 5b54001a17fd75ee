"""
CLI interface for the vacation tracker.

Supports bilingual operation (English/Spanish) via:
- --language / -l option
- VACATION_TRACKER_LANGUAGE environment variable
- LANG environment variable
- Default: English
"""

import asyncio
import logging
import sys
from datetime import date
from typing import Optional

import click

from vacation_tracker import __version__
from vacation_tracker.app.controller import VacationController
from vacation_tracker.auth import Authenticator
from vacation_tracker.config.manager import ConfigManager
from vacation_tracker.core.business_days import evaluate_range
from vacation_tracker.core.holidays import PublicHolidayProvider, can_add_holiday
from vacation_tracker.data.schemas import Config, RangeStatus, View
from vacation_tracker.i18n import set_language, t
from vacation_tracker.output.exporter import ResultExporter
from vacation_tracker.output.formatter import ConsoleFormatter
from vacation_tracker.store import StoreError, create_store

logger = logging.getLogger(__name__)

formatter = ConsoleFormatter()


def load_config(ctx: click.Context) -> Config:
    """Load configuration once per invocation."""
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = ConfigManager(ctx.obj.get("config_path")).load_config()
        except ValueError as e:
            fail(str(e))
        if not ctx.obj.get("language"):
            set_language(ctx.obj["config"].language)
    return ctx.obj["config"]


def build_controller(config: Config) -> VacationController:
    """Create a started controller for the configured store and identity."""
    try:
        store = create_store(config)
    except StoreError as e:
        logger.debug("Store error details:", exc_info=True)
        fail(str(e))
    authenticator = Authenticator(token=config.auth_token, identity_path=config.identity_path)
    controller = VacationController(store, authenticator, config=config)
    controller.start()
    return controller


def fail(message: str) -> None:
    formatter.print_error(message)
    sys.exit(1)


def finish(controller: VacationController, ok: bool, success_message: str) -> None:
    """Print the outcome of an intent; failures exit with status 1."""
    controller.stop()
    if not ok:
        fail(controller.state.error_message)
    formatter.print_success(success_message)


@click.group()
@click.version_option(version=__version__, prog_name="vacation-tracker")
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.option(
    "-l", "--language",
    type=click.Choice(["en", "es"]),
    help="Language for output (en=English, es=Spanish).",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], language: Optional[str], debug: bool):
    """Vacation Tracker - request vacation days against your annual allotment.

    Gestor de Vacaciones - solicita días de vacaciones contra tu asignación anual.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["language"] = language
    if language:
        set_language(language)


@main.command()
@click.pass_context
def status(ctx: click.Context):
    """Show balances and all vacation requests."""
    controller = build_controller(load_config(ctx))
    formatter.render(controller.view)
    controller.stop()


@main.command()
@click.option("--start", "-s", required=True, help="Start date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)")
@click.option("--end", "-e", required=True, help="End date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)")
@click.pass_context
def days(ctx: click.Context, start: str, end: str):
    """Count working days in a range, excluding weekends and your holidays."""
    controller = build_controller(load_config(ctx))
    evaluation = evaluate_range(start, end, controller.state.holidays)
    controller.stop()
    formatter.print_business_days(evaluation)
    if evaluation.business_days == 0 and evaluation.status != RangeStatus.NO_BUSINESS_DAYS:
        sys.exit(1)


@main.command()
@click.option("--start", "-s", required=True, help="First vacation day")
@click.option("--end", "-e", required=True, help="Last vacation day (inclusive)")
@click.pass_context
def request(ctx: click.Context, start: str, end: str):
    """Submit a vacation request for a date range."""
    controller = build_controller(load_config(ctx))
    controller.set_dates(start, end)
    created = asyncio.run(controller.submit_request())
    message = ""
    if created is not None:
        message = t(
            "cli.request_submitted",
            days=created.days,
            start=created.start_date.isoformat(),
            end=created.end_date.isoformat(),
        )
    finish(controller, created is not None, message)


@main.command()
@click.argument("request_id")
@click.pass_context
def cancel(ctx: click.Context, request_id: str):
    """Cancel a pending vacation request."""
    controller = build_controller(load_config(ctx))
    ok = asyncio.run(controller.cancel_request(request_id))
    finish(controller, ok, t("cli.request_cancelled", request_id=request_id))


@main.command("set-days")
@click.argument("available_days", type=int)
@click.pass_context
def set_days(ctx: click.Context, available_days: int):
    """Set the annual number of vacation days."""
    controller = build_controller(load_config(ctx))
    controller.navigate(View.CONFIG)
    controller.set_available_days(available_days)
    ok = asyncio.run(controller.save_available_days())
    finish(controller, ok, t("cli.settings_saved", days=controller.state.available_days))


@main.group()
def holidays():
    """Manage the holidays excluded from working days."""


@holidays.command("list")
@click.pass_context
def list_holidays(ctx: click.Context):
    """List configured holidays by date."""
    controller = build_controller(load_config(ctx))
    controller.navigate(View.CONFIG)
    formatter.render(controller.view)
    controller.stop()


@holidays.command("add")
@click.option("--name", "-n", required=True, help="Holiday name")
@click.option("--date", "-d", "holiday_date", required=True, help="Holiday date (YYYY-MM-DD)")
@click.pass_context
def add_holiday(ctx: click.Context, name: str, holiday_date: str):
    """Add a holiday. A holiday on the same date is replaced."""
    controller = build_controller(load_config(ctx))
    controller.set_holiday_name(name)
    controller.set_holiday_date(holiday_date)
    if not can_add_holiday(name, holiday_date):
        controller.stop()
        fail(t("cli.holiday_missing_fields"))
    ok = asyncio.run(controller.add_holiday())
    finish(controller, ok, t("cli.holiday_added", name=name.strip(), date=holiday_date))


@holidays.command("delete")
@click.argument("holiday_date")
@click.pass_context
def delete_holiday(ctx: click.Context, holiday_date: str):
    """Delete the holiday on a date."""
    controller = build_controller(load_config(ctx))
    ok = asyncio.run(controller.delete_holiday(holiday_date))
    finish(controller, ok, t("cli.holiday_deleted", date=holiday_date))


@holidays.command("import")
@click.option("--year", "-y", type=int, default=None, help="Year to import (default: current year)")
@click.option("--country", default=None, help="Country code (default: from config)")
@click.option("--subdivision", default=None, help="Region code (default: from config)")
@click.option("--dry-run", is_flag=True, help="Only show the holidays that would be imported")
@click.pass_context
def import_holidays(
    ctx: click.Context,
    year: Optional[int],
    country: Optional[str],
    subdivision: Optional[str],
    dry_run: bool,
):
    """Import official public holidays into your holiday list."""
    config = load_config(ctx)
    year = year or date.today().year
    try:
        provider = PublicHolidayProvider(
            country=country or config.holiday_country,
            subdivision=subdivision or config.holiday_subdivision,
        )
        public_holidays = provider.get_holidays_for_year(year)
    except NotImplementedError as e:
        fail(f"Unsupported holiday calendar: {e}")

    if dry_run:
        formatter.print_public_holidays(public_holidays)
        return

    controller = build_controller(config)
    count = asyncio.run(controller.import_public_holidays(year, provider))
    finish(
        controller,
        not controller.state.error_message,
        t("cli.holidays_imported", count=count, country=provider.country, year=year),
    )


@main.command()
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["json", "csv"]),
    default=None,
    help="Output format (default: from config)",
)
@click.option("--output", "-o", type=click.Path(), help="Output file path (optional)")
@click.pass_context
def export(ctx: click.Context, output_format: Optional[str], output: Optional[str]):
    """Export requests and holidays to JSON or CSV."""
    config = load_config(ctx)
    controller = build_controller(config)
    state = controller.state
    controller.stop()

    exporter = ResultExporter(output_directory=config.output_directory)
    if (output_format or config.output_format) == "csv":
        path = exporter.export_requests_csv(state.requests, output)
        formatter.print_success(t("cli.exported", path=path))
        if not output:
            path = exporter.export_holidays_csv(state.holidays)
            formatter.print_success(t("cli.exported", path=path))
    else:
        path = exporter.export_json(state.available_days, state.requests, state.holidays, output)
        formatter.print_success(t("cli.exported", path=path))


@main.command()
@click.option("--host", "-h", default=None, help="Host to bind to (default: from config or 0.0.0.0)")
@click.option("--port", "-p", type=int, default=None, help="Port to bind to (default: from config or 8000)")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int]):
    """Start the REST API server."""
    import uvicorn

    from vacation_tracker.api import create_app

    config = load_config(ctx)
    api_host = host or config.api_host
    api_port = port or config.api_port

    formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
    formatter.console.print("Press Ctrl+C to stop")
    formatter.console.print()

    uvicorn.run(create_app(config=config), host=api_host, port=api_port, reload=False)


if __name__ == "__main__":
    main()
