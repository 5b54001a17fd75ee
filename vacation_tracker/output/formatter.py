"""
Console output formatting using Rich.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vacation_tracker.app.view import AppView, ConfigView, DashboardView, HolidayRow, RequestRow
from vacation_tracker.data.schemas import Holiday, RangeEvaluation, RangeStatus, RequestStatus
from vacation_tracker.i18n import t

STATUS_STYLES = {
    RequestStatus.APPROVED: "green",
    RequestStatus.PENDING: "yellow",
    RequestStatus.REJECTED: "red",
}

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the console formatter.

        Args:
            console: Rich console to print to (created if not provided).
        """
        self.console = console or Console()

    def render(self, view: AppView) -> None:
        """Print whichever screen the view describes."""
        if isinstance(view, DashboardView):
            self.print_dashboard(view)
        elif isinstance(view, ConfigView):
            self.print_config(view)
        else:
            self.console.print(f"[dim]{t('cli.loading')}[/dim]")

    def print_dashboard(self, view: DashboardView) -> None:
        """
        Print balances and the request list.

        Args:
            view: DashboardView to display.
        """
        self.console.print()
        self.console.rule(f"[bold blue]{t('dashboard.title')}[/bold blue]")
        self.console.print()

        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("Label", style="cyan", width=20)
        summary_table.add_column("Value", style="white", justify="right", width=10)

        remaining_style = "bold green" if view.remaining_days >= 0 else "bold red"
        summary_table.add_row(
            Text(t("dashboard.remaining"), style=remaining_style),
            Text(str(view.remaining_days), style=remaining_style),
        )
        summary_table.add_row(t("dashboard.approved"), str(view.approved_days))
        summary_table.add_row(t("dashboard.pending"), str(view.pending_days))

        self.console.print(Panel(summary_table, title=f"[bold]{t('config.annual_days')}: {view.available_days}[/bold]"))

        if view.start_date or view.end_date:
            self.console.print(
                f"{view.start_date or '?'} - {view.end_date or '?'}: "
                f"[bold]{t('dashboard.calculated', days=view.calculated_days)}[/bold]"
            )
        if view.balance_warning:
            self.console.print(f"[yellow]{view.balance_warning}[/yellow]")
        if view.error_message:
            self.print_error(view.error_message)

        self.print_requests(view.requests)
        self.console.print()

    def print_requests(self, requests: List[RequestRow]) -> None:
        """
        Print the request table, most recent first.

        Args:
            requests: Rows to display.
        """
        if not requests:
            self.console.print(f"[dim]{t('dashboard.no_requests')}[/dim]")
            return

        table = Table(title=f"[bold]{t('dashboard.requests')}[/bold]")
        table.add_column("ID", style="dim")
        table.add_column("Period", style="cyan")
        table.add_column("Days", justify="right")
        table.add_column("Status")
        table.add_column("Requested", style="dim")

        for row in requests:
            style = STATUS_STYLES.get(row.status, "white")
            table.add_row(
                row.id or "",
                f"{row.start_date.isoformat()} - {row.end_date.isoformat()}",
                str(row.days),
                Text(row.status_label, style=style),
                row.requested_on.isoformat(),
            )

        self.console.print(table)

    def print_config(self, view: ConfigView) -> None:
        """Print the allotment and the configured holidays."""
        self.console.print()
        self.console.rule(f"[bold blue]{t('config.title')}[/bold blue]")
        self.console.print()
        self.console.print(f"{t('config.annual_days')}: [bold]{view.available_days}[/bold]")
        if view.error_message:
            self.print_error(view.error_message)
        if view.is_saving:
            self.console.print(f"[dim]{t('config.saving')}[/dim]")
        self.print_holidays(view.holidays)
        self.console.print()

    def print_holidays(self, holidays: List[HolidayRow]) -> None:
        """
        Print a table of holidays.

        Args:
            holidays: Holidays to display, already sorted.
        """
        if not holidays:
            self.console.print(f"[dim]{t('config.no_holidays')}[/dim]")
            return

        holiday_table = Table(title=f"[bold]{t('config.holidays', count=len(holidays))}[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=12)
        holiday_table.add_column("Name", style="white")

        for holiday in holidays:
            holiday_table.add_row(
                holiday.holiday_date.isoformat(),
                WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                holiday.name,
            )

        self.console.print(holiday_table)

    def print_public_holidays(self, holidays: List[Holiday]) -> None:
        self.print_holidays([HolidayRow(name=h.name, holiday_date=h.holiday_date) for h in holidays])

    def print_business_days(self, evaluation: RangeEvaluation) -> None:
        """Print the working-day count of a range or why there is none."""
        if evaluation.status == RangeStatus.EMPTY:
            self.print_error(t("cli.range_empty"))
        elif evaluation.status == RangeStatus.INVALID_RANGE:
            self.print_error(t("error.invalid_range"))
        elif evaluation.status == RangeStatus.NO_BUSINESS_DAYS:
            self.console.print(f"[yellow]{t('error.no_business_days')}[/yellow]")
        else:
            self.console.print(
                t(
                    "cli.business_days",
                    days=evaluation.business_days,
                    start=evaluation.start_date.isoformat(),
                    end=evaluation.end_date.isoformat(),
                )
            )

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
