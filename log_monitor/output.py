"""Log Monitor - Report output"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import Config, Counters, ReportStyle, ScanResult

RULE = "─" * 34


def make_console(color: bool = True, stderr: bool = False, file=None) -> Console:
    return Console(no_color=not color, highlight=False, soft_wrap=True, stderr=stderr, file=file)


def _style(name: str) -> Optional[str]:
    return name or None


def print_banner(config: Config, console: Console, style: ReportStyle):
    console.print("[INFO] Starting Log Monitor", style=_style(style.info), markup=False)
    console.print(f"File: {escape(config.filename)}")
    console.print(f"Failed-login threshold: {config.failed_threshold}")
    console.print(f"Mode: {config.mode}\n")


def print_counts(counters: Counters, console: Console, title: str = "Scan Results"):
    console.print("\n" + RULE)
    console.print(f"{title}:")
    console.print(f"  Failed logins: {counters.failed_logins}")
    console.print(f"  Errors:        {counters.errors}")
    console.print(f"  Criticals:     {counters.criticals}")
    console.print(RULE)


def print_addresses(counters: Counters, console: Console, style: ReportStyle):
    ranked = counters.top_addresses()
    if not ranked:
        return

    console.print("\n🔎 Suspicious IPs:")
    table = Table(box=box.ROUNDED)
    table.add_column("IP Address", style=_style(style.critical))
    table.add_column("Attempts", style=_style(style.warning), justify="right")
    for address, count in ranked:
        table.add_row(address, str(count))
    console.print(table)


def print_report(result: ScanResult, console: Console, style: ReportStyle,
                 alerts_path: Optional[str] = None):
    """Print run counts, alert banners and the suspicious address table.

    Counts are always printed; alert banners only for alerts that fired.
    """
    print_counts(result.counters, console)

    for alert in result.alerts:
        if alert.level == "CRITICAL":
            console.print(f"🚨 {alert}", style=_style(style.critical), markup=False)
        else:
            console.print(f"⚠️ {alert}", style=_style(style.warning), markup=False)

    print_addresses(result.counters, console, style)

    if result.alerted and alerts_path:
        console.print(f"✅ Alerts saved to {alerts_path}", style=_style(style.success), markup=False)


def print_totals(totals: Counters, console: Console, style: ReportStyle):
    console.print(
        f"Running total: {totals.failed_logins} failed login(s), "
        f"{totals.errors} error(s), {totals.criticals} critical(s)",
        style=_style(style.muted),
    )


def print_json(result: ScanResult, console: Console):
    console.print_json(data=result.to_dict())
