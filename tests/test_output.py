import io
import json
from collections import Counter

from rich.console import Console

from log_monitor import Alert, Config, Counters, ReportStyle, ScanResult
from log_monitor.output import make_console, print_banner, print_json, print_report, print_totals


def render(func, *args, color=False, **kwargs):
    buf = io.StringIO()
    console = make_console(color, file=buf)
    func(*args, console, **kwargs)
    return buf.getvalue()


def test_plain_style_has_no_colors():
    style = ReportStyle.for_color(False)
    assert (style.info, style.warning, style.critical, style.success, style.muted) == ("", "", "", "", "")
    assert ReportStyle.for_color(True).critical == "red"


def test_report_always_prints_counts():
    result = ScanResult(source="system.log", counters=Counters())
    out = render(print_report, result, style=ReportStyle.for_color(False))
    assert "Scan Results:" in out
    assert "Failed logins: 0" in out
    assert "Errors:        0" in out
    assert "Criticals:     0" in out
    assert "Suspicious IPs" not in out
    assert "Alerts saved" not in out


def test_report_sorts_addresses_by_descending_count():
    counters = Counters(failed_logins=7, addresses=Counter({"1.2.3.4": 2, "5.6.7.8": 5}))
    result = ScanResult(source="system.log", counters=counters)
    out = render(print_report, result, style=ReportStyle.for_color(False))
    assert out.index("5.6.7.8") < out.index("1.2.3.4")


def test_address_ties_break_on_address():
    counters = Counters(addresses=Counter({"9.9.9.9": 1, "10.0.0.1": 1, "2.2.2.2": 3}))
    assert [a for a, _ in counters.top_addresses()] == ["2.2.2.2", "10.0.0.1", "9.9.9.9"]


def test_report_shows_alerts_and_saved_notice():
    counters = Counters(failed_logins=4, errors=1, criticals=1)
    alerts = [Alert("ALERT", "Multiple failed logins (4)"), Alert("CRITICAL", "1 critical issue(s)")]
    result = ScanResult(source="system.log", counters=counters, alerts=alerts)
    out = render(print_report, result, style=ReportStyle.for_color(False), alerts_path="alerts.log")
    assert "ALERT: Multiple failed logins (4)" in out
    assert "CRITICAL: 1 critical issue(s)" in out
    assert "Alerts saved to alerts.log" in out


def test_no_color_console_emits_no_escape_codes():
    buf = io.StringIO()
    console = Console(file=buf, no_color=True, force_terminal=True, color_system="truecolor")
    result = ScanResult(source="x", counters=Counters(errors=1), alerts=[Alert("ALERT", "1 error(s)")])
    print_report(result, console, ReportStyle.for_color(False))
    assert "\x1b[3" not in buf.getvalue()


def test_banner_lists_run_parameters():
    out = render(print_banner, Config(filename="auth.log", failed_threshold=5), style=ReportStyle.for_color(False))
    assert "Starting Log Monitor" in out
    assert "File: auth.log" in out
    assert "Failed-login threshold: 5" in out
    assert "Mode: single-scan" in out


def test_totals_line():
    out = render(print_totals, Counters(failed_logins=8, errors=2), style=ReportStyle.for_color(False))
    assert "8 failed login(s), 2 error(s), 0 critical(s)" in out


def test_json_output_is_parseable():
    counters = Counters(failed_logins=1, addresses=Counter({"10.0.0.5": 1}))
    result = ScanResult(source="system.log", counters=counters, lines=3)
    payload = json.loads(render(print_json, result))
    assert payload["counters"]["addresses"] == {"10.0.0.5": 1}
    assert payload["alerted"] is False
    assert payload["lines"] == 3


def test_long_paths_are_not_wrapped():
    long_name = "/var/log/" + "nested/" * 20 + "system.log"
    out = render(print_banner, Config(filename=long_name), style=ReportStyle.for_color(False))
    assert f"File: {long_name}\n" in out
