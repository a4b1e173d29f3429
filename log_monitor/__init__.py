"""Log Monitor package"""

from .patterns import VERSION, DANGER_PATTERNS, ADDRESS_PATTERN
from .errors import LogMonitorError, ConfigParseError, SourceUnavailable, SinkUnavailable
from .models import Config, Counters, Alert, ScanResult, ReportStyle
from .scanner import LogScanner, extract_address, evaluate_thresholds
from .alerts import AlertSink
from .watcher import FileCursor, Watcher
from .output import make_console, print_banner, print_report, print_totals, print_json

__all__ = [
    'VERSION', 'DANGER_PATTERNS', 'ADDRESS_PATTERN',
    'LogMonitorError', 'ConfigParseError', 'SourceUnavailable', 'SinkUnavailable',
    'Config', 'Counters', 'Alert', 'ScanResult', 'ReportStyle',
    'LogScanner', 'extract_address', 'evaluate_thresholds',
    'AlertSink', 'FileCursor', 'Watcher',
    'make_console', 'print_banner', 'print_report', 'print_totals', 'print_json',
]
