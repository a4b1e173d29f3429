"""Log Monitor - Core scanning engine"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import SourceUnavailable
from .models import Alert, Config, Counters, ScanResult
from .patterns import ADDRESS_PATTERN, DANGER_PATTERNS

logger = logging.getLogger(__name__)


def extract_address(line: str) -> Optional[str]:
    match = ADDRESS_PATTERN.search(line)
    return match.group(0) if match else None


def evaluate_thresholds(counters: Counters, failed_threshold: int) -> List[Alert]:
    """Alerts fired by a single run's counts"""
    alerts = []
    if counters.failed_logins > failed_threshold:
        alerts.append(Alert("ALERT", f"Multiple failed logins ({counters.failed_logins})"))
    if counters.errors > 0:
        alerts.append(Alert("ALERT", f"{counters.errors} error(s)"))
    if counters.criticals > 0:
        alerts.append(Alert("CRITICAL", f"{counters.criticals} critical issue(s)"))
    return alerts


def split_lines(data: bytes) -> List[str]:
    """Split raw bytes on newlines only, dropping one trailing carriage return per line"""
    if not data:
        return []
    chunks = data.split(b"\n")
    if data.endswith(b"\n"):
        chunks.pop()
    lines = []
    for chunk in chunks:
        if chunk.endswith(b"\r"):
            chunk = chunk[:-1]
        lines.append(chunk.decode('utf-8', errors='ignore'))
    return lines


def read_lines(path: Path) -> List[str]:
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise SourceUnavailable(str(path), e.strerror or str(e)) from e
    return split_lines(data)


class LogScanner:
    """Classifies log lines and evaluates alert thresholds.

    ``totals`` accumulates every run the scanner performs. A run never
    touches ``totals`` until all of its lines have been classified, so a
    source that cannot be opened leaves it unchanged.
    """

    def __init__(self, config: Config, totals: Optional[Counters] = None):
        self.config = config
        self.totals = totals if totals is not None else Counters()

    def classify(self, line: str, counters: Counters):
        lower = line.lower()
        if DANGER_PATTERNS['failed_login'] in lower:
            counters.failed_logins += 1
            address = extract_address(line)
            if address:
                counters.addresses[address] += 1
        if DANGER_PATTERNS['error'] in lower:
            counters.errors += 1
        if DANGER_PATTERNS['critical'] in lower:
            counters.criticals += 1

    def scan_lines(self, lines: Iterable[str], source: str = "<lines>") -> ScanResult:
        counters = Counters()
        total = 0
        for line in lines:
            self.classify(line, counters)
            total += 1

        self.totals.merge(counters)
        alerts = evaluate_thresholds(counters, self.config.failed_threshold)
        logger.debug("Scanned %d line(s) from %s, %d alert(s)", total, source, len(alerts))
        return ScanResult(source=source, counters=counters, alerts=alerts, lines=total)

    def scan_file(self, filepath=None) -> ScanResult:
        path = Path(filepath or self.config.filename)
        logger.debug("Opening %s", path)
        lines = read_lines(path)
        return self.scan_lines(lines, source=str(path))
