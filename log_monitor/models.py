"""Log Monitor - Data models"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .patterns import (
    DEFAULT_ALERTS_FILE,
    DEFAULT_FAILED_THRESHOLD,
    DEFAULT_INTERVAL,
    DEFAULT_LOG_FILE,
)


@dataclass(frozen=True)
class Config:
    """Run parameters, fixed at startup"""
    filename: str = DEFAULT_LOG_FILE
    failed_threshold: int = DEFAULT_FAILED_THRESHOLD
    color: bool = True
    alerts_path: str = DEFAULT_ALERTS_FILE
    watch: bool = False
    interval: float = DEFAULT_INTERVAL
    cycles: Optional[int] = None
    json: bool = False
    verbose: bool = False

    @property
    def mode(self) -> str:
        return "watch" if self.watch else "single-scan"


@dataclass
class Counters:
    """Failed-login, error and critical counts plus address occurrences.

    Used both for a single run and for the running total across runs.
    """
    failed_logins: int = 0
    errors: int = 0
    criticals: int = 0
    addresses: Counter = field(default_factory=Counter)

    def merge(self, other: "Counters"):
        self.failed_logins += other.failed_logins
        self.errors += other.errors
        self.criticals += other.criticals
        self.addresses.update(other.addresses)

    def top_addresses(self) -> List[Tuple[str, int]]:
        """Addresses by descending count, ties by address string"""
        return sorted(self.addresses.items(), key=lambda item: (-item[1], item[0]))

    def to_dict(self) -> Dict:
        return {
            'failed_logins': self.failed_logins,
            'errors': self.errors,
            'criticals': self.criticals,
            'addresses': dict(self.top_addresses()),
        }


@dataclass(frozen=True)
class Alert:
    """Threshold breach for a single run"""
    level: str
    message: str

    def __str__(self):
        return f"{self.level}: {self.message}"


@dataclass
class ScanResult:
    """Outcome of one run over a log source"""
    source: str
    counters: Counters
    alerts: List[Alert] = field(default_factory=list)
    lines: int = 0

    @property
    def alerted(self) -> bool:
        return bool(self.alerts)

    def to_dict(self) -> Dict:
        return {
            'source': self.source,
            'lines': self.lines,
            'counters': self.counters.to_dict(),
            'alerts': [str(a) for a in self.alerts],
            'alerted': self.alerted,
        }


@dataclass(frozen=True)
class ReportStyle:
    """Rich style names used by the report renderer"""
    info: str = "cyan"
    warning: str = "yellow"
    critical: str = "red"
    success: str = "green"
    muted: str = "dim"

    @classmethod
    def for_color(cls, color: bool) -> "ReportStyle":
        if color:
            return cls()
        return cls(info="", warning="", critical="", success="", muted="")
