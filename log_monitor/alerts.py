"""Log Monitor - Alert sink"""

import logging
from pathlib import Path
from typing import Iterable

from .errors import SinkUnavailable
from .models import Alert
from .patterns import ALERT_SEPARATOR, DEFAULT_ALERTS_FILE

logger = logging.getLogger(__name__)


class AlertSink:
    """Append-only text file receiving one line per alert.

    Each batch of alerts is closed by a separator line and flushed before
    ``write`` returns.
    """

    def __init__(self, path=DEFAULT_ALERTS_FILE):
        self.path = Path(path)
        self._fh = None

    @classmethod
    def open(cls, path=DEFAULT_ALERTS_FILE) -> "AlertSink":
        sink = cls(path)
        try:
            sink._fh = open(sink.path, 'a', encoding='utf-8')
        except OSError as e:
            raise SinkUnavailable(str(sink.path), e.strerror or str(e)) from e
        logger.debug("Alert sink opened: %s", sink.path)
        return sink

    @property
    def closed(self) -> bool:
        return self._fh is None or self._fh.closed

    def write(self, alerts: Iterable[Alert]) -> int:
        alerts = list(alerts)
        if not alerts:
            return 0
        if self.closed:
            raise SinkUnavailable(str(self.path), "sink is closed")

        for alert in alerts:
            self._fh.write(f"{alert}\n")
        self._fh.write(f"{ALERT_SEPARATOR}\n")
        self._fh.flush()
        logger.info("Wrote %d alert(s) to %s", len(alerts), self.path)
        return len(alerts)

    def close(self):
        if self._fh is not None and not self._fh.closed:
            self._fh.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
