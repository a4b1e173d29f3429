"""Log Monitor - Polling watch mode

Re-runs the scanner over lines appended to the log since the previous poll.
Each poll that finds new lines is a run of its own; the scanner's totals
carry the cumulative counts between polls.
"""

import logging
import os
import time
from pathlib import Path
from typing import Callable, List, Optional

from .alerts import AlertSink
from .errors import SourceUnavailable
from .models import ScanResult
from .scanner import LogScanner, split_lines

logger = logging.getLogger(__name__)


class FileCursor:
    """Byte offset of the last complete line consumed from a file"""

    def __init__(self, path, offset: int = 0):
        self.path = Path(path)
        self.offset = offset

    def read_new_lines(self) -> List[str]:
        """Return complete lines written since the last call.

        A trailing line without a newline is left for the next call. If the
        file is now shorter than the offset it was truncated or rotated, and
        reading restarts from the beginning.
        """
        try:
            size = os.path.getsize(self.path)
            if size < self.offset:
                logger.info("%s shrank from %d to %d bytes, rereading", self.path, self.offset, size)
                self.offset = 0
            with open(self.path, 'rb') as f:
                f.seek(self.offset)
                data = f.read()
        except OSError as e:
            raise SourceUnavailable(str(self.path), e.strerror or str(e)) from e

        end = data.rfind(b"\n")
        if end < 0:
            return []
        chunk = data[:end + 1]
        self.offset += len(chunk)
        return split_lines(chunk)


class Watcher:
    """Polls a log file and scans whatever was appended.

    ``on_result`` is called with each run's ScanResult after its alerts have
    been written to the sink.
    """

    def __init__(self, scanner: LogScanner, sink: AlertSink,
                 on_result: Optional[Callable[[ScanResult], None]] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.scanner = scanner
        self.sink = sink
        self.on_result = on_result
        self.sleep = sleep
        self.cursor = FileCursor(scanner.config.filename)

    def poll(self) -> Optional[ScanResult]:
        try:
            lines = self.cursor.read_new_lines()
        except SourceUnavailable as e:
            logger.warning("%s, retrying next poll", e)
            return None
        if not lines:
            return None

        result = self.scanner.scan_lines(lines, source=str(self.cursor.path))
        self.sink.write(result.alerts)
        if self.on_result is not None:
            self.on_result(result)
        return result

    def run(self, cycles: Optional[int] = None) -> int:
        """Poll until interrupted or ``cycles`` polls have run; returns polls done"""
        interval = self.scanner.config.interval
        done = 0
        try:
            while cycles is None or done < cycles:
                self.poll()
                done += 1
                if cycles is None or done < cycles:
                    self.sleep(interval)
        except KeyboardInterrupt:
            logger.info("Watch interrupted after %d poll(s)", done)
        return done
