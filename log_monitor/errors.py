"""Log Monitor - Error taxonomy"""


class LogMonitorError(Exception):
    """Base class for all log monitor failures"""


class ConfigParseError(LogMonitorError):
    """A command-line value could not be parsed"""


class SourceUnavailable(LogMonitorError):
    """The log file could not be opened for reading"""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Failed to open {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class SinkUnavailable(LogMonitorError):
    """The alert file could not be opened for appending"""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Could not open {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
