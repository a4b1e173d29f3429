"""Log Monitor - Constants and patterns"""

import re

VERSION = "1.0.0"

DEFAULT_LOG_FILE = "system.log"
DEFAULT_ALERTS_FILE = "alerts.log"
DEFAULT_FAILED_THRESHOLD = 3
DEFAULT_INTERVAL = 5.0

ALERT_SEPARATOR = "----"

# Danger patterns, matched as lowercase substrings
DANGER_PATTERNS = {
    'failed_login': "failed password",
    'error': "error",
    'critical': "critical",
}

# First IPv4-looking token; groups are not range checked
ADDRESS_PATTERN = re.compile(r'\b\d{1,3}(?:\.\d{1,3}){3}\b')
