"""
Log entry severities.

See https://cloud.google.com/logging/docs/reference/v2/rest/v2/LogEntry#LogSeverity
"""

from enum import Enum


class Severity(str, Enum):
    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"
    INFO = "INFO"
    NOTICE = "NOTICE"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    ALERT = "ALERT"
    EMERGENCY = "EMERGENCY"


def severity_name(severity: "Severity | str") -> str:
    """Return the wire name of a severity; unknown strings pass through."""
    if isinstance(severity, Severity):
        return severity.value
    return str(severity)
