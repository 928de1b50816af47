class ReportError(Exception):
    """Base exception for all report-related errors."""


class ReportWriteError(ReportError):
    """Raised when a report file cannot be written."""
