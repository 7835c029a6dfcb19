"""Raised when a cron statement cannot be parsed."""

from .ServiceTypeError import ServiceTypeError


class CronSyntaxError(ServiceTypeError):
    """Cron statement with the wrong field count or a non-integer field."""
