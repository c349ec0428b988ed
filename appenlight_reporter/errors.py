# errors.py - exceptions raised by the reporter


class ReporterError(Exception):
    """Base class for reporter errors."""


class ConfigurationError(ReporterError, ValueError):
    """Raised at construction when required configuration is missing."""
