"""
Exceptions for Jotter.

Every failure carries a descriptive message; callers surface str(error).
"""


class JotterError(Exception):
    """Base class for all Jotter errors."""


class ConfigError(JotterError):
    """config.toml exists but could not be parsed."""


class DirectoryResolutionFailure(JotterError):
    """The application data directory could not be resolved."""


class DirectoryCreationFailure(JotterError):
    """The notes directory could not be created."""


class ReadFailure(JotterError):
    """A note file (or the notes directory) could not be read."""


class WriteFailure(JotterError):
    """Note content could not be written."""


class CreationExhausted(WriteFailure):
    """No free filename was found within the retry bound."""


class DeleteFailure(JotterError):
    """A note file could not be removed (other than being absent)."""
