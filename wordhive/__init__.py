"""WordHive: daily seven-letter word puzzle service."""

__version__ = "0.1.0"
