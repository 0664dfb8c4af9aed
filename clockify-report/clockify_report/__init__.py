"""Command line client for reporting time to Clockify."""

__version__ = "0.1.0"
