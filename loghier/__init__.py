"""Logging building blocks: events, filters, appenders, layouts, nested contexts and printf-style formatting."""

__version__ = "1.1.0"