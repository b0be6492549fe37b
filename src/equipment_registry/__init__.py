"""Registry of physical equipment records."""

__version__ = "0.1.0"
