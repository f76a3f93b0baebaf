"""Email-to-project suggestion matcher."""

__version__ = "1.0.0"
