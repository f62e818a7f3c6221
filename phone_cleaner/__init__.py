"""Native storage bridge for the phone-cleaner app."""

__version__ = "0.1.0"
