"""Configuration, diagnostics and transaction status tools for a Rootstock wallet."""

__version__ = "0.1.0"