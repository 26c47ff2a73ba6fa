"""Portfolio content API with a single-admin auth gate."""

__version__ = "1.0.0"
