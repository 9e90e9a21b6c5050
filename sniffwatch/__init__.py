"""Country codes, flag selection and traffic chart bookkeeping for a network traffic monitor."""

__version__ = "0.1.0"

__all__ = ["chart_data", "cli", "country", "flag_assets", "flags"]