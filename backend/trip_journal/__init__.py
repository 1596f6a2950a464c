"""Trip Journal: per-day route loading and trip totals for hiking journal pages."""

__version__ = "0.1.0"
