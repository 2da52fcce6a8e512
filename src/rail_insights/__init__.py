"""Rail Insights: reconciliation of repeatedly observed transit trips."""

__version__ = "0.1.0"
