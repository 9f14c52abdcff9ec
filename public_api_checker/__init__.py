"""Public API Checker — health aggregator for business-level API endpoints."""

__version__ = "0.1.0"
