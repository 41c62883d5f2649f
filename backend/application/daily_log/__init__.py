"""Application services for the daily macro log."""
