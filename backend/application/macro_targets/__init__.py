"""Application services for macro target calculation."""
