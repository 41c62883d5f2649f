"""Core building blocks for the macro targets domain."""
