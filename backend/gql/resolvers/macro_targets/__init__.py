"""Macro target GraphQL resolvers."""

from .queries import MacroTargetsQueries

__all__ = ["MacroTargetsQueries"]
