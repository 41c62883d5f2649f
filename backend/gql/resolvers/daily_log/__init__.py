"""Daily macro log GraphQL resolvers."""

from .mutations import DailyLogMutations
from .queries import DailyLogQueries

__all__ = ["DailyLogMutations", "DailyLogQueries"]
