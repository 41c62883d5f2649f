"""User profile GraphQL resolvers."""

from .mutations import UserProfileMutations
from .queries import UserProfileQueries

__all__ = ["UserProfileMutations", "UserProfileQueries"]
