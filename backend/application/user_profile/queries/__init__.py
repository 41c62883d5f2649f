"""CQRS Queries for user profiles."""

from .get_profile import GetProfileQuery, GetProfileQueryHandler

__all__ = ["GetProfileQuery", "GetProfileQueryHandler"]
