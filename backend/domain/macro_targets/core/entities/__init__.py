"""Entities for the macro targets domain."""

from .daily_macro_log import DailyMacroLog
from .user_profile import UserProfile

__all__ = ["DailyMacroLog", "UserProfile"]
