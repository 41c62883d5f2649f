"""Domain exceptions for macro targets."""

from .domain_errors import (
    InvalidDateRangeError,
    InvalidMacrosError,
    InvalidUserDataError,
    MacroTargetsDomainError,
    OnboardingIncompleteError,
    ProfileNotFoundError,
)

__all__ = [
    "MacroTargetsDomainError",
    "InvalidUserDataError",
    "InvalidMacrosError",
    "InvalidDateRangeError",
    "ProfileNotFoundError",
    "OnboardingIncompleteError",
]
