"""CQRS Commands for user profiles."""

from .complete_onboarding import (
    CompleteOnboardingCommand,
    CompleteOnboardingHandler,
)
from .record_login import RecordLoginCommand, RecordLoginHandler
from .reset_onboarding import ResetOnboardingCommand, ResetOnboardingHandler
from .update_target_macros import (
    UpdateTargetMacrosCommand,
    UpdateTargetMacrosHandler,
)

__all__ = [
    "CompleteOnboardingCommand",
    "CompleteOnboardingHandler",
    "RecordLoginCommand",
    "RecordLoginHandler",
    "ResetOnboardingCommand",
    "ResetOnboardingHandler",
    "UpdateTargetMacrosCommand",
    "UpdateTargetMacrosHandler",
]
