"""Domain exceptions for macro targets."""


class MacroTargetsDomainError(Exception):
    """Base exception for macro targets domain errors."""

    pass


class InvalidUserDataError(MacroTargetsDomainError):
    """Raised when onboarding answers lack data a calculation needs."""

    pass


class InvalidMacrosError(MacroTargetsDomainError):
    """Raised when manually edited macro grams are negative."""

    pass


class InvalidDateRangeError(MacroTargetsDomainError):
    """Raised when a log range starts after it ends."""

    def __init__(self, start_date: str, end_date: str):
        super().__init__(
            f"Start date {start_date} is after end date {end_date}"
        )
        self.start_date = start_date
        self.end_date = end_date


class ProfileNotFoundError(MacroTargetsDomainError):
    """Raised when no profile exists for a user."""

    def __init__(self, user_id: str):
        super().__init__(f"Profile not found for user: {user_id}")
        self.user_id = user_id


class OnboardingIncompleteError(MacroTargetsDomainError):
    """Raised when targets are edited before onboarding finished."""

    def __init__(self, user_id: str):
        super().__init__(f"Onboarding not completed for user: {user_id}")
        self.user_id = user_id
