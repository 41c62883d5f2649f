"""UserProfile entity - aggregate root for a user's targets and streak."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from ..exceptions.domain_errors import InvalidUserDataError
from ..value_objects.macro_targets import MacroTargets
from ..value_objects.onboarding import OnboardingData


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UserProfile:
    """User profile aggregate root.

    Holds the onboarding answers, the daily macro targets derived from
    them and the meal-logging streak.

    Attributes:
        user_id: Owner of the profile
        onboarding_completed: Whether the onboarding flow finished
        onboarding_data: Answers from the last completed onboarding
        target_macros: Current daily targets
        streak: Consecutive days with at least one logged meal
        last_meal_log_date: Day of the most recent logged meal
        created_at: Profile creation timestamp
        updated_at: Last update timestamp
        last_login_at: Last login timestamp
    """

    user_id: str
    onboarding_completed: bool = False
    onboarding_data: Optional[OnboardingData] = None
    target_macros: Optional[MacroTargets] = None
    streak: int = 0
    last_meal_log_date: Optional[date] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    last_login_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise InvalidUserDataError("User ID cannot be empty")
        if self.streak < 0:
            raise InvalidUserDataError(
                f"Streak must be non-negative, got {self.streak}"
            )

    @classmethod
    def create(cls, user_id: str) -> "UserProfile":
        """Create the profile of a user who just signed up."""
        now = _utcnow()
        return cls(
            user_id=user_id,
            created_at=now,
            updated_at=now,
            last_login_at=now,
        )

    def complete_onboarding(
        self,
        onboarding_data: OnboardingData,
        target_macros: Optional[MacroTargets],
    ) -> None:
        """Store onboarding answers and mark onboarding as completed.

        Args:
            onboarding_data: Answers from the onboarding flow
            target_macros: Targets derived from the answers; None keeps the
                current targets (no macro setup mode was chosen)
        """
        self.onboarding_completed = True
        self.onboarding_data = onboarding_data
        if target_macros is not None:
            self.target_macros = target_macros
        self.updated_at = _utcnow()

    def reset_onboarding(self) -> None:
        """Forget onboarding answers and targets.

        Streak and timestamps other than ``updated_at`` are kept.
        """
        self.onboarding_completed = False
        self.onboarding_data = None
        self.target_macros = None
        self.updated_at = _utcnow()

    def record_login(self) -> None:
        self.last_login_at = _utcnow()
        self.updated_at = self.last_login_at

    def update_target_macros(self, target_macros: MacroTargets) -> None:
        self.target_macros = target_macros
        self.updated_at = _utcnow()

    def register_meal_logged(self, day: date) -> bool:
        """Update the streak for a meal logged on ``day``.

        - first meal ever: streak becomes 1
        - same day as the last meal: nothing changes
        - the day after the last meal: streak grows by one
        - any other day (gap or earlier day): streak restarts at 1

        Returns:
            bool: True if the profile changed
        """
        if self.last_meal_log_date is not None:
            days_since_last = (day - self.last_meal_log_date).days
            if days_since_last == 0:
                return False
            if days_since_last == 1:
                self.streak += 1
            else:
                self.streak = 1
        else:
            self.streak = 1

        self.last_meal_log_date = day
        self.updated_at = _utcnow()
        return True

    def __repr__(self) -> str:
        return (
            f"UserProfile(user_id={self.user_id!r}, "
            f"onboarding_completed={self.onboarding_completed}, "
            f"streak={self.streak})"
        )
