"""DailyMacroLog entity - calories and macros eaten on one day."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from ..exceptions.domain_errors import InvalidUserDataError
from ..value_objects.macro_amounts import MacroAmounts
from ..value_objects.macro_targets import MacroTargets


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DailyMacroLog:
    """Running totals for one user and one calendar day.

    Totals grow as food entries are logged and shrink when an entry is
    undone. They never go below zero.

    Attributes:
        user_id: Owner of the log
        log_date: Calendar day (local to the user)
        calories: Calories eaten (kcal)
        protein: Protein eaten (g)
        carbs: Carbohydrates eaten (g)
        fats: Fat eaten (g)
        created_at: When the first entry of the day was logged
        updated_at: Last change
    """

    user_id: str
    log_date: date
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise InvalidUserDataError("User ID cannot be empty")

    @property
    def date_key(self) -> str:
        """Day formatted as YYYY-MM-DD."""
        return self.log_date.isoformat()

    def add(self, amounts: MacroAmounts) -> None:
        """Add a logged food entry to the totals."""
        self.calories += amounts.calories
        self.protein += amounts.protein
        self.carbs += amounts.carbs
        self.fats += amounts.fats
        self.updated_at = _utcnow()

    def subtract(self, amounts: MacroAmounts) -> None:
        """Remove an undone food entry, clamping each total at zero."""
        self.calories = max(0.0, self.calories - amounts.calories)
        self.protein = max(0.0, self.protein - amounts.protein)
        self.carbs = max(0.0, self.carbs - amounts.carbs)
        self.fats = max(0.0, self.fats - amounts.fats)
        self.updated_at = _utcnow()

    def overwrite(self, amounts: MacroAmounts) -> None:
        """Replace the totals, keeping ``created_at``."""
        self.calories = amounts.calories
        self.protein = amounts.protein
        self.carbs = amounts.carbs
        self.fats = amounts.fats
        self.updated_at = _utcnow()

    def totals(self) -> MacroAmounts:
        return MacroAmounts(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
        )

    def remaining_calories(self, targets: Optional[MacroTargets]) -> float:
        """Calories left before reaching the target (never negative)."""
        if targets is None:
            return 0.0
        return max(0.0, targets.calories - self.calories)

    def calorie_progress(self, targets: Optional[MacroTargets]) -> float:
        """Share of the calorie target eaten, as a percentage capped at 100."""
        if targets is None or targets.calories <= 0:
            return 0.0
        return min(100.0, self.calories / targets.calories * 100)
