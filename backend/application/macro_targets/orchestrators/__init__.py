"""Orchestrators for macro target calculation."""

from .macro_orchestrator import (
    MacroCalculations,
    MacroTargetsOrchestrator,
    calculate_calories_from_macros,
    create_macro_orchestrator,
    generate_daily_macros,
    generate_daily_macros_from_age,
    generate_manual_macros,
)

__all__ = [
    "MacroCalculations",
    "MacroTargetsOrchestrator",
    "calculate_calories_from_macros",
    "create_macro_orchestrator",
    "generate_daily_macros",
    "generate_daily_macros_from_age",
    "generate_manual_macros",
]
