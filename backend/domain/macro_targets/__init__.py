"""Macro targets domain.

Daily calorie and macronutrient targets computed from onboarding answers,
plus the per-user profile and daily macro log that store them.
"""
