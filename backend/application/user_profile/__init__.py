"""Application services for user profiles and onboarding."""
