"""Domain layer for daily macro targets.

Business rules for target calculation, user profiles and the daily
macro log, decoupled from GraphQL and infrastructure.
"""
