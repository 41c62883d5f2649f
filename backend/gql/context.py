"""GraphQL context factory for dependency injection.

Provides all required dependencies for GraphQL resolvers:
- Repositories (user profiles, daily logs)
- Orchestrators (macro target calculation)
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.macro_targets.orchestrators.macro_orchestrator import (
    MacroTargetsOrchestrator,
)
from domain.macro_targets.core.ports.repository import (
    IDailyLogRepository,
    IUserProfileRepository,
)


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("service_name")`.

    Attributes:
        macro_orchestrator: Orchestrator for target calculations
        profile_repository: Repository for user profiles
        daily_log_repository: Repository for daily macro logs
        request: FastAPI request object
    """

    def __init__(
        self,
        macro_orchestrator: MacroTargetsOrchestrator,
        profile_repository: IUserProfileRepository,
        daily_log_repository: IDailyLogRepository,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.macro_orchestrator = macro_orchestrator
        self.profile_repository = profile_repository
        self.daily_log_repository = daily_log_repository
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Example:
            >>> repository = info.context.get("profile_repository")
        """
        return getattr(self, key, None)


def create_context(
    macro_orchestrator: MacroTargetsOrchestrator,
    profile_repository: IUserProfileRepository,
    daily_log_repository: IDailyLogRepository,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    return GraphQLContext(
        macro_orchestrator=macro_orchestrator,
        profile_repository=profile_repository,
        daily_log_repository=daily_log_repository,
        request=request,
    )
