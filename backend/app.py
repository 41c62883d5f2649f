from __future__ import annotations

# Standard library
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Final

# Third-party
import structlog
from dotenv import load_dotenv
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

# .env before anything reads configuration
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

# Local application imports
from application.macro_targets.orchestrators.macro_orchestrator import (  # noqa: E402
    create_macro_orchestrator,
)
from gql.context import GraphQLContext, create_context  # noqa: E402
from gql.schema import create_schema  # noqa: E402
from infrastructure.config import get_app_version, get_port  # noqa: E402
from infrastructure.logging_config import configure_logging  # noqa: E402
from infrastructure.persistence.repository_factory import (  # noqa: E402
    get_daily_log_repository,
    get_profile_repository,
)

configure_logging()
logger = structlog.get_logger("startup")

# Read from env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = get_app_version()

schema = create_schema()

# Explicit export for mypy/tests
__all__: list[str] = ["app"]


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:  # pragma: no cover
    """Application lifecycle: log configuration at startup and shutdown."""
    logger.info("lifespan.startup", version=APP_VERSION)
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="Macro Targets Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# ============================================
# GraphQL Context Setup
# ============================================

# Singletons shared by every request
_profile_repository = get_profile_repository()
_daily_log_repository = get_daily_log_repository()
_macro_orchestrator = create_macro_orchestrator()


def get_graphql_context() -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    return create_context(
        macro_orchestrator=_macro_orchestrator,
        profile_repository=_profile_repository,
        daily_log_repository=_daily_log_repository,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")


# ============================================
# Run with uvicorn
# ============================================

if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=get_port())
