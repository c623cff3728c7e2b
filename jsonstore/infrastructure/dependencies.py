"""FastAPI dependency injection — wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jsonstore.application.interfaces import MutationGuard
from jsonstore.application.services import JsonRecordService
from jsonstore.domain.exceptions import MutationsDisabledError
from jsonstore.infrastructure.database.repositories import SQLAlchemyJsonRecordRepository
from jsonstore.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


async def get_json_record_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[JsonRecordService, None]:
    """Provides a JsonRecordService instance with its repository wired up."""
    repository = SQLAlchemyJsonRecordRepository(session)
    yield JsonRecordService(repository)


def get_mutation_guard(request: Request) -> MutationGuard:
    """Provides the guard chosen at startup (override in tests to swap policies)."""
    return request.app.state.mutation_guard


def ensure_mutations_enabled(
    request: Request,
    guard: MutationGuard = Depends(get_mutation_guard),
) -> None:
    """Reject the request before dispatch when the guard locks mutations."""
    if guard.is_locked(request.headers):
        logger.warning("Rejected %s %s: mutations locked", request.method, request.url.path)
        raise MutationsDisabledError(request.method)
