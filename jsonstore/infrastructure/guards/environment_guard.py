"""Mutation guards — implementations of the MutationGuard port."""

import logging
from collections.abc import Mapping

from jsonstore.application.interfaces import MutationGuard
from jsonstore.config import Settings

logger = logging.getLogger(__name__)


class OpenMutationGuard(MutationGuard):
    """Never locks. Used by deployments without a production lock."""

    def is_locked(self, headers: Mapping[str, str]) -> bool:
        return False


class EnvironmentMutationGuard(MutationGuard):
    """Locks mutations for a designated client while running in production.

    The lock is active only when both hold: the deployment is marked as
    production, and the request carries ``header`` with exactly ``client``.
    """

    def __init__(self, *, production: bool, header: str, client: str):
        self._production = production
        self._header = header
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "EnvironmentMutationGuard":
        return cls(
            production=settings.is_production,
            header=settings.mutation_lock_header,
            client=settings.mutation_lock_client,
        )

    def is_locked(self, headers: Mapping[str, str]) -> bool:
        if not self._production:
            return False
        return headers.get(self._header) == self._client


def build_mutation_guard(settings: Settings) -> MutationGuard:
    """Select the guard named by ``settings.mutation_guard``."""
    kind = settings.mutation_guard.strip().lower()
    if kind == "none":
        return OpenMutationGuard()
    if kind == "environment":
        return EnvironmentMutationGuard.from_settings(settings)
    raise ValueError(f"Unknown mutation guard: {settings.mutation_guard!r}")
