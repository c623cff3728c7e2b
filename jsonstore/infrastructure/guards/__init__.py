from .environment_guard import (
    EnvironmentMutationGuard,
    OpenMutationGuard,
    build_mutation_guard,
)

__all__ = [
    "EnvironmentMutationGuard",
    "OpenMutationGuard",
    "build_mutation_guard",
]
