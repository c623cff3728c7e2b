"""Port for the policy that can switch off mutating requests."""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class MutationGuard(ABC):
    """Decides, per request, whether POST/PUT/DELETE are currently disabled."""

    @abstractmethod
    def is_locked(self, headers: Mapping[str, str]) -> bool:
        """Return True when mutations must be rejected for a request with these headers."""
        ...
