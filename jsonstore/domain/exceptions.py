"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidPayloadError(Exception):
    """Raised when a request body is not valid JSON or lacks the ``data`` field."""


class MutationsDisabledError(Exception):
    """Raised when a mutating method is attempted while the production lock is active."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"{method} is disabled in production")
