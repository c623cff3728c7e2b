"""Abstract repository interface (port) for JsonRecord persistence."""

from abc import ABC, abstractmethod

from jsonstore.domain.entities import JsonRecord, JsonRecordSummary


class JsonRecordRepository(ABC):
    """Port for JSON record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, record_id: str) -> JsonRecord | None:
        """Retrieve a single record, payload included."""
        ...

    @abstractmethod
    async def list_summaries(self) -> list[JsonRecordSummary]:
        """Retrieve every record without its payload, most recently updated first."""
        ...

    @abstractmethod
    async def create(self, record: JsonRecord) -> None:
        """Insert a new record."""
        ...

    @abstractmethod
    async def update(self, record: JsonRecord) -> None:
        """Write the record's data and updated_at back to storage.

        Raises EntityNotFoundError when the row no longer exists.
        """
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if a row was removed."""
        ...
