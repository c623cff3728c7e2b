"""SQLAlchemy ORM model for the JsonRecord entity."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from jsonstore.infrastructure.database.base import Base


class JsonRecordModel(Base):
    """ORM model — maps to the 'json_data' table.

    ``data`` holds the payload serialized as JSON text; the repository
    encodes and decodes it.
    """

    __tablename__ = "json_data"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    data: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_json_data_updated_at", "updated_at"),
    )

    def __repr__(self) -> str:
        return f"<JsonRecordModel(id={self.id}, updated_at={self.updated_at})>"
