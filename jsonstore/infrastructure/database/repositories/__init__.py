from .json_record_repository import SQLAlchemyJsonRecordRepository

__all__ = [
    "SQLAlchemyJsonRecordRepository",
]
