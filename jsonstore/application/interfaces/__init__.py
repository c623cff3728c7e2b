from .json_record_repository import JsonRecordRepository
from .mutation_guard import MutationGuard

__all__ = [
    "JsonRecordRepository",
    "MutationGuard",
]
