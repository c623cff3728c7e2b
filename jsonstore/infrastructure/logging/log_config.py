"""Logging setup for the record store.

Three knobs on Settings: the root level, the SQL engine/driver loggers, and
the ``jsonstore`` package itself. uvicorn's loggers follow the root level.

Usage:
    from jsonstore.infrastructure.logging.log_config import setup_logging
    setup_logging(settings)   # once, from the FastAPI lifespan
"""

import logging
import sys

from jsonstore.config import Settings

_SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")
_STORE_LOGGER = "jsonstore"
_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    # Leave an already configured root logger alone.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    sql_level = _parse_level(settings.log_level_sql)
    for name in _SQL_LOGGERS:
        logging.getLogger(name).setLevel(sql_level)
    logging.getLogger(_STORE_LOGGER).setLevel(_parse_level(settings.log_level_store))


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = logging.getLevelName(raw.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO
