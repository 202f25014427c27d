import logging

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Deterministic constraint names, used to map engine errors back to columns
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Base class for models
Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _search_path_listener(schema: str):
    def set_search_path(dbapi_connection, connection_record):
        existing_autocommit = dbapi_connection.autocommit
        dbapi_connection.autocommit = True
        cursor = dbapi_connection.cursor()
        cursor.execute(f'SET SESSION search_path TO "{schema}"')
        cursor.close()
        dbapi_connection.autocommit = existing_autocommit

    return set_search_path


def create_db_engine(
    url: str,
    schema: str | None = None,
    echo: bool = False,
    isolation_level: str | None = None,
    **kwargs,
) -> Engine:
    """
    Build an engine with the connection hooks the schema relies on.

    - SQLite: foreign keys are off by default, so every connection turns
      them on (cascade and restrict semantics depend on it).
    - PostgreSQL: every connection resolves unqualified names inside
      `schema` through its search_path, and runs at `isolation_level`.
    """
    is_postgres = url.startswith("postgresql")
    if is_postgres and isolation_level:
        kwargs["isolation_level"] = isolation_level

    engine = create_engine(url, echo=echo, **kwargs)

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    elif engine.dialect.name == "postgresql" and schema:
        event.listen(engine, "connect", _search_path_listener(schema), insert=True)

    logger.debug("engine created for dialect=%s schema=%s", engine.dialect.name, schema)
    return engine


settings = get_settings()

# Create engine
engine = create_db_engine(
    settings.sqlalchemy_database_url,
    schema=settings.db_schema,
    echo=settings.db_echo,
    isolation_level=settings.db_isolation_level,
)

# Session factory
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
