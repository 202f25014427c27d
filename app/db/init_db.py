# app/db/init_db.py
"""
Idempotent schema provisioning.

    python -m app.db.init_db            # create whatever is missing
    python -m app.db.init_db --reset    # drop everything, then create from empty
"""
import argparse
import logging
from typing import Optional, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.schema import CreateSchema, DropSchema

import app.models  # noqa: F401  (registers every table and the view DDL)
from app.core.config import get_settings
from app.db.database import Base, engine as default_engine

logger = logging.getLogger(__name__)


def _namespace(engine: Engine, schema: Optional[str]) -> Optional[str]:
    if engine.dialect.name == "postgresql":
        return schema or get_settings().db_schema
    return None


def create_schema(engine: Engine = default_engine, schema: Optional[str] = None) -> None:
    """Create the namespace, tables, indexes and the reporting view if missing."""
    namespace = _namespace(engine, schema)
    if namespace:
        with engine.begin() as conn:
            conn.execute(CreateSchema(namespace, if_not_exists=True))

    Base.metadata.create_all(bind=engine)
    logger.info(
        "schema ready: %d tables on %s (namespace=%s)",
        len(Base.metadata.tables),
        engine.dialect.name,
        namespace,
    )


def drop_schema(engine: Engine = default_engine, schema: Optional[str] = None) -> None:
    """Drop the view and every table (and on PostgreSQL, the namespace)."""
    namespace = _namespace(engine, schema)
    if namespace:
        with engine.begin() as conn:
            conn.execute(DropSchema(namespace, cascade=True, if_exists=True))
    else:
        Base.metadata.drop_all(bind=engine)
    logger.info("schema dropped on %s (namespace=%s)", engine.dialect.name, namespace)


def reset_schema(engine: Engine = default_engine, schema: Optional[str] = None) -> None:
    drop_schema(engine, schema)
    create_schema(engine, schema)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Provision the school records schema")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop every existing object before creating the schema",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.reset:
        reset_schema()
    else:
        create_schema()


if __name__ == "__main__":
    main()
