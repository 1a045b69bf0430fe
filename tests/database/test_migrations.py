# tests/database/test_migrations.py
from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

import filmdb.database.alembic as _alembic_pkg


def _alembic_config(url: str) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(next(iter(_alembic_pkg.__path__)))))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def test_upgrade_and_downgrade_sqlite(tmp_path):
    url = f"sqlite+pysqlite:///{tmp_path / 'migrate.db'}"
    cfg = _alembic_config(url)

    command.upgrade(cfg, "head")
    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
        assert {"film", "person", "film_director", "role"} <= tables
        role_pk = inspect(engine).get_pk_constraint("role")["constrained_columns"]
        assert set(role_pk) == {"film_id", "person_id"}

        command.downgrade(cfg, "base")
        assert not {"film", "person", "film_director", "role"} & set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
