from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from booking_api.models.base import Base

ROOT = Path(__file__).resolve().parent.parent


def _alembic_config(database_url: str) -> Config:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


def _tables(path: Path) -> set:
    engine = create_engine(f"sqlite:///{path}")
    try:
        return set(inspect(engine).get_table_names()) - {"alembic_version"}
    finally:
        engine.dispose()


def test_upgrade_matches_models_and_downgrade_removes_them(tmp_path):
    path = tmp_path / "migrated.db"
    config = _alembic_config(f"sqlite+aiosqlite:///{path}")

    command.upgrade(config, "head")
    assert _tables(path) == set(Base.metadata.tables)

    command.downgrade(config, "base")
    assert _tables(path) == set()
