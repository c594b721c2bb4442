import uuid

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Stable constraint names so alembic autogenerate produces matching diffs
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def generate_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Declarative base for every booking table. Primary keys are uuid strings."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
