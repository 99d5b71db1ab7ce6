# /classroom/services/database_helpers/dialect_insert.py

"""
Atomic insert-or-ignore / insert-or-update needs the dialect-specific
`insert()` construct, since `ON CONFLICT` is not part of generic SQLAlchemy.
"""

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

_INSERT_BY_DIALECT = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def dialect_insert(db: Session, table):
    dialect_name = db.get_bind().dialect.name
    try:
        insert = _INSERT_BY_DIALECT[dialect_name]
    except KeyError:
        raise NotImplementedError(f"Upserts are not supported on the '{dialect_name}' dialect.")
    return insert(table)
