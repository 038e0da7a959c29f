# logic/storage.py
# INSERT ... ON CONFLICT helpers. The unique constraints of the tables,
# not read-then-write checks, keep assignments and scores free of duplicates.

from sqlalchemy.dialects import postgresql, sqlite

from extensions import db

_INSERTS = {
    'sqlite': sqlite.insert,
    'postgresql': postgresql.insert,
}


def _insert_for(model):
    db.session.flush()
    dialect = db.session.get_bind().dialect.name
    try:
        insert = _INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f'INSERT ... ON CONFLICT is not supported for dialect {dialect!r}')
    return insert(model.__table__)


def insert_ignore_conflicts(model, rows, conflict_columns):
    """Insert rows, silently skipping those that collide on conflict_columns."""
    if not rows:
        return
    stmt = _insert_for(model).values(rows).on_conflict_do_nothing(index_elements=conflict_columns)
    db.session.execute(stmt)


def upsert(model, rows, conflict_columns, update_columns):
    """Insert rows; on a collision overwrite update_columns with the incoming values."""
    if not rows:
        return
    stmt = _insert_for(model).values(rows)
    stmt = stmt.on_conflict_do_update(
        index_elements=conflict_columns,
        set_={column: stmt.excluded[column] for column in update_columns}
    )
    db.session.execute(stmt)
