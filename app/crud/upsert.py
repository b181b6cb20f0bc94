# Single-statement INSERT ... ON CONFLICT DO UPDATE for the supported stores

from typing import Any, Dict, Iterable, Sequence

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

_DIALECT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def upsert(
    db: Session,
    model,
    values: Dict[str, Any],
    index_elements: Sequence[str],
    update_columns: Iterable[str],
) -> None:
    """
    Insert `values`, or update `update_columns` of the row that conflicts on
    `index_elements`. Atomic in the store, so concurrent first writes of the
    same key never collide.

    ⚠️ Bypasses the identity map. Reload with populate_existing if the row is
    needed afterwards.
    """
    dialect = db.get_bind().dialect.name
    try:
        insert = _DIALECT_INSERTS[dialect]
    except KeyError:
        raise NotImplementedError(f"Upsert is not supported on the {dialect} dialect")

    stmt = insert(model).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=list(index_elements),
        set_={column: stmt.excluded[column] for column in update_columns},
    )
    db.execute(stmt)
