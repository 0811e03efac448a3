"""Ad-hoc database migrations for Taskpad."""

from __future__ import annotations

from sqlalchemy import text

TASK_INDEXES = {
    "ix_task_owner": "owner_id",
    "ix_task_owner_completed": "owner_id, completed",
    "ix_task_owner_priority": "owner_id, priority",
}


def _column_exists(conn, table: str, column: str) -> bool:
    result = conn.execute(text(f"PRAGMA table_info('{table}')"))
    return any(row[1] == column for row in result)


def ensure_task_columns(conn) -> None:
    # Columns added after the first public schema. Older databases lack them.
    columns = {
        "description": "TEXT",
        "due_date": "INTEGER",
        "priority": "VARCHAR NOT NULL DEFAULT 'medium'",
        "created_at": "INTEGER NOT NULL DEFAULT 0",
    }
    for name, ddl_type in columns.items():
        if not _column_exists(conn, "task", name):
            conn.execute(text(f"ALTER TABLE task ADD COLUMN {name} {ddl_type}"))

    conn.execute(
        text(
            """
            UPDATE task
            SET priority = 'medium'
            WHERE priority IS NULL OR priority NOT IN ('low', 'medium', 'high')
            """
        )
    )


def ensure_task_indexes(conn) -> None:
    for name, columns in TASK_INDEXES.items():
        conn.execute(text(f"CREATE INDEX IF NOT EXISTS {name} ON task ({columns})"))


def run_all(engine) -> None:
    with engine.begin() as conn:
        ensure_task_columns(conn)
        ensure_task_indexes(conn)


__all__ = ["TASK_INDEXES", "run_all"]
