"""SQLite database operations for tasks."""

import logging
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from ulid import ULID

from ..errors import TaskNotFoundError
from ..models import Task
from ..search import FilterCriteria

logger = logging.getLogger(__name__)

COLUMNS = (
    "id",
    "title",
    "description",
    "status",
    "due_date",
    "category",
    "created_at",
    "updated_at",
)


def _lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def build_where(criteria: FilterCriteria) -> tuple[str, list[Any]]:
    """Compile criteria into a WHERE clause and its parameters.

    Returns an empty clause when no criterion is present.
    """
    where_clauses = []
    params: list[Any] = []

    if criteria.search_term is not None:
        # py_lower is Python's str.lower so case folding matches the resolver
        where_clauses.append(
            "(instr(py_lower(title), ?) > 0 OR instr(py_lower(description), ?) > 0)"
        )
        needle = criteria.search_term.lower()
        params.extend([needle, needle])

    if criteria.status is not None:
        where_clauses.append("status = ?")
        params.append(criteria.status.value)

    if criteria.start_date is not None or criteria.end_date is not None:
        where_clauses.append("due_date IS NOT NULL")
        if criteria.start_date is not None:
            where_clauses.append("due_date >= ?")
            params.append(criteria.start_date.isoformat())
        if criteria.end_date is not None:
            where_clauses.append("due_date <= ?")
            params.append(criteria.end_date.isoformat())

    if criteria.category is not None:
        where_clauses.append("category = ?")
        params.append(criteria.category)

    if not where_clauses:
        return "", params
    return " WHERE " + " AND ".join(where_clauses), params


class SqliteTaskStore:
    """Task store backed by a SQLite file.

    Each call opens its own connection, so the store can be shared between
    request threads.
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def get_connection(self) -> sqlite3.Connection:
        """Get a database connection with WAL mode enabled."""
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        conn.create_function("py_lower", 1, _lower, deterministic=True)
        return conn

    @contextmanager
    def get_db(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Initialize the database schema."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        with self.get_db() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS tasks (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    description TEXT,
                    status TEXT NOT NULL DEFAULT 'TODO',
                    due_date TEXT,
                    category TEXT,
                    created_at INTEGER NOT NULL,
                    updated_at INTEGER NOT NULL
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_tasks_status
                ON tasks(status)
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_tasks_due_date
                ON tasks(due_date)
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_tasks_category
                ON tasks(category)
            """)
            total = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()[0]
        logger.info("SqliteTaskStore ready db=%s total=%s", self._db_path, total)

    def _select(self, where: str = "", params: list[Any] | None = None) -> list[Task]:
        with self.get_db() as conn:
            cursor = conn.execute(
                f"SELECT * FROM tasks{where} ORDER BY rowid", params or []
            )
            return [Task(**dict(row)) for row in cursor.fetchall()]

    def find_all(self) -> list[Task]:
        """Get all tasks in insertion order."""
        return self._select()

    def find_by_id(self, task_id: str) -> Task | None:
        """Get a task by ID."""
        with self.get_db() as conn:
            cursor = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,))
            row = cursor.fetchone()
            return Task(**dict(row)) if row else None

    def find_matching(self, criteria: FilterCriteria) -> list[Task]:
        """Get the tasks matching every present criterion."""
        where, params = build_where(criteria)
        logger.debug("Searching tasks where=%r params=%r", where, params)
        return self._select(where, params)

    def save(self, task: Task) -> Task:
        """Insert a new task or replace an existing one."""
        now = int(time.time())
        if task.id is None:
            stored = task.model_copy(
                update={"id": str(ULID()), "created_at": now, "updated_at": now}
            )
            row = stored.model_dump(mode="json")
            with self.get_db() as conn:
                conn.execute(
                    f"""
                    INSERT INTO tasks ({", ".join(COLUMNS)})
                    VALUES ({", ".join("?" for _ in COLUMNS)})
                    """,
                    [row[column] for column in COLUMNS],
                )
            logger.debug("Inserted task id=%s", stored.id)
            return stored

        stored = task.model_copy(update={"updated_at": now})
        row = stored.model_dump(mode="json")
        with self.get_db() as conn:
            cursor = conn.execute(
                """
                UPDATE tasks
                SET title = ?, description = ?, status = ?, due_date = ?,
                    category = ?, updated_at = ?
                WHERE id = ?
                """,
                (
                    row["title"],
                    row["description"],
                    row["status"],
                    row["due_date"],
                    row["category"],
                    row["updated_at"],
                    row["id"],
                ),
            )
            if cursor.rowcount == 0:
                raise TaskNotFoundError(stored.id)
        logger.debug("Updated task id=%s", stored.id)
        return stored

    def delete(self, task: Task) -> None:
        """Delete a task by ID."""
        with self.get_db() as conn:
            cursor = conn.execute("DELETE FROM tasks WHERE id = ?", (task.id,))
            if cursor.rowcount == 0:
                raise TaskNotFoundError(task.id)
        logger.debug("Deleted task id=%s", task.id)

    def distinct_categories(self) -> list[str]:
        """Get the sorted set of categories in use."""
        with self.get_db() as conn:
            cursor = conn.execute(
                """
                SELECT DISTINCT category FROM tasks
                WHERE category IS NOT NULL
                ORDER BY category
                """
            )
            return [row["category"] for row in cursor.fetchall()]
