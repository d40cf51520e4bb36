# src/tasklist/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Iterator
from pathlib import Path

from ..core.errors import InfrastructureError
from .task_models import Task, ts_to_datetime

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value.
_SQLITE_INT_MIN = -(2**63)
_SQLITE_INT_MAX = 2**63 - 1


def _storable_id(task_id: int) -> bool:
    return _SQLITE_INT_MIN <= int(task_id) <= _SQLITE_INT_MAX


class TaskStore:
    """
    SQLite task store.

    One table, keyed by an AUTOINCREMENT id so deleted ids are never handed out again.
    Timestamps are stored as REAL unix seconds.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3", *, timeout: float = 30.0) -> None:
        self._db_path = Path(db_path)
        self._timeout = float(timeout)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=self._timeout)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @contextlib.contextmanager
    def _connect(self, op: str) -> Iterator[sqlite3.Connection]:
        """Open a connection for one operation; sqlite failures become InfrastructureError."""
        conn: sqlite3.Connection | None = None
        try:
            conn = self._get_conn()
            yield conn
        except sqlite3.Error as exc:
            logger.exception("TaskStore %s failed db=%s", op, self._db_path)
            raise InfrastructureError(f"Task store {op} failed: {exc}") from exc
        finally:
            if conn is not None:
                conn.close()

    def _ensure_schema(self) -> None:
        with self._connect("schema") as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    text TEXT NOT NULL CHECK (length(trim(text)) > 0),
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_tasks_created ON tasks(created_at)")
            conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            text=str(row["text"]),
            completed=bool(row["completed"]),
            created_at=ts_to_datetime(row["created_at"]),
            updated_at=ts_to_datetime(row["updated_at"]),
        )

    @staticmethod
    def _fetch_by_id(conn: sqlite3.Connection, task_id: int) -> Task | None:
        row = conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
        return TaskStore._row_to_task(row) if row else None

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._connect("count") as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def get_task(self, task_id: int) -> Task | None:
        if not _storable_id(task_id):
            return None
        with self._connect("get") as conn:
            return self._fetch_by_id(conn, task_id)

    def insert(self, text: str, completed: bool = False) -> Task:
        text = (text or "").strip()
        if not text:
            raise ValueError("text is required")

        now = time.time()
        with self._connect("insert") as conn:
            cur = conn.execute(
                "INSERT INTO tasks(text, completed, created_at, updated_at) VALUES (?, ?, ?, ?)",
                (text, int(bool(completed)), now, now),
            )
            rowid = cur.lastrowid
            if rowid is None:
                raise RuntimeError("SQLite did not return lastrowid for tasks insert")
            task = self._fetch_by_id(conn, int(rowid))
            conn.commit()

        if task is None:
            raise RuntimeError(f"Inserted task id={rowid} could not be read back")
        logger.debug("Task inserted id=%s", task.id)
        return task

    def select_all(self) -> list[Task]:
        """All tasks, newest created first; equal created_at falls back to id DESC."""
        with self._connect("select") as conn:
            rows = conn.execute(
                "SELECT * FROM tasks ORDER BY created_at DESC, id DESC"
            ).fetchall()
            return [self._row_to_task(r) for r in rows]

    def update_by_id(self, task_id: int, completed: bool) -> Task | None:
        """
        Set completion and refresh updated_at.

        Returns None when no row matched (never created, or deleted concurrently).
        """
        if not _storable_id(task_id):
            return None

        now = time.time()
        with self._connect("update") as conn:
            cur = conn.execute(
                """
                UPDATE tasks
                SET completed = ?,
                    updated_at = MAX(?, created_at)
                WHERE id = ?
                """,
                (int(bool(completed)), now, int(task_id)),
            )
            if cur.rowcount == 0:
                conn.rollback()
                return None
            task = self._fetch_by_id(conn, task_id)
            conn.commit()
        logger.debug("Task updated id=%s completed=%s", task_id, completed)
        return task

    def delete_by_id(self, task_id: int) -> None:
        if not _storable_id(task_id):
            return
        with self._connect("delete") as conn:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            conn.commit()
        logger.debug("Task delete id=%s removed=%s", task_id, cur.rowcount)
