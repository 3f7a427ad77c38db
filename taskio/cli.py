"""Terminal search client.

Runs a search against the configured SQLite database and prints the matches
as a table.
"""

import argparse
import sys
from datetime import date

from rich.console import Console
from rich.table import Table

from .config import get_settings
from .db import SqliteTaskStore
from .logging_setup import setup_logging
from .models import Task, TaskStatus
from .services import TaskService

console = Console()

STATUS_LABELS = {
    TaskStatus.TODO: "To do",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.DONE: "Done",
}
STATUS_ICONS = {
    TaskStatus.TODO: "⭕",
    TaskStatus.IN_PROGRESS: "🔄",
    TaskStatus.DONE: "✅",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskio-search",
        description="Search tasks by text and filter by status, due date and category.",
    )
    parser.add_argument("-q", "--query", help="text to find in title or description")
    parser.add_argument(
        "-s",
        "--status",
        type=TaskStatus,
        choices=list(TaskStatus),
        metavar="{" + ",".join(s.value for s in TaskStatus) + "}",
    )
    parser.add_argument("--start-date", type=date.fromisoformat, help="YYYY-MM-DD, inclusive")
    parser.add_argument("--end-date", type=date.fromisoformat, help="YYYY-MM-DD, inclusive")
    parser.add_argument("-c", "--category", help="exact category name")
    parser.add_argument("--db", help="SQLite database path (defaults to TASKIO_DB_PATH)")
    return parser


def render_tasks(tasks: list[Task]) -> Table:
    """Render tasks as a rich table."""
    table = Table(show_header=True, header_style="bold blue")
    table.add_column("ID", style="dim", width=10)
    table.add_column("Task", style="bold", min_width=20)
    table.add_column("Status", justify="center", width=14)
    table.add_column("Due", width=10)
    table.add_column("Category")

    for task in tasks:
        table.add_row(
            task.id[:10],
            task.title,
            f"{STATUS_ICONS[task.status]} {STATUS_LABELS[task.status]}",
            task.due_date.isoformat() if task.due_date else "",
            task.category or "",
        )
    return table


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    store = SqliteTaskStore(args.db or settings.db_path)
    store.init_db()
    service = TaskService(store)

    tasks = service.search_and_filter(
        args.query, args.status, args.start_date, args.end_date, args.category
    )
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return 0
    console.print(render_tasks(tasks))
    console.print(f"{len(tasks)} task(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
