"""Todo API command line entry point."""

import asyncio

import typer
import uvicorn
from rich.console import Console

from todo_api.api.config import get_database_settings
from todo_api.db import DatabaseSessionManager

app = typer.Typer(name="todo-api", help="Run and manage the Todo API service")
console = Console()


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Restart on code changes"),
) -> None:
    """Serve the HTTP API with uvicorn."""
    console.print(f"Serving Todo API on http://{host}:{port}", style="bold green")
    uvicorn.run("todo_api.api.main:app", host=host, port=port, reload=reload)


async def _create_tables(database_url: str) -> None:
    manager = DatabaseSessionManager(database_url)
    try:
        await manager.create_all()
    finally:
        await manager.close()


@app.command("init-db")
def init_db(
    database_url: str | None = typer.Option(
        None,
        "--database-url",
        help="Async SQLAlchemy URL (defaults to DB_URL setting)",
    ),
) -> None:
    """Create the todos table on the configured database."""
    if database_url is None:
        database_url = get_database_settings().url

    asyncio.run(_create_tables(database_url))
    console.print(f"Database ready: {database_url}", style="green")


if __name__ == "__main__":
    app()
