"""Server and database commands."""

import typer
from rich.panel import Panel

from src.bookshelf.core.errors import StorageUnavailableError
from src.bookshelf.runtime.context import get_config

from .utils import console


def start_server(
    host: str | None = typer.Option(None, help="Host to bind to (default: config app.host)"),
    port: int | None = typer.Option(None, help="Port to bind to (default: config app.port)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the API server.
    """
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Book Management API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print(f"[blue]API docs:[/blue] http://{host}:{port}{config.app.docs_url}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.bookshelf.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["src"] if reload else None,
        log_level=log_level,
        access_log=False,
    )


def init_database() -> None:
    """
    🗄️  Create the database file and the books table.
    """
    from src.bookshelf.runtime.init_db import init_db

    try:
        init_db().dispose()
    except StorageUnavailableError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(1) from e

    console.print(f"[green]✅ Database ready:[/green] {get_config().database.url}")
