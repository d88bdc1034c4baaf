"""Main CLI application module."""

import typer

from .dev_commands import init_database, start_server
from .sum_commands import sum_to_n

app = typer.Typer(
    help="📚 Bookshelf CLI - Book Management API tooling",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="serve")(start_server)
app.command(name="init-db")(init_database)
app.command(name="sum-to-n")(sum_to_n)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
