"""Main CLI entry point."""

import logging

import click
from spendwise.database.factories import create_sqlite_database
from spendwise.notifications.factories import create_notifier

# Import and register all commands at module level
from spendwise.cli.commands import (
    user,
    add,
    transaction,
    budget,
    dashboard,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SPENDWISE_DB_PATH environment variable)",
    envvar="SPENDWISE_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="SPENDWISE_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Spendwise - Personal budget tracking.

    Record income and expenses, set a monthly budget and see how your
    spending compares to it over time.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["notifier"] = create_notifier()
        ctx.call_on_close(db.disconnect)


# Register all commands
user.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
budget.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
