"""Rendering of domain failures for the spendwise CLI."""

import logging

import click

from spendwise.domain.errors import DependencyUnavailableError, DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print ``Error: <message>`` on stderr and exit with status 1.

    Ledger failures carry a hint about where the database is configured.
    """
    logger.debug("%s failed", ctx.command_path, exc_info=error)
    message = str(error)
    if isinstance(error, DependencyUnavailableError):
        message = f"{message} (check --db-path or SPENDWISE_DB_PATH)"
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)
