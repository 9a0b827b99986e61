"""CLI error handling helpers."""

import logging

import click

from fundreport.domain.errors import DomainError, ValidationError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, ValidationError) and error.field is not None:
        logger.debug("Validation failed on %s=%r", error.field, error.value)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
