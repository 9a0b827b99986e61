"""Main CLI entry point."""

import logging

import click
from fundreport.database.factories import create_sqlite_database

# Import and register all commands at module level
from fundreport.cli.commands import (
    export,
    organization,
    profile,
    transaction,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FUNDREPORT_DB_PATH environment variable)",
    envvar="FUNDREPORT_DB_PATH",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Fundreport - Political fund report export.

    Keep a political organization's ledger and export its annual income
    and expenditure report in the SYUUSHI07 XML format.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
organization.register_commands(cli)
profile.register_commands(cli)
transaction.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
