"""Report export command."""

import asyncio
import logging
from pathlib import Path

import click

from fundreport.cli.error_handling import handle_domain_error
from fundreport.domain.errors import DomainError
from fundreport.domain.report import ReportAssembler, ReportExportService
from fundreport.utils.encoding import encode_shift_jis

logger = logging.getLogger(__name__)


@click.command("export")
@click.argument("organization_id")
@click.argument("year", type=int)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Output file (defaults to report_<ORG>_<YEAR>.xml in the current directory)",
)
@click.pass_context
def export_report(ctx, organization_id: str, year: int, output: str | None):
    """Export the income and expenditure report as Shift_JIS XML.

    Examples:
        fundreport export 1 2024
        fundreport export 1 2024 --output houkoku.xml
    """
    db = ctx.obj["db"]
    service = ReportExportService(ReportAssembler(db, db))
    try:
        result = asyncio.run(service.export_report(organization_id, year))
    except DomainError as e:
        handle_domain_error(ctx, e)

    output_path = Path(output) if output else Path(result.filename)
    data = encode_shift_jis(result.xml)
    output_path.write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), output_path)

    click.echo(f"Exported report for organization {organization_id}, year {year}")
    click.echo(f"  Output: {output_path}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_report)
