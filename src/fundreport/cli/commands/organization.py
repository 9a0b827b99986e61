"""Political organization commands."""

import click

from fundreport.cli.error_handling import handle_domain_error


@click.group("org")
def organization_group():
    """Manage political organizations."""
    pass


@organization_group.command("create")
@click.argument("name", metavar="ORGANIZATION_NAME")
@click.pass_context
def create_organization(ctx, name: str):
    """Register a political organization.

    Examples:
        fundreport org create "○○後援会"
    """
    db = ctx.obj["db"]
    try:
        organization_id = db.create_organization(name)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created organization '{name}' (ID: {organization_id})")


@organization_group.command("list")
@click.pass_context
def list_organizations(ctx):
    """List all political organizations."""
    db = ctx.obj["db"]
    organizations = db.list_organizations()
    if not organizations:
        click.echo("No organizations found.")
        return

    click.echo("\nOrganizations:")
    click.echo("-" * 60)
    for organization_id, name in organizations:
        click.echo(f"ID: {organization_id:3d} | {name}")


def register_commands(cli):
    """Register organization commands with main CLI."""
    cli.add_command(organization_group)
