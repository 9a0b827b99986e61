"""Organization report profile commands."""

import asyncio

import click

from fundreport.cli.error_handling import handle_domain_error
from fundreport.domain.entities import ContactPerson, PersonName
from fundreport.domain.transaction_utils import round_yen
from fundreport.utils.amount_parser import parse_amount


def _parse_person_name(ctx, param, value: str | None) -> PersonName | None:
    """Split "LAST FIRST" (ASCII or full-width space) into a PersonName."""
    if value is None:
        return None
    parts = value.split(maxsplit=1)
    if not parts:
        raise click.BadParameter("name must not be empty")
    return PersonName(last_name=parts[0], first_name=parts[1] if len(parts) > 1 else "")


def _parse_contact_persons(ctx, param, values: tuple[str, ...]) -> list[ContactPerson] | None:
    if not values:
        return None
    if len(values) > 3:
        raise click.BadParameter("at most three contact persons can be reported")
    contacts = []
    for value in values:
        parts = value.split(":")
        if len(parts) != 3:
            raise click.BadParameter(f"expected LAST:FIRST:TEL, got '{value}'")
        contacts.append(ContactPerson(last_name=parts[0], first_name=parts[1], tel=parts[2]))
    return contacts


def _parse_carryover(ctx, param, value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return round_yen(parse_amount(value))
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group("profile")
def profile_group():
    """Manage report profiles (団体の基本情報)."""
    pass


@profile_group.command("set")
@click.argument("organization_id", type=int)
@click.argument("year", type=int)
@click.option("--name", "official_name", help="Official organization name (団体名)")
@click.option("--kana", "official_name_kana", help="Organization name in kana")
@click.option("--address", "office_address", help="Main office address")
@click.option("--building", "office_address_building", help="Building / apartment name")
@click.option(
    "--representative", callback=_parse_person_name, help='Representative, "LAST FIRST"'
)
@click.option("--accountant", callback=_parse_person_name, help='Accountant, "LAST FIRST"')
@click.option(
    "--contact",
    "contact_persons",
    multiple=True,
    callback=_parse_contact_persons,
    help="Contact person as LAST:FIRST:TEL (repeat up to three times)",
)
@click.option("--organization-type", help="Organization type code (DANTAI_KBN)")
@click.option(
    "--activity-area",
    type=click.Choice(["1", "2"]),
    help="1: two or more prefectures, 2: one prefecture",
)
@click.option(
    "--carryover",
    "previous_year_carryover",
    callback=_parse_carryover,
    help="Amount carried over from the previous year (yen)",
)
@click.pass_context
def set_profile(ctx, organization_id: int, year: int, **fields):
    """Create or update the report profile for one financial year.

    Options not given keep their stored values.

    Examples:
        fundreport profile set 1 2024 --name "○○後援会" --address "東京都千代田区..."
        fundreport profile set 1 2024 --representative "山田 太郎" --carryover 120000
    """
    db = ctx.obj["db"]
    try:
        profile_id = db.save_profile(organization_id=organization_id, financial_year=year, **fields)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Saved profile {profile_id} for organization {organization_id}, year {year}")


@profile_group.command("show")
@click.argument("organization_id")
@click.argument("year", type=int)
@click.pass_context
def show_profile(ctx, organization_id: str, year: int):
    """Show the report profile for one financial year."""
    db = ctx.obj["db"]
    profile = asyncio.run(db.find_profile(organization_id, year))
    if profile is None:
        click.echo(f"No profile for organization {organization_id}, year {year}.")
        return

    def _name(person: PersonName | None) -> str:
        return f"{person.last_name} {person.first_name}".strip() if person else "-"

    click.echo(f"Organization: {profile.official_name or '-'} ({profile.official_name_kana or '-'})")
    click.echo(f"Address:      {profile.office_address or '-'} {profile.office_address_building or ''}".rstrip())
    click.echo(f"Representative: {_name(profile.representative)}")
    click.echo(f"Accountant:     {_name(profile.accountant)}")
    for index, contact in enumerate(profile.contact_persons, start=1):
        click.echo(f"Contact {index}:      {contact.last_name} {contact.first_name} ({contact.tel})")
    click.echo(f"Carryover:      {profile.previous_year_carryover}")


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group)
