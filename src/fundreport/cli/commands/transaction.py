"""Ledger transaction commands."""

import asyncio
import time

import click

from fundreport.cli.error_handling import handle_domain_error
from fundreport.domain.entities import SectionKind
from fundreport.domain.errors import DomainError
from fundreport.domain.grant_expenditure import GrantExpenditureFlagService
from fundreport.domain.transaction_utils import validate_grant_expenditure_flag_update
from fundreport.utils.amount_parser import parse_amount
from fundreport.utils.date_parser import parse_date


@click.group("transaction")
def transaction_group():
    """Manage ledger transactions."""
    pass


@transaction_group.command("add")
@click.argument("organization_id", type=int)
@click.option(
    "--date",
    required=True,
    help="Transaction date (YYYY-MM-DD, era notation like 'R6/1/15', or 'today')",
)
@click.option("--amount", required=True, help="Amount in yen (e.g., 150000 or '¥150,000')")
@click.option(
    "--category",
    required=True,
    type=click.Choice([kind.value for kind in SectionKind]),
    help="Report category the transaction is reported under",
)
@click.option("--no", "transaction_no", help="Ledger row number (auto-generated if not provided)")
@click.option("--friendly-category", help="Category label shown in the report")
@click.option("--label", help="Transaction label")
@click.option("--description", help="Transaction description")
@click.option("--memo", help="Memo, reported in the remarks column")
@click.option("--counterpart", "counterpart_name", help="Counterpart (donor, payee or lender) name")
@click.option("--address", "counterpart_address", help="Counterpart address")
@click.option("--occupation", "counterpart_occupation", help="Donor occupation")
@click.option(
    "--grant-expenditure",
    is_flag=True,
    help="Mark an expense as paid from party grants (交付金)",
)
@click.pass_context
def add_transaction(
    ctx,
    organization_id: int,
    date: str,
    amount: str,
    category: str,
    transaction_no: str | None,
    grant_expenditure: bool,
    **details,
):
    """Add a ledger transaction.

    The income or expense side is derived from the category.

    Examples:
        fundreport transaction add 1 --date 2024-04-01 --amount 150000 --category individual-donations --counterpart "山田太郎"
        fundreport transaction add 1 --date R6/5/10 --amount 60000 --category office-expenses --grant-expenditure
    """
    db = ctx.obj["db"]
    kind = SectionKind(category)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if grant_expenditure:
        validation = validate_grant_expenditure_flag_update(kind.transaction_type)
        if not validation.is_valid:
            click.echo(f"Error: {validation.error_message}", err=True)
            ctx.exit(1)

    if transaction_no is None:
        transaction_no = f"manual_{organization_id}_{int(time.time() * 1000000)}"

    try:
        transaction_id = db.create_transaction(
            organization_id=organization_id,
            transaction_no=transaction_no,
            transaction_date=txn_date,
            transaction_type=kind.transaction_type,
            category_key=kind.value,
            amount=txn_amount,
            is_grant_expenditure=grant_expenditure,
            **details,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: ¥{txn_amount:,.0f}")
    click.echo(f"  Category: {kind.value} ({kind.transaction_type.value})")
    if grant_expenditure:
        click.echo("  Grant expenditure: yes")


@transaction_group.command("grant-flag")
@click.argument("transaction_id")
@click.option("--unset", is_flag=True, help="Clear the flag instead of setting it")
@click.pass_context
def grant_flag(ctx, transaction_id: str, unset: bool):
    """Set or clear the grant expenditure flag on an expense.

    Examples:
        fundreport transaction grant-flag 12
        fundreport transaction grant-flag 12 --unset
    """
    db = ctx.obj["db"]
    service = GrantExpenditureFlagService(db)
    try:
        asyncio.run(service.update_flag(transaction_id, not unset))
    except DomainError as e:
        handle_domain_error(ctx, e)

    state = "cleared" if unset else "set"
    click.echo(f"Grant expenditure flag {state} on transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group)
