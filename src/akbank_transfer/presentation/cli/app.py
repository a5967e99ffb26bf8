"""akbank-transfer CLI application using Typer.

Thin front end over AkbankTransferService. Credentials and sender identity
come from ``AKBANK_*`` environment variables (see AkbankSettings).
"""

from __future__ import annotations

import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from akbank_transfer.application.transfer_service import AkbankTransferService
from akbank_transfer.config.settings import AkbankSettings, get_settings
from akbank_transfer.domain.shared.exceptions import DomainException
from akbank_transfer.domain.transfer.constants import ReasonCode
from akbank_transfer.domain.transfer.iban import (
    is_own_bank_iban,
    is_valid_iban,
    normalize_iban,
)
from akbank_transfer.domain.transfer.results import is_success

app = typer.Typer(
    name="akbank-transfer",
    help="Akbank money-order (EFT / havale) client",
    no_args_is_help=True,
)
console = Console()


def configure_logging(settings: AkbankSettings) -> None:
    """Configure logging for the CLI.

    - Console output with timestamps and module names
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("akbank_transfer").setLevel(log_level)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _parse_amount(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as e:
        msg = f"Not a decimal amount: {value}"
        raise typer.BadParameter(msg) from e


def _build_service() -> AkbankTransferService:
    settings = get_settings()
    configure_logging(settings)
    try:
        return AkbankTransferService.from_settings(settings)
    except DomainException as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(code=2) from e


def _run(action) -> None:
    """Run ``action(service)``, print its result and set the exit code."""
    with _build_service() as service:
        try:
            result = action(service)
        except DomainException as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(code=2) from e
    _print_result(result)
    if not is_success(result):
        raise typer.Exit(code=1)


def _print_result(result: dict[str, Any]) -> None:
    ok = is_success(result)
    table = Table(title="Result" if ok else "Failed", title_style="green" if ok else "red")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in result.items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)


@app.command("eft-iban")
def eft_iban(
    txn_id: str = typer.Argument(..., help="Unique transaction id"),
    amount: str = typer.Argument(..., help="Amount in TRY"),
    receiver_iban: str = typer.Argument(..., help="Receiver IBAN"),
    receiver_name: str = typer.Argument(..., help="Receiver name and surname"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    date: Optional[str] = typer.Option(None, "--date", help="DD.MM.YYYY"),
    reason: ReasonCode = typer.Option(ReasonCode.OTHER_PAYMENTS, "--reason"),
) -> None:
    """Send an EFT to an IBAN at another bank."""
    value = _parse_amount(amount)
    _run(
        lambda s: s.eft_to_iban(
            txn_id,
            value,
            normalize_iban(receiver_iban) or receiver_iban,
            receiver_name,
            description,
            date,
            reason_code=reason,
        ),
    )


@app.command("eft-account")
def eft_account(
    txn_id: str = typer.Argument(..., help="Unique transaction id"),
    amount: str = typer.Argument(..., help="Amount in TRY"),
    bank_code: str = typer.Argument(..., help="Receiver bank code"),
    branch_code: str = typer.Argument(..., help="Receiver branch code"),
    account: str = typer.Argument(..., help="Receiver account number"),
    receiver_name: str = typer.Argument(..., help="Receiver name and surname"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    date: Optional[str] = typer.Option(None, "--date", help="DD.MM.YYYY"),
    reason: ReasonCode = typer.Option(ReasonCode.OTHER_PAYMENTS, "--reason"),
) -> None:
    """Send an EFT to an account at another bank."""
    value = _parse_amount(amount)
    _run(
        lambda s: s.eft_to_account(
            txn_id,
            value,
            bank_code,
            branch_code,
            account,
            receiver_name,
            description,
            date,
            reason_code=reason,
        ),
    )


@app.command("transfer-iban")
def transfer_iban(
    txn_id: str = typer.Argument(..., help="Unique transaction id"),
    amount: str = typer.Argument(..., help="Amount in TRY"),
    receiver_iban: str = typer.Argument(..., help="Receiver Akbank IBAN"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    date: Optional[str] = typer.Option(None, "--date", help="DD.MM.YYYY"),
    identity_no: Optional[str] = typer.Option(None, "--identity-no"),
) -> None:
    """Send a havale to an Akbank IBAN."""
    value = _parse_amount(amount)
    _run(
        lambda s: s.transfer_to_iban(
            txn_id,
            value,
            normalize_iban(receiver_iban) or receiver_iban,
            description,
            date,
            identity_no,
        ),
    )


@app.command("transfer-account")
def transfer_account(
    txn_id: str = typer.Argument(..., help="Unique transaction id"),
    amount: str = typer.Argument(..., help="Amount in TRY"),
    branch: str = typer.Argument(..., help="Receiver branch code"),
    account: str = typer.Argument(..., help="Receiver account number"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    date: Optional[str] = typer.Option(None, "--date", help="DD.MM.YYYY"),
    identity_no: Optional[str] = typer.Option(None, "--identity-no"),
) -> None:
    """Send a havale to an Akbank branch + account."""
    value = _parse_amount(amount)
    _run(
        lambda s: s.transfer_to_account(
            txn_id,
            value,
            branch,
            account,
            description,
            date,
            identity_no,
        ),
    )


@app.command("status")
def status(
    txn_id: str = typer.Argument(..., help="Transaction id to look up"),
    date: Optional[str] = typer.Option(None, "--date", help="DD.MM.YYYY"),
) -> None:
    """Show the status of an earlier transaction."""
    _run(lambda s: s.get_transaction_status(txn_id, date))


@app.command("receipt")
def receipt(
    dekont_key: str = typer.Argument(..., help="DekontKey of the transaction"),
    email: str = typer.Argument(..., help="Address to mail the receipt to"),
) -> None:
    """Have the receipt (dekont) of a transaction mailed."""
    _run(lambda s: s.get_receipt(dekont_key, email))


@app.command("token")
def token(txn_id: str = typer.Argument(..., help="Transaction id")) -> None:
    """Fetch an access token."""
    _run(lambda s: s.get_token(txn_id))


@app.command("check-iban")
def check_iban(iban: str = typer.Argument(..., help="IBAN to check")) -> None:
    """Check an IBAN's shape and whether it belongs to Akbank. No network."""
    normalized = normalize_iban(iban) or ""
    valid = is_valid_iban(normalized)
    console.print(f"IBAN:   {normalized}")
    console.print(f"Valid:  {'[green]yes[/green]' if valid else '[red]no[/red]'}")
    if valid:
        own = is_own_bank_iban(normalized)
        console.print(f"Akbank: {'yes' if own else 'no'}")
    if not valid:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
