"""Date helpers for the money-order wire format."""

from __future__ import annotations

from datetime import date

TRANSACTION_DATE_FORMAT = "%d.%m.%Y"


def today_local() -> date:
    """Return the current date in the local timezone."""
    return date.today()


def format_transaction_date(value: date | str | None = None) -> str:
    """Render a transaction date as ``DD.MM.YYYY``.

    ``None`` means today. ``date`` and ``datetime`` values are formatted;
    strings are assumed to be in wire format already and pass through.
    """
    if value is None:
        value = today_local()
    if isinstance(value, date):
        return value.strftime(TRANSACTION_DATE_FORMAT)
    return value
