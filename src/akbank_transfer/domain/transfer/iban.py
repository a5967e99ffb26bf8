"""IBAN shape checks for Turkish accounts."""

from __future__ import annotations

from akbank_transfer.domain.transfer.constants import OWN_BANK_IBAN_CODE

TR_IBAN_LENGTH = 26


def normalize_iban(value: str | None) -> str | None:
    """Normalize an IBAN for stable comparisons.

    - Removes all whitespace
    - Uppercases

    Returns None if value is None or blank.
    """
    if value is None:
        return None
    normalized = "".join(value.split()).upper()
    return normalized or None


def is_valid_iban(iban: str) -> bool:
    """Check the Turkish IBAN shape: 26 characters starting with ``TR``.

    No checksum verification is done.
    """
    return len(iban) == TR_IBAN_LENGTH and iban[:2] == "TR"


def is_own_bank_iban(iban: str) -> bool:
    """Check whether the IBAN belongs to Akbank.

    Turkish IBANs carry the five-digit bank code at offset 4; its last two
    digits sit at offset 7-8.
    """
    return iban[7:9] == OWN_BANK_IBAN_CODE
