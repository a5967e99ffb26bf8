"""Fixed values of the Akbank money-order service."""

from enum import Enum

BANK_CODE = "00046"
BANK_ID = "akbank"
BANK_NAME = "Akbank"

# Digits at IBAN offset 7-8 identifying an Akbank account
OWN_BANK_IBAN_CODE = "46"

CURRENCY_CODE_TRY = "888"

# "H" (hayir) = no
NOT_CREDIT_CARD = "H"
NO_IDENTITY_CHECK = "H"

PROCESS_TYPE_HAVALE = "H"

DEFAULT_ENDPOINT_URL = "https://apigateuat.akbank.com/api/MoneyOrderService"


class ReasonCode(str, Enum):
    """Payment reason codes accepted by the remote service."""

    RESIDENTIAL_RENT = "01"
    WORKPLACE_RENT = "02"
    OTHER_RENT = "03"
    PERSONNEL_PAYMENTS = "04"
    DUES = "05"
    EDUCATION = "06"
    GARNISHMENT_PAYMENT = "08"
    OTHER_PAYMENTS = "99"
