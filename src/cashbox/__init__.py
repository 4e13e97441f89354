__version__ = "0.0.1"

from cashbox.domain.monetary.errors import InsufficientChangeError
from cashbox.domain.monetary.money_amount import MoneyAmount
from cashbox.domain.monetary.denominations import (
    ZERO,
    ONE_PIASTER,
    FIVE_PIASTERS,
    TEN_PIASTERS,
    TWENTY_FIVE_PIASTERS,
    FIFTY_PIASTERS,
    ONE_DINAR,
    FIVE_DINARS,
    TEN_DINARS,
    TWENTY_DINARS,
    FIFTY_DINARS,
    STANDARD_DENOMINATIONS,
)

__all__ = [
    "InsufficientChangeError",
    "MoneyAmount",
    "ZERO",
    "ONE_PIASTER",
    "FIVE_PIASTERS",
    "TEN_PIASTERS",
    "TWENTY_FIVE_PIASTERS",
    "FIFTY_PIASTERS",
    "ONE_DINAR",
    "FIVE_DINARS",
    "TEN_DINARS",
    "TWENTY_DINARS",
    "FIFTY_DINARS",
    "STANDARD_DENOMINATIONS",
]
