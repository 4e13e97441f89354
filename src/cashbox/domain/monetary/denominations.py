from cashbox.domain.monetary.money_amount import MoneyAmount


# Zero value (one banknote of value 0.00, the identity of `MoneyAmount.sum`)
ZERO = MoneyAmount("0.00", 1)

# Coins
ONE_PIASTER = MoneyAmount("0.01", 1)
FIVE_PIASTERS = MoneyAmount("0.05", 1)
TEN_PIASTERS = MoneyAmount("0.10", 1)
TWENTY_FIVE_PIASTERS = MoneyAmount("0.25", 1)
FIFTY_PIASTERS = MoneyAmount("0.50", 1)

# Banknotes
ONE_DINAR = MoneyAmount("1.00", 1)
FIVE_DINARS = MoneyAmount("5.00", 1)
TEN_DINARS = MoneyAmount("10.00", 1)
TWENTY_DINARS = MoneyAmount("20.00", 1)
FIFTY_DINARS = MoneyAmount("50.00", 1)

# All non-zero denominations, smallest first
STANDARD_DENOMINATIONS = (
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
)
