from __future__ import annotations

import logging

from cashbox import (
    FIFTY_PIASTERS,
    FIVE_DINARS,
    FIVE_PIASTERS,
    ONE_DINAR,
    ONE_PIASTER,
    TEN_DINARS,
    TEN_PIASTERS,
    InsufficientChangeError,
    MoneyAmount,
)
from cashbox.utils.report.breakdown_report import BreakdownReport


logger = logging.getLogger(__name__)


def pay_out(cash_box: MoneyAmount, change: MoneyAmount) -> MoneyAmount:
    """Pay $change out of $cash_box, keeping the cash box unchanged when change cannot be made."""
    try:
        cash_box = cash_box - change
    except InsufficientChangeError as e:
        logger.warning(f"Cannot pay out {change}: {e}")
        return cash_box

    logger.info(f"Paid out {change}, {cash_box} left")
    return cash_box


def main() -> None:
    # Fill the cash box
    cash_box = MoneyAmount.sum(
        FIVE_DINARS,
        ONE_DINAR * 8,
        FIFTY_PIASTERS * 2,
        TEN_PIASTERS * 5,
        FIVE_PIASTERS * 4,
        ONE_PIASTER * 10,
    )
    BreakdownReport(cash_box, logger).print_report()

    # No 10-dinar note is held, so it is paid with 5 + 5 x 1
    cash_box = pay_out(cash_box, TEN_DINARS)
    # 0.76 comes from the coins
    cash_box = pay_out(cash_box, FIFTY_PIASTERS + TEN_PIASTERS * 2 + FIVE_PIASTERS + ONE_PIASTER)
    # Far more than what is left
    cash_box = pay_out(cash_box, TEN_DINARS * 3)

    BreakdownReport(cash_box, logger).print_report()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    main()
