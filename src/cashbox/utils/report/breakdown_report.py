import logging
from typing import List

from cashbox.domain.monetary.money_amount import MoneyAmount

logger = logging.getLogger(__name__)


class BreakdownReport:
    """
    Usage:
        BreakdownReport(amount).print_report()

        or

        report = BreakdownReport(amount).create_report()
        # do what you need with the string lines

    Parameters:
        amount: MoneyAmount
            the amount whose denominations are listed
        custom_logger: logging.Logger
            custom logger for printing the report
        include_empty: bool
            also list denominations held with count 0
    """
    def __init__(self, amount: MoneyAmount, custom_logger: logging.Logger = None, include_empty: bool = False):
        if not isinstance(amount, MoneyAmount):
            raise ValueError(f"amount must be a MoneyAmount, but is {type(amount)}")
        self.amount = amount
        self.custom_logger = custom_logger
        self.include_empty = include_empty

    def create_report(self) -> List[str]:
        self.log().debug("start calculating report")
        rows = [(value, count) for value, count in self.amount.iter_descending() if count > 0 or self.include_empty]
        report = [f"Total   : {self.amount}     Banknotes : {sum(count for _, count in rows)}"]
        for value, count in rows:
            report.append(f"{value:>8.2f} x {count:<6} = {value * count:>10.2f}")

        self.log().debug("end calculating report")
        return report

    def print_report(self):
        r = self.create_report()
        self.log().debug("+-------------- Report start ---------------")
        for l in r:
            self.log().debug(f"| {l}")
        self.log().debug("+-------------- Report end -----------------")

    def log(self) -> logging.Logger:
        if self.custom_logger is not None:
            return self.custom_logger
        else:
            return logger
