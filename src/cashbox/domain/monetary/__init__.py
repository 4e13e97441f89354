"""Monetary domain package.

This package contains the `MoneyAmount` value type, which holds an amount as a breakdown of
banknote/coin denominations, the predefined denominations and the errors raised when change
cannot be made.
"""
