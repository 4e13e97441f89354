from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator, Mapping
from decimal import Context, Decimal, Inexact, InvalidOperation, getcontext
from numbers import Integral
from types import MappingProxyType

from cashbox.domain.monetary.errors import InsufficientChangeError
from cashbox.utils.numeric_tools import DecimalLike, IntLike, as_count, as_decimal

# Set high precision for financial calculations
getcontext().prec = 28

logger = logging.getLogger(__name__)

# All standard denominations are whole multiples of hundredths
DENOMINATION_SCALE = Decimal("0.01")

# Value limits (for a single denomination and for the total of a breakdown)
MAX_VALUE = Decimal("999_999_999_999_999.99")

# Finest supported denomination (18 decimal places)
FINEST_DENOMINATION_SCALE = Decimal("1e-18")

# Amount arithmetic: within MAX_VALUE and FINEST_DENOMINATION_SCALE every total, product and quotient
# fits into 64 digits, so nothing is ever rounded
_EXACT_CONTEXT = Context(prec=64, traps=[Inexact, InvalidOperation])


def _normalize_denomination(value: Decimal) -> Decimal:
    """Quantize $value to `DENOMINATION_SCALE` when that keeps it unchanged, otherwise return it as is."""
    try:
        quantized = value.quantize(DENOMINATION_SCALE)
    except InvalidOperation:
        return value
    return quantized if quantized == value else value


def _total(denominations: Mapping[Decimal, int]) -> Decimal:
    total = Decimal("0.00")
    for value, count in denominations.items():
        total = _EXACT_CONTEXT.add(total, _EXACT_CONTEXT.multiply(value, count))
    return total


def _checked_total(denominations: Mapping[Decimal, int], caller: str) -> Decimal:
    """Return the total of $denominations, raising `ValueError` when it exceeds `MAX_VALUE`."""
    # Raise: the total must be computable exactly
    try:
        total = _total(denominations)
    except (Inexact, InvalidOperation) as e:
        raise ValueError(f"Cannot call `{caller}` because the resulting total exceeds maximum allowed value {MAX_VALUE}") from e

    # Raise: the total must be within allowed range
    if total > MAX_VALUE:
        raise ValueError(f"Cannot call `{caller}` because the resulting total ({total}) exceeds maximum allowed value {MAX_VALUE}")

    return total


class MoneyAmount:
    """Immutable monetary amount held as a breakdown of banknote/coin denominations.

    The breakdown maps each denomination value to the number of banknotes held. Keys are kept in
    ascending order. All arithmetic uses `Decimal`, so no binary floating-point rounding can creep in.

    Two amounts are equal when their total values are equal, regardless of how they are broken down:
    one 5.00 banknote equals five 1.00 banknotes.

    Every operation returns a new instance; an instance is never changed after construction.
    """

    __slots__ = ("_denominations",)

    def __init__(self, value: DecimalLike, count: IntLike = 1):
        """Initialize MoneyAmount holding $count banknotes of one denomination.

        Args:
            value: Denomination value (Decimal-like scalar).
            count: Number of banknotes of that denomination.

        Raises:
            ValueError: If $value cannot be converted to Decimal, $value or $count is negative, $value is finer
                than `FINEST_DENOMINATION_SCALE`, or $value times $count exceeds `MAX_VALUE`.
            TypeError: If $count is not an integer.
        """
        decimal_value, int_count = self._validate_entry(value, count, "MoneyAmount.__init__")
        self._denominations: dict[Decimal, int] = {decimal_value: int_count}

    # region Construction

    @classmethod
    def from_single_denomination(cls, value: DecimalLike, count: IntLike) -> MoneyAmount:
        """Create MoneyAmount holding $count banknotes of denomination $value.

        Raises:
            ValueError: If $value or $count is negative.
        """
        return cls(value, count)

    @classmethod
    def from_mapping(cls, denominations: Mapping[DecimalLike, IntLike]) -> MoneyAmount:
        """Create MoneyAmount from a breakdown given as {denomination value: count}.

        Keys that convert to the same value (e.g. "1" and "1.00") have their counts added.

        Args:
            denominations: Mapping from denomination value to banknote count.

        Returns:
            MoneyAmount: New instance owning a copy of the breakdown.

        Raises:
            ValueError: If any value or count is negative, a value cannot be converted to Decimal, or the
                total exceeds `MAX_VALUE`.
            TypeError: If any count is not an integer.
        """
        merged: dict[Decimal, int] = {}
        for value, count in denominations.items():
            decimal_value, int_count = cls._validate_entry(value, count, "MoneyAmount.from_mapping")
            merged[decimal_value] = merged.get(decimal_value, 0) + int_count
        _checked_total(merged, "MoneyAmount.from_mapping")
        return cls._from_mapping(merged)

    @classmethod
    def _from_mapping(cls, denominations: Mapping[Decimal, int]) -> MoneyAmount:
        # Trusted: keys are normalized Decimals and counts are already validated
        instance = cls.__new__(cls)
        instance._denominations = dict(sorted(denominations.items()))
        return instance

    @staticmethod
    def _validate_entry(value: DecimalLike, count: IntLike, caller: str) -> tuple[Decimal, int]:
        # Raise: $value must be convertible to Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot call `{caller}` because $value ({value!r}) cannot be converted to Decimal") from e

        # Raise: $value must be a finite number (NaN and Infinity are valid Decimals)
        if not decimal_value.is_finite():
            raise ValueError(f"Cannot call `{caller}` because $value ({decimal_value}) is not finite")

        # Raise: $value must be non-negative
        if decimal_value < 0:
            raise ValueError(f"Cannot call `{caller}` because $value ({decimal_value}) < 0")

        # Raise: $value must be within allowed range
        if decimal_value > MAX_VALUE:
            raise ValueError(f"Cannot call `{caller}` because $value ({decimal_value}) exceeds maximum allowed value {MAX_VALUE}")

        # Raise: $value must not be finer than FINEST_DENOMINATION_SCALE
        try:
            decimal_value.quantize(FINEST_DENOMINATION_SCALE, context=_EXACT_CONTEXT)
        except (Inexact, InvalidOperation) as e:
            raise ValueError(f"Cannot call `{caller}` because $value ({decimal_value}) is finer than {FINEST_DENOMINATION_SCALE}") from e

        int_count = as_count(count)

        # Raise: $count must be non-negative
        if int_count < 0:
            raise ValueError(f"Cannot call `{caller}` because $count ({int_count}) < 0")

        normalized_value = _normalize_denomination(decimal_value)
        _checked_total({normalized_value: int_count}, caller)
        return normalized_value, int_count

    # endregion

    # region Queries

    @property
    def denominations(self) -> Mapping[Decimal, int]:
        """Get a read-only view of the breakdown, ordered by denomination value ascending."""
        return MappingProxyType(self._denominations)

    def iter_descending(self) -> Iterator[tuple[Decimal, int]]:
        """Iterate (denomination value, count) pairs from the largest denomination to the smallest."""
        return reversed(self._denominations.items())

    def count_of(self, value: DecimalLike) -> int:
        """Return the number of banknotes held for denomination $value (0 when not held)."""
        # Raise: $value must be convertible to Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot call `count_of` because $value ({value!r}) cannot be converted to Decimal") from e

        return self._denominations.get(decimal_value, 0)

    def amount(self) -> Decimal:
        """Calculate the total value of this breakdown.

        Returns:
            Decimal: Exact sum of denomination value times count.
        """
        return _total(self._denominations)

    def is_zero(self) -> bool:
        return self.amount() == 0

    # endregion

    # region Arithmetic

    def times(self, count: IntLike) -> MoneyAmount:
        """Multiply every banknote count by $count.

        Args:
            count: Non-negative multiplier. 0 keeps all denominations with count 0.

        Returns:
            MoneyAmount: New instance with scaled counts.

        Raises:
            ValueError: If $count is negative, or the resulting total exceeds `MAX_VALUE`.
            TypeError: If $count is not an integer.
        """
        int_count = as_count(count)

        # Raise: $count must be non-negative
        if int_count < 0:
            raise ValueError(f"Cannot call `times` because $count ({int_count}) < 0")

        result = {value: held * int_count for value, held in self._denominations.items()}
        _checked_total(result, "times")
        return MoneyAmount._from_mapping(result)

    def plus(self, other: MoneyAmount) -> MoneyAmount:
        """Add the banknotes of $other to this breakdown, per denomination.

        Raises:
            ValueError: If the resulting total exceeds `MAX_VALUE`.
        """
        self._check_money_amount(other, "plus")

        result = dict(self._denominations)
        for value, count in other._denominations.items():
            result[value] = result.get(value, 0) + count
        _checked_total(result, "plus")
        return MoneyAmount._from_mapping(result)

    @classmethod
    def sum(cls, *items: MoneyAmount) -> MoneyAmount:
        """Add all $items together. Without items, returns the zero amount."""
        result = cls._from_mapping({Decimal("0.00"): 1})
        for item in items:
            result = result.plus(item)
        return result

    def minus(self, other: MoneyAmount) -> MoneyAmount:
        """Pay the value of $other out of this breakdown, largest denomination first.

        Only the total value of $other matters, not its breakdown. For each denomination, from the
        largest down, as many banknotes as fit into the still remaining value are taken (bounded by
        the held count). There is no substitution search, so some deductions that `minus_complex`
        could make fail here.

        Args:
            other: Amount to deduct.

        Returns:
            MoneyAmount: New instance with the same denominations and reduced counts.

        Raises:
            InsufficientChangeError: If the held banknotes cannot cover the value of $other exactly.
        """
        self._check_money_amount(other, "minus")

        remaining = other.amount()
        result = dict(self._denominations)
        for value, count in self.iter_descending():
            if remaining == 0:
                break
            # Zero-valued denomination never covers anything (and cannot be divided by)
            if value == 0:
                continue

            taken = min(int(_EXACT_CONTEXT.divide_int(remaining, value)), count)
            result[value] = count - taken
            remaining = _EXACT_CONTEXT.subtract(remaining, _EXACT_CONTEXT.multiply(value, taken))

        # Raise: the greedy sweep must consume the whole deductible value
        if remaining != 0:
            raise self._insufficient_change(other, "minus", f"{remaining:.2f} left uncovered by the held denominations")

        return MoneyAmount._from_mapping(result)

    def minus_complex(self, other: MoneyAmount) -> MoneyAmount:
        """Deduct the exact banknotes of $other, substituting other denominations where needed.

        Counts of $other are deducted per denomination first. Every denomination that goes negative
        (banknotes still owed) is then replaced by a combination of this breakdown's own denominations
        with exactly the owed value, searched from the largest denomination down.

        Deprecated: slower than `minus`, kept for comparison. Use `minus` instead.

        Args:
            other: Banknotes to deduct.

        Returns:
            MoneyAmount: New instance after deduction.

        Raises:
            InsufficientChangeError: If some owed denomination has no exact substitute, or the
                substitutes would leave a negative count.
        """
        warnings.warn("`MoneyAmount.minus_complex` is deprecated, use `MoneyAmount.minus` instead", DeprecationWarning, stacklevel=2)
        self._check_money_amount(other, "minus_complex")

        result = dict(self._denominations)
        for value, count in other._denominations.items():
            result[value] = result.get(value, 0) - count

        unavailable = [(value, count) for value, count in sorted(result.items()) if count < 0]
        for value, count in unavailable:
            substitute = self._find_substitute(_EXACT_CONTEXT.multiply(value, -count), other)

            result[value] = 0
            for substitute_value, substitute_count in substitute.items():
                result[substitute_value] -= substitute_count

        # Raise: substitutes may take banknotes that the direct deduction already used
        if any(count < 0 for count in result.values()):
            raise self._insufficient_change(other, "minus_complex", "substitutes overlap with denominations already deducted")

        return MoneyAmount._from_mapping(result)

    def _find_substitute(self, unavailable_amount: Decimal, other: MoneyAmount) -> dict[Decimal, int]:
        """Greedily pick own banknotes (up to the held counts) whose total is exactly $unavailable_amount."""
        substitute: dict[Decimal, int] = {}
        for value, count in self.iter_descending():
            if value == 0:
                continue

            missing = _EXACT_CONTEXT.subtract(unavailable_amount, _total(substitute))
            if value <= missing:
                # Raise: $missing must be a whole number of $value at denomination scale
                try:
                    quotient = _EXACT_CONTEXT.divide(missing, value).quantize(DENOMINATION_SCALE, context=_EXACT_CONTEXT)
                except (Inexact, InvalidOperation) as e:
                    raise self._insufficient_change(other, "minus_complex", f"{missing:.2f} is not divisible by denomination {value}") from e

                substitute[value] = min(count, int(quotient))

        # Raise: the candidate must match the owed value exactly
        if _total(substitute) != unavailable_amount:
            raise self._insufficient_change(other, "minus_complex", f"no substitute found for {unavailable_amount:.2f}")

        return substitute

    def _insufficient_change(self, other: MoneyAmount, caller: str, reason: str) -> InsufficientChangeError:
        logger.debug(f"Rejected `{caller}` of {other} from {self}: {reason}")
        return InsufficientChangeError(other.amount(), self.amount(), reason)

    def _check_money_amount(self, other, caller: str) -> None:
        # Raise: arithmetic is defined between MoneyAmount instances only
        if not isinstance(other, MoneyAmount):
            raise TypeError(f"Cannot call `{caller}` because $other is not MoneyAmount (got type '{type(other).__name__}')")

    # endregion

    # region Operators

    def __add__(self, other):
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other):
        """Right addition, so that builtin `sum()` starting from 0 works."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, Integral):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    # Comparison is by total value only
    def __eq__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return False
        return self.amount() == other.amount()

    def __hash__(self) -> int:
        return hash(self.amount())

    def __lt__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.amount() < other.amount()

    def __le__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.amount() <= other.amount()

    def __gt__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.amount() > other.amount()

    def __ge__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.amount() >= other.amount()

    # endregion

    # String representations
    def __str__(self) -> str:
        """Return string like '0.76'."""
        return f"{self.amount():.2f}"

    def __repr__(self) -> str:
        """Return string like 'MoneyAmount(0.76, {0.01: 1, 0.25: 1, 0.50: 1})'."""
        breakdown = ", ".join(f"{value}: {count}" for value, count in self._denominations.items())
        return f"{self.__class__.__name__}({self}, {{{breakdown}}})"
