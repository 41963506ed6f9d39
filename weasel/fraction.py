from __future__ import annotations

from decimal import Decimal
import numbers
from typing import Any

from pydantic_core import core_schema

from weasel.exceptions import FractionParseError, FractionRangeError

__all__ = ["Fraction"]


class Fraction:
    """A probability in decimal format (e.g. 0.7 is 70%), bounded to [0.0, 1.0].

    Instances are immutable. Use ``Fraction(value)`` for checked construction,
    ``Fraction.parse(text)`` for user input and ``Fraction.unchecked(value)``
    only for literals known to be valid.
    """

    __slots__ = ("_value",)

    def __init__(self, value: float):
        if isinstance(value, bool) or not isinstance(
            value, (numbers.Real, Decimal)
        ):
            raise FractionParseError(value)
        try:
            value = float(value)
        except (OverflowError, ValueError):
            # ints too large for a float, signaling NaN decimals
            raise FractionRangeError(value) from None
        # NaN fails both comparisons and is rejected here too.
        if not 0.0 <= value <= 1.0:
            raise FractionRangeError(value)
        object.__setattr__(self, "_value", value)

    @classmethod
    def unchecked(cls, value: float) -> Fraction:
        """Build a Fraction without checking boundaries."""
        fraction = cls.__new__(cls)
        object.__setattr__(fraction, "_value", float(value))
        return fraction

    @classmethod
    def parse(cls, text: str) -> Fraction:
        """Parse *text* as a real number and validate its range.

        Surrounding whitespace and digit-group underscores are not accepted.
        """
        text = str(text)
        if text != text.strip() or "_" in text:
            raise FractionParseError(text)
        try:
            value = float(text)
        except ValueError:
            raise FractionParseError(text) from None
        return cls(value)

    @property
    def value(self) -> float:
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Fraction):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        text = repr(self._value)
        return text[:-2] if text.endswith(".0") else text

    def __repr__(self) -> str:
        return f"Fraction({self._value!r})"

    # ----------------------- pydantic integration -----------------------

    @classmethod
    def _coerce(cls, value: Any) -> Fraction:
        if isinstance(value, Fraction):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda fraction: fraction.value
            ),
        )
