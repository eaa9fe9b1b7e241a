"""
Mixed-Radix Codec

Treats an ordered symbol list as a positional number system whose digit
positions each have their own base. The :class:`Encoder` turns a
non-negative integer into one representation per symbol; the
:class:`Decoder` turns such a sequence back into the integer.

Symbols are listed most significant first. Literal (radix-1) symbols are
emitted and checked but carry no value, so they do not count towards the
capacity or the positional weights.

Examples:
    >>> from wsprcodex.core.symbols import BYTE
    >>> encoder = Encoder([BYTE] * 4)
    >>> encoder.encode(1415934836)
    (b'T', b'e', b's', b't')
    >>> encoder.decoder().decode([b"T", b"e", b"s", b"t"])
    1415934836
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from wsprcodex.core.errors import EncodingOverflowError, SizeMismatchError
from wsprcodex.core.symbols import Symbol

__all__ = ["Encoder", "Decoder", "capacity", "place_values"]

logger = logging.getLogger(__name__)


def capacity(symbols: Iterable[Symbol]) -> int:
    """
    Number of distinct integers a symbol list can represent.

    Args:
        symbols: Symbol list, most significant first.

    Returns:
        Product of the radices of all non-literal symbols.
    """
    return math.prod(s.radix for s in symbols if not s.is_literal)


def place_values(symbols: Sequence[Symbol]) -> tuple[int, ...]:
    """
    Positional weight of each symbol.

    The weight at index ``i`` is the capacity of everything after ``i``,
    so the last position always has weight 1.
    """
    weights = []
    weight = 1
    for symbol in reversed(symbols):
        weights.append(weight)
        if not symbol.is_literal:
            weight *= symbol.radix
    return tuple(reversed(weights))


class _MixedRadix:
    """State shared by the encoder and decoder."""

    def __init__(self, symbols: Iterable[Symbol]) -> None:
        self.symbols: tuple[Symbol, ...] = tuple(symbols)
        if not self.symbols:
            raise ValueError("Symbol list must not be empty")
        self.weights: tuple[int, ...] = place_values(self.symbols)
        self.capacity: int = capacity(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __repr__(self) -> str:
        names = ", ".join(str(s) for s in self.symbols)
        return f"{type(self).__name__}([{names}])"


class Encoder(_MixedRadix):
    """Integer to symbol sequence."""

    def decoder(self) -> Decoder:
        """Create a Decoder over the same symbol list."""
        return Decoder(self.symbols)

    def encode(self, value: int) -> tuple[bytes, ...]:
        """
        Encode an integer as one representation per symbol.

        Args:
            value: Integer in ``[0, capacity)``.

        Returns:
            Tuple of representations, aligned with the symbol list.

        Raises:
            ValueError: If value is negative.
            EncodingOverflowError: If value is not below the capacity.
        """
        if value < 0:
            raise ValueError(f"Cannot encode negative value {value}")

        results: list[bytes] = []
        remainder = value
        for index, (symbol, weight) in enumerate(zip(self.symbols, self.weights)):
            if symbol.is_literal:
                results.append(symbol.encode(0))
                continue

            quotient = remainder // weight
            digit = min(quotient, symbol.radix - 1)
            if digit != quotient:
                # Only reachable when value >= capacity; the leftover
                # below turns it into an overflow.
                logger.warning(
                    f"Digit clamped at position {index} ({symbol}): "
                    f"{quotient} -> {digit}"
                )
            logger.debug(f"encode_step({remainder}, {symbol}, {index}) -> {digit}")
            results.append(symbol.encode(digit))
            remainder -= digit * weight

        if remainder != 0:
            raise EncodingOverflowError(
                f"Value {value} exceeds capacity {self.capacity}, leftover: {remainder}"
            )

        return tuple(results)


class Decoder(_MixedRadix):
    """Symbol sequence to integer."""

    def encoder(self) -> Encoder:
        """Create an Encoder over the same symbol list."""
        return Encoder(self.symbols)

    def decode(self, encoded: Sequence[bytes]) -> int:
        """
        Decode one representation per symbol back into an integer.

        Args:
            encoded: Representations aligned with the symbol list.

        Returns:
            The decoded integer.

        Raises:
            SizeMismatchError: If the sequence length differs from the list.
            SymbolMismatchError: If a representation is not legal for its symbol.
        """
        if len(encoded) != len(self.symbols):
            raise SizeMismatchError(
                f"Expected {len(self.symbols)} encoded values, got {len(encoded)}"
            )

        value = 0
        for index, (symbol, weight, representation) in enumerate(
            zip(self.symbols, self.weights, encoded)
        ):
            digit = symbol.decode(representation)
            logger.debug(f"decode_step({representation!r}, {symbol}, {index}) -> {digit}")
            if not symbol.is_literal:
                value += digit * weight

        return value
