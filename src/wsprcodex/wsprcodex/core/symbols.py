"""
Codex Symbols

A symbol is one position of a mixed-radix number: it has a fixed
cardinality (its radix) and converts between a digit in ``[0, radix)``
and an external representation. Every representation is ``bytes``, so a
symbol list can mix letters, digits, power levels and raw octets without
the codec caring which is which.

Symbols are immutable and meant to be shared; the module-level instances
below are the ones the rest of the package uses.

Examples:
    >>> CALL_LETTER_NUMBER.encode(27)
    b'1'
    >>> CALL_LETTER_NUMBER.decode(b"1")
    27
    >>> POWER.encode(7)
    b'23'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from wsprcodex.core.constants import DIGITS, GRID_LETTERS, LETTERS, POWER_LEVELS_DBM
from wsprcodex.core.errors import SymbolMismatchError

__all__ = [
    "Symbol",
    "Required",
    "AlphabetSymbol",
    "ByteSymbol",
    "PowerSymbol",
    "BINARY",
    "TRINARY",
    "BYTE",
    "NUMBER",
    "CALL_LETTER",
    "CALL_NUMBER",
    "CALL_LETTER_NUMBER",
    "CALL_LETTER_SPACE",
    "CALL_ANY",
    "GRID_LETTER",
    "GRID_NUMBER",
    "POWER",
]


class Symbol(ABC):
    """Base class for one finite-alphabet position."""

    @property
    @abstractmethod
    def radix(self) -> int:
        """Number of distinct values this symbol can carry."""

    @property
    def is_literal(self) -> bool:
        """True for radix-1 markers that carry no information."""
        return self.radix == 1

    @abstractmethod
    def encode(self, digit: int) -> bytes:
        """Convert a digit in ``[0, radix)`` to its representation."""

    @abstractmethod
    def decode(self, representation: bytes) -> int:
        """Convert a representation back to its digit."""

    def _check_digit(self, digit: int) -> None:
        if not 0 <= digit < self.radix:
            raise SymbolMismatchError(
                f"{self} digit must be 0-{self.radix - 1}, got {digit}"
            )


@dataclass(frozen=True)
class Required(Symbol):
    """
    Literal marker that must appear verbatim at its position.

    Encoding always yields ``value``; decoding anything else fails.
    """

    value: bytes

    @property
    def radix(self) -> int:
        return 1

    def encode(self, digit: int = 0) -> bytes:
        return self.value

    def decode(self, representation: bytes) -> int:
        if bytes(representation) != self.value:
            raise SymbolMismatchError(
                f"{self} != {bytes(representation)!r}"
            )
        return 0

    def __str__(self) -> str:
        return f"Required({self.value!r})"


@dataclass(frozen=True)
class AlphabetSymbol(Symbol):
    """
    Single-character symbol over an ordered alphabet.

    The digit is the character's index in ``alphabet``; the representation
    is that character as one ASCII byte.

    Attributes:
        name: Display name used in error messages.
        alphabet: Legal characters, in digit order.
    """

    name: str
    alphabet: str

    @property
    def radix(self) -> int:
        return len(self.alphabet)

    def encode(self, digit: int) -> bytes:
        self._check_digit(digit)
        return self.alphabet[digit].encode("ascii")

    def decode(self, representation: bytes) -> int:
        if len(representation) == 1:
            digit = self.alphabet.find(chr(representation[0]))
            if digit >= 0:
                return digit
        raise SymbolMismatchError(f"{self}, bad value: {bytes(representation)!r}")

    def accepts(self, char: str) -> bool:
        """Check whether ``char`` is a legal character at this position."""
        return len(char) == 1 and char in self.alphabet

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ByteSymbol(Symbol):
    """Raw octet, represented as a single byte."""

    @property
    def radix(self) -> int:
        return 256

    def encode(self, digit: int) -> bytes:
        self._check_digit(digit)
        return bytes([digit])

    def decode(self, representation: bytes) -> int:
        if len(representation) != 1:
            raise SymbolMismatchError(
                f"Byte representation must be 1 byte, got {len(representation)}"
            )
        return representation[0]

    def __str__(self) -> str:
        return "Byte"


@dataclass(frozen=True)
class PowerSymbol(Symbol):
    """WSPR power level, represented as its decimal dBm value."""

    @property
    def radix(self) -> int:
        return len(POWER_LEVELS_DBM)

    def encode(self, digit: int) -> bytes:
        self._check_digit(digit)
        return str(POWER_LEVELS_DBM[digit]).encode("ascii")

    def decode(self, representation: bytes) -> int:
        text = bytes(representation).decode("ascii", errors="replace")
        # Only the canonical spelling is accepted, so b"07" is not 7 dBm
        if text.isdigit() and str(int(text)) == text and int(text) in POWER_LEVELS_DBM:
            return POWER_LEVELS_DBM.index(int(text))
        raise SymbolMismatchError(f"Power, bad value {bytes(representation)!r}")

    def __str__(self) -> str:
        return "Power"


BINARY = AlphabetSymbol("Binary", "01")
TRINARY = AlphabetSymbol("Trinary", "012")
BYTE = ByteSymbol()
NUMBER = AlphabetSymbol("Number", DIGITS)

# Callsign position alphabets
CALL_LETTER = AlphabetSymbol("CallLetter", LETTERS)
CALL_NUMBER = AlphabetSymbol("CallNumber", DIGITS)
CALL_LETTER_NUMBER = AlphabetSymbol("CallLetterNumber", LETTERS + DIGITS)
CALL_LETTER_SPACE = AlphabetSymbol("CallLetterSpace", LETTERS + " ")
CALL_ANY = AlphabetSymbol("CallAny", LETTERS + DIGITS + " ")

# Maidenhead locator alphabets
GRID_LETTER = AlphabetSymbol("GridLetter", GRID_LETTERS)
GRID_NUMBER = AlphabetSymbol("GridNumber", DIGITS)

POWER = PowerSymbol()
