"""Tests for codex symbol definitions."""

import pytest

from wsprcodex.core.constants import POWER_LEVELS_DBM
from wsprcodex.core.errors import SymbolMismatchError
from wsprcodex.core.symbols import (
    BINARY,
    BYTE,
    CALL_ANY,
    CALL_LETTER,
    CALL_LETTER_NUMBER,
    CALL_LETTER_SPACE,
    CALL_NUMBER,
    GRID_LETTER,
    GRID_NUMBER,
    POWER,
    TRINARY,
    Required,
)


class TestRadix:
    """Test symbol cardinalities."""

    @pytest.mark.parametrize(
        "symbol,radix",
        [
            (BINARY, 2),
            (TRINARY, 3),
            (BYTE, 256),
            (CALL_LETTER, 26),
            (CALL_NUMBER, 10),
            (CALL_LETTER_NUMBER, 36),
            (CALL_LETTER_SPACE, 27),
            (CALL_ANY, 37),
            (GRID_LETTER, 18),
            (GRID_NUMBER, 10),
            (POWER, 19),
            (Required(b"Q"), 1),
        ],
    )
    def test_radix(self, symbol, radix):
        """Each symbol reports its alphabet size."""
        assert symbol.radix == radix

    def test_only_required_is_literal(self):
        """Only radix-1 symbols are literals."""
        assert Required(b"Q").is_literal
        assert not BINARY.is_literal
        assert not POWER.is_literal


class TestAlphabetSymbol:
    """Test single-character alphabet symbols."""

    def test_call_letter_number_order(self):
        """Letters come before digits."""
        assert CALL_LETTER_NUMBER.encode(0) == b"A"
        assert CALL_LETTER_NUMBER.encode(25) == b"Z"
        assert CALL_LETTER_NUMBER.encode(26) == b"0"
        assert CALL_LETTER_NUMBER.encode(35) == b"9"

    def test_decode_inverse_of_encode(self):
        """Every digit decodes back to itself."""
        for symbol in (CALL_ANY, GRID_LETTER, GRID_NUMBER, CALL_LETTER_SPACE):
            for digit in range(symbol.radix):
                assert symbol.decode(symbol.encode(digit)) == digit

    def test_grid_letter_range(self):
        """Grid letters stop at R."""
        assert GRID_LETTER.encode(17) == b"R"
        with pytest.raises(SymbolMismatchError):
            GRID_LETTER.decode(b"S")

    def test_space_only_where_allowed(self):
        """Space is legal for CallLetterSpace but not CallLetterNumber."""
        assert CALL_LETTER_SPACE.decode(b" ") == 26
        with pytest.raises(SymbolMismatchError):
            CALL_LETTER_NUMBER.decode(b" ")

    def test_digit_out_of_range(self):
        """Encoding a digit outside the alphabet raises."""
        with pytest.raises(SymbolMismatchError, match="digit must be 0-9"):
            GRID_NUMBER.encode(10)
        with pytest.raises(SymbolMismatchError):
            GRID_NUMBER.encode(-1)

    def test_multi_character_representation(self):
        """Representations must be exactly one character."""
        with pytest.raises(SymbolMismatchError):
            CALL_LETTER.decode(b"AB")
        with pytest.raises(SymbolMismatchError):
            CALL_LETTER.decode(b"")

    def test_lowercase_rejected(self):
        """Alphabets are upper case only."""
        with pytest.raises(SymbolMismatchError):
            CALL_LETTER.decode(b"a")

    def test_accepts(self):
        """accepts() checks a single character."""
        assert CALL_NUMBER.accepts("7")
        assert not CALL_NUMBER.accepts("A")
        assert not CALL_NUMBER.accepts("77")


class TestByteSymbol:
    """Test raw octet symbol."""

    def test_round_trip(self):
        """All 256 values round trip."""
        for digit in range(256):
            assert BYTE.decode(BYTE.encode(digit)) == digit

    def test_encode_is_raw_byte(self):
        """Representation is the byte itself."""
        assert BYTE.encode(0x54) == b"T"

    def test_wrong_length(self):
        """Only single bytes decode."""
        with pytest.raises(SymbolMismatchError):
            BYTE.decode(b"\x00\x01")


class TestPowerSymbol:
    """Test WSPR power level symbol."""

    def test_table(self):
        """Digits map to the 19 legal dBm levels in order."""
        encoded = [POWER.encode(i) for i in range(19)]
        assert encoded == [str(p).encode() for p in POWER_LEVELS_DBM]

    def test_decode(self):
        """Decimal text decodes to the table index."""
        assert POWER.decode(b"0") == 0
        assert POWER.decode(b"23") == 7
        assert POWER.decode(b"60") == 18

    @pytest.mark.parametrize("bad", [b"5", b"61", b"07", b"-3", b"", b"abc"])
    def test_decode_invalid(self, bad):
        """Non-table or non-canonical values are rejected."""
        with pytest.raises(SymbolMismatchError):
            POWER.decode(bad)


class TestRequired:
    """Test literal marker symbol."""

    def test_encode_ignores_digit(self):
        """Encoding always yields the fixed value."""
        required = Required(b"Q")
        assert required.encode(0) == b"Q"
        assert required.encode(5) == b"Q"

    def test_decode_match(self):
        """Matching value decodes to 0."""
        assert Required(b"Q").decode(b"Q") == 0

    def test_decode_mismatch(self):
        """Any other value raises."""
        with pytest.raises(SymbolMismatchError, match="Required"):
            Required(b"Q").decode(b"R")

    def test_str(self):
        """String form names the literal."""
        assert str(Required(b"Q")) == "Required(b'Q')"
