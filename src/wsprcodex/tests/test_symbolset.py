"""Tests for the canonical WSPR symbol set."""

import random

import pytest

from wsprcodex.core.errors import (
    EncodingOverflowError,
    FormatInvalidError,
    SizeMismatchError,
    SymbolMismatchError,
)
from wsprcodex.core.symbols import Required
from wsprcodex.wspr.message import WSPRMessage
from wsprcodex.wspr.symbolset import (
    DECODER,
    ENCODER,
    WSPR_SYMBOLS,
    block_to_message,
    capacity,
    from_fields,
    from_message,
    get_max_payload_bytes,
    message_to_block,
    to_fields,
)


class TestSymbolSetLayout:
    """Test the canonical symbol list."""

    def test_length(self):
        """Marker, 6 callsign, 4 grid and 1 power position."""
        assert len(WSPR_SYMBOLS) == 12

    def test_leading_marker(self):
        """Position 0 is the Q literal."""
        assert WSPR_SYMBOLS[0] == Required(b"Q")

    def test_radices(self):
        """Radices follow callsign, grid, power order."""
        assert [s.radix for s in WSPR_SYMBOLS] == [1] + [36] * 6 + [18, 18, 10, 10, 19]

    def test_capacity(self):
        """Capacity is 36^6 * 18^2 * 10^2 * 19."""
        assert capacity() == 36**6 * 18**2 * 10**2 * 19
        assert capacity() == 1_340_027_206_041_600

    def test_max_payload_bytes(self):
        """One message carries six whole bytes."""
        assert get_max_payload_bytes() == 6
        assert capacity() > 2 ** (8 * get_max_payload_bytes())


class TestFieldMapping:
    """Test to_fields / from_fields."""

    def test_zero(self):
        """Zero maps to the first character of every alphabet."""
        assert to_fields(ENCODER.encode(0)) == WSPRMessage("AAAAAA", "AA00", 0)

    def test_one(self):
        """The power level is the least significant position."""
        assert to_fields(ENCODER.encode(1)) == WSPRMessage("AAAAAA", "AA00", 3)

    def test_power_carry(self):
        """19 carries into the last grid digit."""
        assert to_fields(ENCODER.encode(19)) == WSPRMessage("AAAAAA", "AA01", 0)

    def test_largest_value(self):
        """capacity - 1 maps to the last character everywhere."""
        assert to_fields(ENCODER.encode(capacity() - 1)) == WSPRMessage("999999", "RR99", 60)

    def test_capacity_overflows(self):
        """capacity itself does not fit in one message."""
        with pytest.raises(EncodingOverflowError):
            ENCODER.encode(capacity())

    def test_from_fields_inverse(self):
        """from_fields reproduces the encoder output."""
        for _ in range(100):
            value = random.randrange(capacity())
            encoded = ENCODER.encode(value)
            msg = to_fields(encoded)
            assert from_message(msg) == encoded
            assert DECODER.decode(from_fields(msg.callsign, msg.grid_square, msg.power_dbm)) == value

    def test_from_fields_lowercase(self):
        """Field text is upper-cased."""
        assert from_fields("ka1bcd", "fn31", 23) == from_fields("KA1BCD", "FN31", 23)

    def test_from_fields_layout(self):
        """Representations are one character per position."""
        assert from_fields("KA1BCD", "FN31", 23) == (
            b"Q", b"K", b"A", b"1", b"B", b"C", b"D", b"F", b"N", b"3", b"1", b"23",
        )

    def test_to_fields_size_mismatch(self):
        """Sequences of the wrong length are rejected."""
        with pytest.raises(SizeMismatchError, match="expected: 12"):
            to_fields(ENCODER.encode(0)[:-1])


class TestFieldValidation:
    """Test from_fields format errors."""

    def test_callsign_space_rejected(self):
        """The canonical set has no space in any callsign position."""
        with pytest.raises(FormatInvalidError, match="Callsign position 5"):
            from_fields("K1ABC ", "FN42", 37)

    def test_callsign_length(self):
        """Callsign must be exactly six characters."""
        with pytest.raises(FormatInvalidError, match="exactly 6"):
            from_fields("K1ABC", "FN42", 37)

    def test_grid_letter_range(self):
        """Grid letters above R are rejected with their position."""
        with pytest.raises(FormatInvalidError, match="Grid square position 1"):
            from_fields("KA1BCD", "FZ42", 37)

    def test_grid_length(self):
        """Grid must be exactly four characters."""
        with pytest.raises(FormatInvalidError, match="exactly 4"):
            from_fields("KA1BCD", "FN4", 37)

    def test_power(self):
        """Illegal power levels are rejected."""
        with pytest.raises(FormatInvalidError, match="power level"):
            from_fields("KA1BCD", "FN42", 38)

    def test_from_message_space_callsign(self):
        """A valid WSPRMessage may still not fit the canonical set."""
        msg = WSPRMessage.from_string("K1ABC FN42 37")
        with pytest.raises(FormatInvalidError):
            from_message(msg)


class TestLiteralPosition:
    """Test the Q marker on decode."""

    def test_wrong_marker(self):
        """A different marker is a symbol mismatch."""
        encoded = list(ENCODER.encode(12345))
        encoded[0] = b"R"
        with pytest.raises(SymbolMismatchError):
            DECODER.decode(encoded)


class TestBlocks:
    """Test byte block conversion."""

    def test_block_round_trip(self):
        """A 6-byte block survives, leading zeros included."""
        block = b"\x00\x00\x01\x02\x03\x04"
        assert message_to_block(block_to_message(block), 6) == block

    def test_all_ones_block(self):
        """The largest 6-byte block fits in one message."""
        block = b"\xff" * 6
        assert message_to_block(block_to_message(block), 6) == block

    def test_block_too_small(self):
        """A message holding more than 48 bits does not fit 6 bytes."""
        msg = WSPRMessage("999999", "RR99", 60)
        with pytest.raises(SizeMismatchError, match="6-byte block"):
            message_to_block(msg, 6)
