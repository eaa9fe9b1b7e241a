"""
WSPR Symbol Set

The canonical symbol list describing one WSPR transmission:

    Required(b"Q")           fixed marker, carries no information
    CallLetterNumber x 6     callsign characters (A-Z, 0-9)
    GridLetter x 2           locator field letters (A-R)
    GridNumber x 2           locator square digits (0-9)
    Power                    19 discrete dBm levels

Capacity is 36^6 * 18^2 * 10^2 * 19 = 1,340,027,206,041,600 (51 bits), so
one transmission carries any 6-byte integer.

This module also maps the generic symbol sequence to and from the
(callsign, grid, power) triple.
"""

from __future__ import annotations

from typing import Sequence

from wsprcodex.core.codec import Decoder, Encoder
from wsprcodex.core.codec import capacity as _capacity
from wsprcodex.core.constants import CALLSIGN_LENGTH, GRID_SQUARE_LENGTH, WSPR_PREFIX
from wsprcodex.core.errors import FormatInvalidError, SizeMismatchError, SymbolMismatchError
from wsprcodex.core.symbols import (
    CALL_LETTER_NUMBER,
    GRID_LETTER,
    GRID_NUMBER,
    POWER,
    AlphabetSymbol,
    Required,
    Symbol,
)
from wsprcodex.wspr.message import WSPRMessage

__all__ = [
    "WSPR_SYMBOLS",
    "CALLSIGN_SLICE",
    "GRID_SLICE",
    "POWER_INDEX",
    "ENCODER",
    "DECODER",
    "capacity",
    "get_max_payload_bytes",
    "to_fields",
    "from_fields",
    "from_message",
    "block_to_message",
    "message_to_block",
]

WSPR_SYMBOLS: tuple[Symbol, ...] = (
    Required(WSPR_PREFIX),
    *([CALL_LETTER_NUMBER] * CALLSIGN_LENGTH),
    GRID_LETTER,
    GRID_LETTER,
    GRID_NUMBER,
    GRID_NUMBER,
    POWER,
)

# Positions of each field within an encoded sequence
CALLSIGN_SLICE = slice(1, 1 + CALLSIGN_LENGTH)
GRID_SLICE = slice(CALLSIGN_SLICE.stop, CALLSIGN_SLICE.stop + GRID_SQUARE_LENGTH)
POWER_INDEX: int = GRID_SLICE.stop

ENCODER = Encoder(WSPR_SYMBOLS)
DECODER = ENCODER.decoder()


def capacity() -> int:
    """Number of distinct integers one WSPR message can carry."""
    return _capacity(WSPR_SYMBOLS)


def get_max_payload_bytes() -> int:
    """
    Whole bytes that always fit in one WSPR message.

    Examples:
        >>> get_max_payload_bytes()
        6
    """
    return (capacity().bit_length() - 1) // 8


def to_fields(encoded: Sequence[bytes]) -> WSPRMessage:
    """
    Group an encoded sequence into callsign, grid square and power.

    Args:
        encoded: One representation per WSPR symbol.

    Returns:
        The corresponding WSPRMessage.

    Raises:
        SizeMismatchError: If the sequence is not the symbol list's length.
    """
    if len(encoded) != len(WSPR_SYMBOLS):
        raise SizeMismatchError(
            f"Invalid encoded symbol count: {len(encoded)}, expected: {len(WSPR_SYMBOLS)}"
        )
    callsign = b"".join(encoded[CALLSIGN_SLICE]).decode("ascii")
    grid_square = b"".join(encoded[GRID_SLICE]).decode("ascii")
    power_dbm = int(encoded[POWER_INDEX])
    return WSPRMessage(callsign, grid_square, power_dbm)


def _check_positions(field: str, text: str, symbols: Sequence[Symbol]) -> list[bytes]:
    representations = []
    for position, (char, symbol) in enumerate(zip(text, symbols)):
        representation = char.encode("ascii", errors="replace")
        if isinstance(symbol, AlphabetSymbol) and not symbol.accepts(char):
            raise FormatInvalidError(
                f"{field} position {position} must be one of {symbol.alphabet!r} "
                f"({symbol}), got {char!r}"
            )
        representations.append(representation)
    return representations


def from_fields(callsign: str, grid_square: str, power_dbm: int) -> tuple[bytes, ...]:
    """
    Build the encoded sequence for a (callsign, grid, power) triple.

    Args:
        callsign: Exactly 6 characters legal for their positions.
        grid_square: 2 letters A-R followed by 2 digits.
        power_dbm: One of the 19 WSPR power levels.

    Returns:
        One representation per WSPR symbol, ready for the decoder.

    Raises:
        FormatInvalidError: Naming the violated field constraint.
    """
    callsign = callsign.upper()
    grid_square = grid_square.upper()
    if len(callsign) != CALLSIGN_LENGTH:
        raise FormatInvalidError(
            f"Callsign must be exactly {CALLSIGN_LENGTH} characters: {callsign!r}"
        )
    if len(grid_square) != GRID_SQUARE_LENGTH:
        raise FormatInvalidError(
            f"Grid square must be exactly {GRID_SQUARE_LENGTH} characters: {grid_square!r}"
        )

    power = str(power_dbm).encode("ascii")
    try:
        POWER.decode(power)
    except SymbolMismatchError as err:
        raise FormatInvalidError(f"Invalid power level: {power_dbm!r} dBm") from err

    return (
        WSPR_SYMBOLS[0].encode(0),
        *_check_positions("Callsign", callsign, WSPR_SYMBOLS[CALLSIGN_SLICE]),
        *_check_positions("Grid square", grid_square, WSPR_SYMBOLS[GRID_SLICE]),
        power,
    )


def from_message(message: WSPRMessage) -> tuple[bytes, ...]:
    """Encoded sequence for an existing WSPRMessage."""
    return from_fields(message.callsign, message.grid_square, message.power_dbm)


def block_to_message(block: bytes) -> WSPRMessage:
    """Encode a byte block, read as an unsigned big-endian integer."""
    return to_fields(ENCODER.encode(int.from_bytes(block, "big")))


def message_to_block(message: WSPRMessage, size: int) -> bytes:
    """
    Decode a message into a fixed-width big-endian byte block.

    Leading zero bytes of the block are restored by padding up to ``size``.

    Raises:
        SizeMismatchError: If the decoded integer needs more than ``size`` bytes.
    """
    value = DECODER.decode(from_message(message))
    try:
        return value.to_bytes(size, "big")
    except OverflowError as err:
        raise SizeMismatchError(
            f"Message {message} decodes to {value.bit_length()} bits, "
            f"more than a {size}-byte block"
        ) from err
