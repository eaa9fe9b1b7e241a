"""WSPR Codex Core Components

This module contains the building blocks the WSPR layers sit on:
- Symbol definitions (letters, digits, power levels, raw bytes, literals)
- The mixed-radix Encoder/Decoder pair
- Error taxonomy
- Protocol constants
"""

from wsprcodex.core.codec import Decoder, Encoder, capacity, place_values
from wsprcodex.core.constants import (
    BASIC_MAX_CHUNKS,
    BASIC_MAX_PAYLOAD,
    BASIC_PAYLOAD_BYTES,
    EXTENDED_MAX_CHUNKS,
    EXTENDED_MAX_PAYLOAD,
    EXTENDED_PAYLOAD_BYTES,
    FRAME_SIZE,
    POWER_LEVELS_DBM,
)
from wsprcodex.core.errors import (
    CapacityExceededError,
    CodexError,
    EmptyInputError,
    EncodingOverflowError,
    FormatInvalidError,
    IncompleteSequenceError,
    SizeMismatchError,
    SymbolMismatchError,
)
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
    NUMBER,
    POWER,
    TRINARY,
    AlphabetSymbol,
    ByteSymbol,
    PowerSymbol,
    Required,
    Symbol,
)

__all__ = [
    # Codec
    "Encoder",
    "Decoder",
    "capacity",
    "place_values",
    # Symbols
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
    # Errors
    "CodexError",
    "EmptyInputError",
    "CapacityExceededError",
    "EncodingOverflowError",
    "SymbolMismatchError",
    "SizeMismatchError",
    "IncompleteSequenceError",
    "FormatInvalidError",
    # Constants
    "FRAME_SIZE",
    "BASIC_PAYLOAD_BYTES",
    "BASIC_MAX_CHUNKS",
    "BASIC_MAX_PAYLOAD",
    "EXTENDED_PAYLOAD_BYTES",
    "EXTENDED_MAX_CHUNKS",
    "EXTENDED_MAX_PAYLOAD",
    "POWER_LEVELS_DBM",
]
