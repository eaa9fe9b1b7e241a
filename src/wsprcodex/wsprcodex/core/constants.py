"""
WSPR Codex Constants

Contains symbol alphabets, the WSPR power table and the chunk frame
dimensions used by the multi-message protocol.
"""

from __future__ import annotations

import string

__all__ = [
    # Alphabets
    "LETTERS",
    "DIGITS",
    "CALLSIGN_ALPHABET",
    "GRID_LETTERS",
    # WSPR fields
    "CALLSIGN_LENGTH",
    "GRID_SQUARE_LENGTH",
    "POWER_LEVELS_DBM",
    "WSPR_PREFIX",
    # Frame layout
    "FRAME_SIZE",
    "BASIC_HEADER_SIZE",
    "BASIC_PAYLOAD_BYTES",
    "BASIC_MAX_CHUNKS",
    "BASIC_MAX_PAYLOAD",
    "EXTENDED_HEADER_SIZE",
    "EXTENDED_PAYLOAD_BYTES",
    "EXTENDED_MAX_CHUNKS",
    "EXTENDED_MAX_PAYLOAD",
    "MAX_MESSAGE_ID",
]

# ============================================================================
# Alphabets
# ============================================================================

LETTERS: str = string.ascii_uppercase
DIGITS: str = string.digits

# Every character a WSPR callsign field may carry
CALLSIGN_ALPHABET: str = LETTERS + DIGITS + " "

# Maidenhead field letters
GRID_LETTERS: str = LETTERS[:18]

# ============================================================================
# WSPR Message Fields
# ============================================================================

CALLSIGN_LENGTH: int = 6
GRID_SQUARE_LENGTH: int = 4

# The 19 legal WSPR power levels, in dBm. Index is the Power symbol digit.
POWER_LEVELS_DBM: tuple[int, ...] = (
    0, 3, 7, 10, 13, 17, 20, 23, 27, 30,
    33, 37, 40, 43, 47, 50, 53, 57, 60,
)

# Literal marker leading every WSPR symbol sequence
WSPR_PREFIX: bytes = b"Q"

# ============================================================================
# Chunk Frames
# ============================================================================

# One frame is the unsigned big-endian integer carried by one WSPR message
FRAME_SIZE: int = 6

# Basic: [MessageID:1][Seq:4 bits | Total-1:4 bits][Payload:4]
BASIC_HEADER_SIZE: int = 2
BASIC_PAYLOAD_BYTES: int = FRAME_SIZE - BASIC_HEADER_SIZE
BASIC_MAX_CHUNKS: int = 16
BASIC_MAX_PAYLOAD: int = BASIC_MAX_CHUNKS * BASIC_PAYLOAD_BYTES  # 64 bytes

# Extended: [MessageID:1][Seq:1][Total-1:1][Payload:3]
EXTENDED_HEADER_SIZE: int = 3
EXTENDED_PAYLOAD_BYTES: int = FRAME_SIZE - EXTENDED_HEADER_SIZE
EXTENDED_MAX_CHUNKS: int = 256
EXTENDED_MAX_PAYLOAD: int = EXTENDED_MAX_CHUNKS * EXTENDED_PAYLOAD_BYTES  # 768 bytes

MAX_MESSAGE_ID: int = 0xFF
