"""WSPR Layer

This module maps the generic symbol codec onto WSPR transmissions:
- WSPRMessage (callsign, grid square, power)
- The canonical WSPR symbol list and its field mapping
- Single-message and unframed multi-message encodings
"""

from wsprcodex.wspr.codex import WSPRCodex, WSPRMessageSequence
from wsprcodex.wspr.message import WSPRMessage, validate_fields
from wsprcodex.wspr.symbolset import (
    WSPR_SYMBOLS,
    capacity,
    from_fields,
    from_message,
    get_max_payload_bytes,
    to_fields,
)

__all__ = [
    "WSPRMessage",
    "validate_fields",
    "WSPR_SYMBOLS",
    "capacity",
    "get_max_payload_bytes",
    "to_fields",
    "from_fields",
    "from_message",
    "WSPRCodex",
    "WSPRMessageSequence",
]
