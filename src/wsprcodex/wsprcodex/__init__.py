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
from wsprcodex.frames import Chunk, ChunkSet, EncodingMode
from wsprcodex.multimessage import WSPRMultiMessageCodex, decode, encode, get_max_payload_bytes
from wsprcodex.wspr import WSPRCodex, WSPRMessage, WSPRMessageSequence

__all__ = [
    'encode',
    'decode',
    'get_max_payload_bytes',
    'WSPRMessage',
    'WSPRMultiMessageCodex',
    'WSPRCodex',
    'WSPRMessageSequence',
    'EncodingMode',
    'Chunk',
    'ChunkSet',
    'CodexError',
    'EmptyInputError',
    'CapacityExceededError',
    'EncodingOverflowError',
    'SymbolMismatchError',
    'SizeMismatchError',
    'IncompleteSequenceError',
    'FormatInvalidError',
]
