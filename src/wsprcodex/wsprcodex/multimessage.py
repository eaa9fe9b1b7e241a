"""
WSPR Multi-Message Codec

Encodes and decodes payloads that span several WSPR messages:

- Chooses Basic mode for payloads up to 64 bytes, Extended up to 768 bytes
- Frames each chunk with message ID, sequence number and chunk count
- Encodes each 6-byte frame as one WSPR message
- On receive, accepts messages in any order, detects the mode, validates
  the chunk set and reassembles the payload

Example:
    >>> codec = WSPRMultiMessageCodex()
    >>> messages = codec.encode(b"Hello WSPR!", message_id=42)
    >>> len(messages)
    3
    >>> codec.decode(reversed(messages))
    b'Hello WSPR!'
"""

from __future__ import annotations

import logging
import random
from typing import Any, Iterable, List, Optional, Sequence, Union

from wsprcodex.core.constants import (
    BASIC_MAX_CHUNKS,
    EXTENDED_MAX_PAYLOAD,
    FRAME_SIZE,
    MAX_MESSAGE_ID,
)
from wsprcodex.core.errors import EmptyInputError
from wsprcodex.frames.chunk import Chunk, ChunkSet, EncodingMode
from wsprcodex.wspr.message import WSPRMessage
from wsprcodex.wspr.symbolset import block_to_message, message_to_block
from wsprcodex.wspr.symbolset import get_max_payload_bytes as _get_max_payload_bytes

__all__ = [
    "WSPRMultiMessageCodex",
    "encode",
    "decode",
    "get_max_payload_bytes",
]

logger = logging.getLogger(__name__)

MessageLike = Union[WSPRMessage, str]


def _as_message(message: MessageLike) -> WSPRMessage:
    if isinstance(message, WSPRMessage):
        return message
    return WSPRMessage.from_string(message)


class WSPRMultiMessageCodex:
    """
    Chunked payload codec over WSPR messages.

    Args:
        rng: Source of default message IDs; anything with ``randrange``.
            Defaults to the process-wide :mod:`random` module.
    """

    MAX_PAYLOAD: int = EXTENDED_MAX_PAYLOAD

    def __init__(self, rng: Optional[Any] = None) -> None:
        self.rng = rng if rng is not None else random

    def generate_message_id(self) -> int:
        """Random message ID (0-255)."""
        return self.rng.randrange(MAX_MESSAGE_ID + 1)

    def chunks_for(self, data: bytes, message_id: Optional[int] = None) -> ChunkSet:
        """
        Chunk set that :meth:`encode` transmits for ``data``.

        Raises:
            EmptyInputError: If data is empty.
            CapacityExceededError: If data is over 768 bytes.
        """
        if message_id is None:
            message_id = self.generate_message_id()
        return ChunkSet.from_data(data, message_id)

    def encode(self, data: bytes, message_id: Optional[int] = None) -> List[WSPRMessage]:
        """
        Encode data into one WSPR message per chunk.

        Args:
            data: Payload bytes (1-768), typically already encrypted.
            message_id: ID shared by all chunks; random when omitted.

        Returns:
            Messages in sequence order.

        Raises:
            EmptyInputError: If data is empty.
            CapacityExceededError: If data is over 768 bytes.
        """
        chunk_set = self.chunks_for(data, message_id)
        messages = [block_to_message(block) for block in chunk_set.to_blocks()]
        logger.debug(
            f"Encoded {len(data)} bytes into {len(messages)} message(s), "
            f"{chunk_set.mode.name} mode, id {chunk_set.message_id}"
        )
        return messages

    @staticmethod
    def detect_mode(blocks: Sequence[bytes]) -> EncodingMode:
        """
        Guess the frame layout from the first block's header.

        Basic wins when its declared total matches the number of blocks;
        otherwise Extended when its declared total matches; otherwise the
        block count decides. Frames produced by :meth:`encode` are always
        classified correctly because Extended sets have more than 16 chunks.
        """
        if not blocks:
            raise EmptyInputError("No chunks to analyze")

        count = len(blocks)
        first = blocks[0]
        total_basic = Chunk.from_bytes(first, EncodingMode.BASIC).total_chunks
        total_extended = Chunk.from_bytes(first, EncodingMode.EXTENDED).total_chunks

        if count <= BASIC_MAX_CHUNKS and count == total_basic:
            return EncodingMode.BASIC
        if count == total_extended:
            return EncodingMode.EXTENDED

        logger.debug(
            f"Header totals (basic {total_basic}, extended {total_extended}) do not "
            f"match {count} messages, falling back on message count"
        )
        if count <= BASIC_MAX_CHUNKS:
            return EncodingMode.BASIC
        return EncodingMode.EXTENDED

    def decode_chunks(
        self, messages: Iterable[MessageLike], mode: Optional[EncodingMode] = None
    ) -> ChunkSet:
        """
        Decode messages into a validated chunk set.

        Args:
            messages: Received messages in any order, as WSPRMessage or text.
            mode: Frame layout if known; detected from the headers otherwise.

        Raises:
            EmptyInputError: If no messages are given.
            IncompleteSequenceError: If the chunks do not form one complete set.
        """
        received = [_as_message(message) for message in messages]
        if not received:
            raise EmptyInputError("Cannot decode empty message list")

        blocks = [message_to_block(message, FRAME_SIZE) for message in received]
        if mode is None:
            mode = self.detect_mode(blocks)

        chunk_set = ChunkSet.from_blocks(blocks, mode)
        chunk_set.validate()
        return chunk_set

    def decode(
        self, messages: Iterable[MessageLike], mode: Optional[EncodingMode] = None
    ) -> bytes:
        """
        Decode messages back into the original payload.

        Trailing zero bytes of the payload are indistinguishable from padding
        and are not returned.

        Raises:
            EmptyInputError: If no messages are given.
            IncompleteSequenceError: If chunks are missing, duplicated or mixed.
            SymbolMismatchError, SizeMismatchError: If a message does not
                decode to a 6-byte frame.
        """
        chunk_set = self.decode_chunks(messages, mode)
        data = chunk_set.get_data()
        logger.debug(
            f"Decoded {len(chunk_set)} {chunk_set.mode.name} chunk(s) into {len(data)} bytes"
        )
        return data


_DEFAULT_CODEC = WSPRMultiMessageCodex()


def encode(data: bytes, message_id: Optional[int] = None) -> List[WSPRMessage]:
    """Encode data with the default codec."""
    return _DEFAULT_CODEC.encode(data, message_id)


def decode(messages: Iterable[MessageLike], mode: Optional[EncodingMode] = None) -> bytes:
    """Decode messages with the default codec."""
    return _DEFAULT_CODEC.decode(messages, mode)


def get_max_payload_bytes() -> int:
    """Bytes carried by a single WSPR message."""
    return _get_max_payload_bytes()
