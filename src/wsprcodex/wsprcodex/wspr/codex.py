"""
Unframed WSPR Encodings

Two ways of putting data on WSPR without the chunk protocol:

- :class:`WSPRCodex` carries up to :func:`get_max_payload_bytes` bytes in a
  single message.
- :class:`WSPRMessageSequence` spreads one arbitrarily large integer over as
  many messages as it needs. The receiver must keep the messages in order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from wsprcodex.core.errors import CapacityExceededError, EmptyInputError
from wsprcodex.wspr.message import WSPRMessage
from wsprcodex.wspr.symbolset import (
    DECODER,
    ENCODER,
    block_to_message,
    capacity,
    from_message,
    get_max_payload_bytes,
    message_to_block,
    to_fields,
)

__all__ = ["WSPRCodex", "WSPRMessageSequence"]

logger = logging.getLogger(__name__)


class WSPRCodex:
    """
    Single-message codec for short payloads.

    Data is right-padded with zero bytes to the message capacity, so trailing
    zero bytes of the original payload do not survive a round trip.

    Example:
        >>> codex = WSPRCodex()
        >>> message = codex.encode(b"Hi!")
        >>> codex.decode(message)
        b'Hi!'
    """

    @staticmethod
    def get_max_payload_bytes() -> int:
        """Largest payload one message carries."""
        return get_max_payload_bytes()

    def encode(self, data: bytes) -> WSPRMessage:
        """
        Encode up to one message's worth of bytes.

        Raises:
            EmptyInputError: If data is empty.
            CapacityExceededError: If data does not fit in one message.
        """
        size = get_max_payload_bytes()
        if not data:
            raise EmptyInputError("Cannot encode empty data")
        if len(data) > size:
            raise CapacityExceededError(
                f"Data size {len(data)} bytes exceeds single message capacity of {size} bytes"
            )
        message = block_to_message(bytes(data).ljust(size, b"\x00"))
        logger.debug(f"Encoded {len(data)} bytes as {message}")
        return message

    def decode(self, message: WSPRMessage) -> bytes:
        """Recover the payload, minus any trailing zero bytes."""
        return message_to_block(message, get_max_payload_bytes()).rstrip(b"\x00")


class WSPRMessageSequence:
    """
    Arbitrary-precision integer spread across several WSPR messages.

    Messages are ordered least significant first; each one carries a digit
    in base :func:`capacity`.
    """

    @staticmethod
    def message_count(value: int) -> int:
        """Number of messages :meth:`encode` produces for ``value``."""
        if value < 0:
            raise ValueError(f"Cannot encode negative value {value}")
        count = 1
        base = capacity()
        while value >= base:
            value //= base
            count += 1
        return count

    @staticmethod
    def encode(value: int) -> List[WSPRMessage]:
        """
        Encode a non-negative integer, least significant message first.

        Zero still produces one message.
        """
        if value < 0:
            raise ValueError(f"Cannot encode negative value {value}")
        base = capacity()
        messages = []
        remaining = value
        while True:
            remaining, digit = divmod(remaining, base)
            messages.append(to_fields(ENCODER.encode(digit)))
            if remaining == 0:
                break
        logger.debug(f"Encoded {value.bit_length()}-bit value as {len(messages)} messages")
        return messages

    @staticmethod
    def decode(messages: Iterable[WSPRMessage]) -> int:
        """
        Decode messages produced by :meth:`encode`, in the same order.

        Raises:
            EmptyInputError: If no messages are given.
        """
        base = capacity()
        result = 0
        multiplier = 1
        count = 0
        for message in messages:
            result += DECODER.decode(from_message(message)) * multiplier
            multiplier *= base
            count += 1
        if count == 0:
            raise EmptyInputError("Cannot decode empty message list")
        return result
