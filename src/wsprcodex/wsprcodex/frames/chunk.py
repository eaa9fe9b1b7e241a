"""
WSPR Chunk Frames

Payloads larger than one WSPR message are split into chunks. Each chunk is
framed into a 6-byte block, which is exactly what one message carries.

Two layouts are defined:

Basic (up to 16 chunks, 64 bytes):
    [MessageID:1][Seq:4 bits | Total-1:4 bits][Payload:4]

Extended (up to 256 chunks, 768 bytes):
    [MessageID:1][Seq:1][Total-1:1][Payload:3]

Only the final chunk of a set may be short; it is zero-padded, and the
padding is stripped again on reassembly.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Sequence

from wsprcodex.core.constants import (
    BASIC_HEADER_SIZE,
    BASIC_MAX_CHUNKS,
    BASIC_PAYLOAD_BYTES,
    EXTENDED_HEADER_SIZE,
    EXTENDED_MAX_CHUNKS,
    EXTENDED_MAX_PAYLOAD,
    EXTENDED_PAYLOAD_BYTES,
    FRAME_SIZE,
    MAX_MESSAGE_ID,
)
from wsprcodex.core.errors import (
    CapacityExceededError,
    EmptyInputError,
    IncompleteSequenceError,
    SizeMismatchError,
)

__all__ = ["EncodingMode", "Chunk", "ChunkSet"]

logger = logging.getLogger(__name__)


class EncodingMode(IntEnum):
    """Chunk frame layout."""

    BASIC = 0
    EXTENDED = 1

    @property
    def header_size(self) -> int:
        """Header bytes per frame."""
        return BASIC_HEADER_SIZE if self is EncodingMode.BASIC else EXTENDED_HEADER_SIZE

    @property
    def payload_width(self) -> int:
        """Payload bytes per frame."""
        return BASIC_PAYLOAD_BYTES if self is EncodingMode.BASIC else EXTENDED_PAYLOAD_BYTES

    @property
    def max_chunks(self) -> int:
        """Largest chunk count the header can express."""
        return BASIC_MAX_CHUNKS if self is EncodingMode.BASIC else EXTENDED_MAX_CHUNKS

    @property
    def max_payload(self) -> int:
        """Largest total payload in bytes."""
        return self.max_chunks * self.payload_width

    @classmethod
    def for_length(cls, length: int) -> EncodingMode:
        """Smallest-header mode that can carry ``length`` bytes."""
        if length <= cls.BASIC.max_payload:
            return cls.BASIC
        return cls.EXTENDED


@dataclass(frozen=True)
class Chunk:
    """
    One framed slice of a payload.

    Attributes:
        message_id: Groups the chunks of one payload (0-255).
        sequence_number: 0-based position in the chunk set.
        total_chunks: Number of chunks in the set.
        payload: Payload slice, at most the mode's payload width.
    """

    message_id: int
    sequence_number: int
    total_chunks: int
    payload: bytes = b""

    def to_bytes(self, mode: EncodingMode) -> bytes:
        """
        Serialize to a 6-byte frame.

        Args:
            mode: Frame layout to use.

        Returns:
            Header followed by the zero-padded payload.

        Raises:
            ValueError: If a header field or the payload does not fit the layout.
        """
        if not 0 <= self.message_id <= MAX_MESSAGE_ID:
            raise ValueError(f"Message ID must be 0-{MAX_MESSAGE_ID}, got {self.message_id}")
        if not 1 <= self.total_chunks <= mode.max_chunks:
            raise ValueError(
                f"{mode.name} mode supports 1-{mode.max_chunks} chunks, got {self.total_chunks}"
            )
        if not 0 <= self.sequence_number < mode.max_chunks:
            raise ValueError(
                f"{mode.name} mode sequence number must be 0-{mode.max_chunks - 1}, "
                f"got {self.sequence_number}"
            )
        if len(self.payload) > mode.payload_width:
            raise ValueError(
                f"{mode.name} mode payload must be at most {mode.payload_width} bytes, "
                f"got {len(self.payload)}"
            )

        if mode is EncodingMode.BASIC:
            header = bytes([self.message_id, (self.sequence_number << 4) | (self.total_chunks - 1)])
        else:
            header = bytes([self.message_id, self.sequence_number, self.total_chunks - 1])

        return header + bytes(self.payload).ljust(mode.payload_width, b"\x00")

    @classmethod
    def from_bytes(cls, block: bytes, mode: EncodingMode) -> Chunk:
        """
        Parse a 6-byte frame.

        Raises:
            SizeMismatchError: If the block is not exactly 6 bytes.
        """
        if len(block) != FRAME_SIZE:
            raise SizeMismatchError(
                f"Invalid {mode.name.lower()} mode chunk size: {len(block)}, expected {FRAME_SIZE}"
            )

        message_id = block[0]
        if mode is EncodingMode.BASIC:
            sequence_number = (block[1] >> 4) & 0x0F
            total_chunks = (block[1] & 0x0F) + 1
        else:
            sequence_number = block[1]
            total_chunks = block[2] + 1

        return cls(
            message_id=message_id,
            sequence_number=sequence_number,
            total_chunks=total_chunks,
            payload=bytes(block[mode.header_size :]),
        )

    def __str__(self) -> str:
        return (
            f"Chunk[{self.message_id}] {self.sequence_number + 1}/{self.total_chunks}: "
            f"{self.payload.hex()}"
        )


@dataclass
class ChunkSet:
    """
    The chunks of one payload, in any order.

    Attributes:
        mode: Frame layout shared by every chunk.
        chunks: Chunk list; order does not matter.
    """

    mode: EncodingMode
    chunks: List[Chunk] = field(default_factory=list)

    @classmethod
    def from_data(
        cls, data: bytes, message_id: int, mode: Optional[EncodingMode] = None
    ) -> ChunkSet:
        """
        Split a payload into chunks.

        Args:
            data: Payload bytes (1-768).
            message_id: ID shared by all chunks (0-255).
            mode: Frame layout; chosen from the payload size when omitted.

        Returns:
            ChunkSet with the last payload slice zero-padded.

        Raises:
            EmptyInputError: If data is empty.
            CapacityExceededError: If data exceeds the mode's capacity.
        """
        if not data:
            raise EmptyInputError("Cannot encode empty data")
        if len(data) > EXTENDED_MAX_PAYLOAD:
            raise CapacityExceededError(
                f"Data size {len(data)} bytes exceeds maximum capacity of "
                f"{EXTENDED_MAX_PAYLOAD} bytes"
            )
        if not 0 <= message_id <= MAX_MESSAGE_ID:
            raise ValueError(f"Message ID must be 0-{MAX_MESSAGE_ID}, got {message_id}")

        if mode is None:
            mode = EncodingMode.for_length(len(data))

        width = mode.payload_width
        total_chunks = -(-len(data) // width)
        if total_chunks > mode.max_chunks:
            raise CapacityExceededError(
                f"{mode.name} mode supports max {mode.max_chunks} chunks, "
                f"but {total_chunks} needed"
            )

        chunks = [
            Chunk(
                message_id=message_id,
                sequence_number=index,
                total_chunks=total_chunks,
                payload=bytes(data[offset : offset + width]).ljust(width, b"\x00"),
            )
            for index, offset in enumerate(range(0, len(data), width))
        ]
        logger.debug(
            f"Split {len(data)} bytes into {total_chunks} {mode.name} chunks (id {message_id})"
        )
        return cls(mode=mode, chunks=chunks)

    @classmethod
    def from_blocks(cls, blocks: Sequence[bytes], mode: EncodingMode) -> ChunkSet:
        """Parse 6-byte frames under one layout."""
        return cls(mode=mode, chunks=[Chunk.from_bytes(block, mode) for block in blocks])

    def to_blocks(self) -> List[bytes]:
        """Serialize every chunk, in list order."""
        return [chunk.to_bytes(self.mode) for chunk in self.chunks]

    @property
    def message_id(self) -> int:
        """Message ID of the first chunk."""
        return self.chunks[0].message_id

    @property
    def total_chunks(self) -> int:
        """Declared chunk count of the first chunk."""
        return self.chunks[0].total_chunks

    def validate(self) -> None:
        """
        Check the set is one complete, consistent payload.

        Raises:
            IncompleteSequenceError: On mixed message IDs or chunk counts, a
                received count different from the declared total, or missing,
                duplicate or out-of-range sequence numbers.
        """
        if not self.chunks:
            raise IncompleteSequenceError("No chunks to decode")

        message_ids = sorted({chunk.message_id for chunk in self.chunks})
        if len(message_ids) > 1:
            raise IncompleteSequenceError(
                f"Chunks have mismatched message IDs: {message_ids}"
            )

        totals = sorted({chunk.total_chunks for chunk in self.chunks})
        if len(totals) > 1:
            raise IncompleteSequenceError(
                f"Chunks have mismatched total counts: {totals}"
            )

        total = totals[0]
        counts = Counter(chunk.sequence_number for chunk in self.chunks)
        missing = [seq for seq in range(total) if seq not in counts]
        duplicates = [seq for seq, count in counts.items() if count > 1]
        unexpected = sorted(seq for seq in counts if seq >= total)

        if len(self.chunks) != total:
            raise IncompleteSequenceError(
                f"Expected {total} chunks but received {len(self.chunks)} "
                f"(missing: {missing}, duplicates: {sorted(duplicates)})",
                missing=missing,
                duplicates=duplicates,
            )

        if missing or duplicates or unexpected:
            raise IncompleteSequenceError(
                f"Missing or duplicate chunks. Missing: {missing}, "
                f"duplicates: {sorted(duplicates)}, out of range: {unexpected}",
                missing=missing,
                duplicates=duplicates,
            )

    def get_data(self) -> bytes:
        """
        Reassemble the payload.

        Chunks are validated, ordered by sequence number and concatenated.
        Trailing zero bytes of the last chunk are treated as padding and
        removed, so a payload that really ends in zero bytes comes back
        shorter.
        """
        self.validate()
        ordered = sorted(self.chunks, key=lambda chunk: chunk.sequence_number)
        body = b"".join(chunk.payload for chunk in ordered[:-1])
        return body + ordered[-1].payload.rstrip(b"\x00")

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self.chunks)

    def __getitem__(self, index: int) -> Chunk:
        return self.chunks[index]

    def __str__(self) -> str:
        return f"ChunkSet: {len(self.chunks)} {self.mode.name} chunks"
