"""
WSPR Codex Exceptions

Every error the codec raises derives from :class:`CodexError`, which is a
``ValueError``.
"""

from __future__ import annotations

from typing import Iterable

__all__ = [
    "CodexError",
    "EmptyInputError",
    "CapacityExceededError",
    "EncodingOverflowError",
    "SymbolMismatchError",
    "SizeMismatchError",
    "IncompleteSequenceError",
    "FormatInvalidError",
]


class CodexError(ValueError):
    """Base class for all codec errors."""


class EmptyInputError(CodexError):
    """Encode was given no bytes, or decode was given no messages."""


class CapacityExceededError(CodexError):
    """Payload is larger than the active protocol ceiling."""


class EncodingOverflowError(CodexError):
    """Integer does not fit in the symbol list's capacity."""


class SymbolMismatchError(CodexError):
    """A representation or digit is outside a symbol's alphabet."""


class SizeMismatchError(CodexError):
    """Sequence or block length differs from the expected length."""


class FormatInvalidError(CodexError):
    """A callsign, grid square or power value failed field validation."""


class IncompleteSequenceError(CodexError):
    """
    Chunk reassembly found an inconsistent or incomplete chunk set.

    Attributes:
        missing: Sequence numbers that were expected but not received.
        duplicates: Sequence numbers received more than once.
    """

    def __init__(
        self,
        message: str,
        *,
        missing: Iterable[int] = (),
        duplicates: Iterable[int] = (),
    ) -> None:
        super().__init__(message)
        self.missing: tuple[int, ...] = tuple(sorted(missing))
        self.duplicates: tuple[int, ...] = tuple(sorted(duplicates))
