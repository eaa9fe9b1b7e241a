"""
WSPR Message Fields

A WSPR Type 1 transmission carries three human-visible fields:
- Callsign: 6 characters (letters, digits, space)
- Grid square: 4-character Maidenhead locator (e.g. "FN31")
- Power: one of 19 discrete dBm levels (0, 3, 7, 10 ... 60)

:class:`WSPRMessage` is the value exchanged with the radio layer. Its text
form is ``"<callsign> <grid> <power>"``, e.g. ``"KA1BCD FN31 23"``.
"""

from __future__ import annotations

from dataclasses import dataclass

from wsprcodex.core.constants import (
    CALLSIGN_ALPHABET,
    CALLSIGN_LENGTH,
    DIGITS,
    GRID_LETTERS,
    GRID_SQUARE_LENGTH,
    POWER_LEVELS_DBM,
)
from wsprcodex.core.errors import FormatInvalidError

__all__ = ["WSPRMessage", "validate_fields"]


def validate_fields(callsign: str, grid_square: str, power_dbm: int) -> None:
    """
    Check the generic WSPR field formats.

    Position-specific callsign rules depend on the symbol list in use and
    are checked by :func:`wsprcodex.wspr.symbolset.from_fields`.

    Raises:
        FormatInvalidError: Naming the first violated constraint.
    """
    if len(callsign) != CALLSIGN_LENGTH:
        raise FormatInvalidError(
            f"Callsign must be {CALLSIGN_LENGTH} characters, got {len(callsign)}: {callsign!r}"
        )
    for position, char in enumerate(callsign):
        if char not in CALLSIGN_ALPHABET:
            raise FormatInvalidError(
                f"Invalid character {char!r} at callsign position {position}: {callsign!r}"
            )

    if len(grid_square) != GRID_SQUARE_LENGTH:
        raise FormatInvalidError(
            f"Grid square must be {GRID_SQUARE_LENGTH} characters, got {len(grid_square)}: {grid_square!r}"
        )
    for position, char in enumerate(grid_square[:2]):
        if char not in GRID_LETTERS:
            raise FormatInvalidError(
                f"Grid square position {position} must be A-R, got {char!r}"
            )
    for position, char in enumerate(grid_square[2:], start=2):
        if char not in DIGITS:
            raise FormatInvalidError(
                f"Grid square position {position} must be 0-9, got {char!r}"
            )

    if isinstance(power_dbm, bool) or power_dbm not in POWER_LEVELS_DBM:
        raise FormatInvalidError(
            f"Power must be one of {list(POWER_LEVELS_DBM)} dBm, got {power_dbm!r}"
        )


@dataclass(frozen=True)
class WSPRMessage:
    """
    One WSPR transmission's worth of fields.

    Fields are normalised to upper case and validated on construction.

    Examples:
        >>> msg = WSPRMessage("ka1bcd", "fn31", 23)
        >>> str(msg)
        'KA1BCD FN31 23'
        >>> WSPRMessage.from_string("KA1BCD FN31 23") == msg
        True
    """

    callsign: str
    grid_square: str
    power_dbm: int

    def __post_init__(self) -> None:
        """Normalise case and validate."""
        object.__setattr__(self, "callsign", str(self.callsign).upper())
        object.__setattr__(self, "grid_square", str(self.grid_square).upper())
        validate_fields(self.callsign, self.grid_square, self.power_dbm)

    @classmethod
    def from_string(cls, text: str) -> WSPRMessage:
        """
        Parse the ``"<callsign> <grid> <power>"`` text form.

        A callsign shorter than 6 characters is right-padded with spaces.

        Raises:
            FormatInvalidError: If the text does not have three fields or a
                field is invalid.
        """
        parts = text.rstrip().rsplit(None, 2)
        if len(parts) != 3:
            raise FormatInvalidError(
                f"Expected '<callsign> <grid> <power>', got {text!r}"
            )
        callsign, grid_square, power = parts
        try:
            power_dbm = int(power)
        except ValueError as err:
            raise FormatInvalidError(f"Power must be an integer, got {power!r}") from err
        return cls(callsign.ljust(CALLSIGN_LENGTH), grid_square, power_dbm)

    def to_tuple(self) -> tuple[str, str, int]:
        """Return ``(callsign, grid_square, power_dbm)`` for the radio encoder."""
        return (self.callsign, self.grid_square, self.power_dbm)

    def __str__(self) -> str:
        return f"{self.callsign} {self.grid_square} {self.power_dbm}"
