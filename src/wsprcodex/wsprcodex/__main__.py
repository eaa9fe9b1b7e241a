from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, List, Optional

from wsprcodex.multimessage import WSPRMultiMessageCodex, get_max_payload_bytes

logger = logging.getLogger(__name__)

helptext = """
Usage: python -m wsprcodex [-v] <command> [args]

    python -m wsprcodex encode "Hello WSPR!"      text payload, random message ID
    python -m wsprcodex encode 0x00ff10 7         hex payload, message ID 7
    python -m wsprcodex decode "KA1BCD FN31 23" "..."
    python -m wsprcodex capacity

-v enables debug logging.
"""


def _parse_payload(arg: str) -> bytes:
    if arg.lower().startswith("0x"):
        return bytes.fromhex(arg[2:])
    return arg.encode("utf-8")


def cmd_encode(payload: str, message_id: Optional[str] = None) -> None:
    """Print one WSPR message per line."""
    codec = WSPRMultiMessageCodex()
    mid = int(message_id, 0) if message_id is not None else None
    for message in codec.encode(_parse_payload(payload), mid):
        print(message)


def cmd_decode(*messages: str) -> None:
    """Print the payload as hex, and as text when it is printable."""
    data = WSPRMultiMessageCodex().decode(messages)
    print(data.hex())
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return
    if text.isprintable():
        print(text)


def cmd_capacity() -> None:
    """Print payload limits."""
    print(f"bytes per message: {get_max_payload_bytes()}")
    print(f"max payload: {WSPRMultiMessageCodex.MAX_PAYLOAD}")


_CLI_COMMANDS: Dict[str, Callable[..., None]] = {
    "encode": cmd_encode,
    "decode": cmd_decode,
    "capacity": cmd_capacity,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "-v":
        logging.basicConfig(level=logging.DEBUG)
        args = args[1:]

    if not args or args[0] not in _CLI_COMMANDS:
        print(helptext)
        return 1

    try:
        _CLI_COMMANDS[args[0]](*args[1:])
    except (ValueError, TypeError) as err:
        logger.debug("command failed", exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
