"""Tests for the command line entry point."""

from wsprcodex.__main__ import main


def test_encode_decode(capsys):
    """Encoded lines decode back to the payload."""
    assert main(["encode", "Hi", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1

    assert main(["decode", *lines]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["4869", "Hi"]


def test_encode_hex(capsys):
    """0x-prefixed payloads are hex."""
    assert main(["encode", "0x00ff10", "0x07"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert main(["decode", *lines]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "00ff10"


def test_capacity(capsys):
    assert main(["capacity"]) == 0
    out = capsys.readouterr().out
    assert "bytes per message: 6" in out
    assert "max payload: 768" in out


def test_no_command(capsys):
    """Missing command prints usage."""
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_unknown_command(capsys):
    assert main(["transmit"]) == 1


def test_decode_without_messages(capsys):
    """Errors are reported, not raised."""
    assert main(["decode"]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_encode_missing_payload(capsys):
    assert main(["encode"]) == 1
