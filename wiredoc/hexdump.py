"""Hex dumps: producing them and parsing them back into bytes."""

from __future__ import annotations

import binascii
import os


def _printable(byte: int) -> str:
    return chr(byte) if 32 <= byte <= 126 else "."


def dump(data: bytes) -> str:
    """Return a canonical hex dump with offsets and an ASCII column."""
    lines = []
    for offset in range(0, len(data), 16):
        chunk = data[offset : offset + 16]
        hex_part = "".join(
            f"{byte:02x} " + (" " if i == 7 else "") for i, byte in enumerate(chunk)
        )
        ascii_part = "".join(_printable(byte) for byte in chunk)
        lines.append(f"{offset:08x}  {hex_part.ljust(50)}|{ascii_part}|\n")
    return "".join(lines)


def parse_dump(text: str) -> bytes:
    """Parse a canonical or packet-capture style hex dump into bytes."""
    result = bytearray()
    for raw_line in text.strip().splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.endswith("|"):
            column = line[8:60]
        else:
            column = line[7:54]
        digits = column.strip().replace(" ", "")
        try:
            result += binascii.unhexlify(digits)
        except binascii.Error as err:
            raise ValueError(f"invalid hex dump line {line!r}: {err}") from err
    return bytes(result)


def parse_dump_file(*path: str) -> bytes:
    """Read a hex dump file from the joined path and parse it."""
    with open(os.path.join(*path), encoding="utf-8") as fh:
        return parse_dump(fh.read())