"""Standard message header of the wire protocol."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import BinaryIO

MSG_HEADER_LEN = 16
MAX_MSG_LEN = 48000000

_HEADER = struct.Struct("<iiii")
_MASK = 0xFFFFFFFF


class OpCode(enum.IntEnum):
    """Wire protocol operation codes."""

    OP_REPLY = 1
    OP_UPDATE = 2001
    OP_INSERT = 2002
    OP_GET_BY_OID = 2003
    OP_QUERY = 2004
    OP_GET_MORE = 2005
    OP_DELETE = 2006
    OP_KILL_CURSORS = 2007
    OP_COMPRESSED = 2012
    OP_MSG = 2013

    def __str__(self) -> str:
        return self.name


@dataclass
class MsgHeader:
    """Header that precedes every message."""

    message_length: int
    request_id: int = 0
    response_to: int = 0
    op_code: OpCode | int = 0

    def __post_init__(self) -> None:
        try:
            self.op_code = OpCode(self.op_code)
        except ValueError:
            self.op_code = int(self.op_code)

    def to_bytes(self) -> bytes:
        """Return the 16-byte little-endian encoding."""
        return struct.pack(
            "<IIII",
            self.message_length & _MASK,
            self.request_id & _MASK,
            self.response_to & _MASK,
            int(self.op_code) & _MASK,
        )

    def write_to(self, stream: BinaryIO) -> None:
        """Write the encoded header to a binary stream."""
        stream.write(self.to_bytes())

    def __str__(self) -> str:
        if isinstance(self.op_code, OpCode):
            op = str(self.op_code)
        else:
            op = f"OpCode({self.op_code})"
        return (
            f"length: {self.message_length:5d}, id: {self.request_id:4d}, "
            f"response_to: {self.response_to:4d}, opcode: {op}"
        )


def read_header(stream: BinaryIO) -> MsgHeader:
    """Read and validate a header.

    Raises EOFError if the stream is exhausted before the first byte and
    ValueError for a truncated or invalid header.
    """
    buf = bytearray()
    while len(buf) < MSG_HEADER_LEN:
        chunk = stream.read(MSG_HEADER_LEN - len(buf))
        if not chunk:
            break
        buf += chunk

    if not buf:
        raise EOFError("end of stream")
    if len(buf) < MSG_HEADER_LEN:
        raise ValueError(f"expected {MSG_HEADER_LEN}, read {len(buf)}")

    length, request_id, response_to, op_code = _HEADER.unpack(bytes(buf))
    if length < MSG_HEADER_LEN or length > MAX_MSG_LEN:
        raise ValueError(f"invalid message length {length}")

    return MsgHeader(length, request_id, response_to, op_code)