import io

import pytest

from wiredoc.header import MAX_MSG_LEN, MSG_HEADER_LEN, MsgHeader, OpCode, read_header

HANDSHAKE1_HEADER = bytes.fromhex("74 01 00 00 01 00 00 00 00 00 00 00 d4 07 00 00")


def test_read_handshake_header():
    header = read_header(io.BytesIO(HANDSHAKE1_HEADER))
    assert header == MsgHeader(message_length=372, request_id=1, response_to=0, op_code=OpCode.OP_QUERY)
    assert header.op_code is OpCode.OP_QUERY


def test_to_bytes_round_trip():
    header = MsgHeader(message_length=1931, request_id=292, response_to=3, op_code=OpCode.OP_MSG)
    assert read_header(io.BytesIO(header.to_bytes())) == header
    assert len(header.to_bytes()) == MSG_HEADER_LEN


def test_to_bytes_matches_wire_bytes():
    header = MsgHeader(message_length=372, request_id=1, response_to=0, op_code=OpCode.OP_QUERY)
    assert header.to_bytes() == HANDSHAKE1_HEADER


def test_write_to_stream():
    header = MsgHeader(message_length=92, request_id=3, op_code=OpCode.OP_MSG)
    out = io.BytesIO()
    header.write_to(out)
    assert out.getvalue() == header.to_bytes()


def test_read_leaves_rest_of_stream():
    stream = io.BytesIO(HANDSHAKE1_HEADER + b"tail")
    read_header(stream)
    assert stream.read() == b"tail"


def test_str():
    header = MsgHeader(message_length=372, request_id=1, response_to=0, op_code=OpCode.OP_QUERY)
    assert str(header) == "length:   372, id:    1, response_to:    0, opcode: OP_QUERY"


def test_unknown_opcode_kept_as_int():
    header = MsgHeader(message_length=16, op_code=5)
    assert header.op_code == 5
    assert not isinstance(header.op_code, OpCode)
    assert str(header).endswith("opcode: OpCode(5)")


def test_opcode_read_and_named_in_str():
    data = bytes.fromhex("10 00 00 00 00 00 00 00 00 00 00 00 dd 07 00 00")
    header = read_header(io.BytesIO(data))
    assert header.op_code is OpCode.OP_MSG
    assert str(header).endswith("opcode: OP_MSG")
    reply = MsgHeader(message_length=16, op_code=OpCode.OP_REPLY)
    assert reply.to_bytes()[12:] == bytes.fromhex("01 00 00 00")
    assert str(reply).endswith("opcode: OP_REPLY")


def test_empty_stream_is_eof():
    with pytest.raises(EOFError):
        read_header(io.BytesIO(b""))


def test_truncated_header():
    with pytest.raises(ValueError, match="expected 16, read 4"):
        read_header(io.BytesIO(HANDSHAKE1_HEADER[:4]))


@pytest.mark.parametrize("length", [0, MSG_HEADER_LEN - 1, MAX_MSG_LEN + 1, -1])
def test_invalid_length(length):
    data = MsgHeader(message_length=length, op_code=OpCode.OP_MSG).to_bytes()
    with pytest.raises(ValueError, match=f"invalid message length {length}"):
        read_header(io.BytesIO(data))


def test_boundary_lengths_accepted():
    for length in (MSG_HEADER_LEN, MAX_MSG_LEN):
        data = MsgHeader(message_length=length, op_code=OpCode.OP_MSG).to_bytes()
        assert read_header(io.BytesIO(data)).message_length == length