"""Bit flags used by wire protocol messages."""

from __future__ import annotations

import enum


class _WireFlags(enum.IntFlag):
    """Common behaviour of wire protocol flag sets."""

    def __str__(self) -> str:
        return format_flags(self)


class OpMsgFlags(_WireFlags):
    """Flags of an OP_MSG message."""

    CHECKSUM_PRESENT = 1 << 0
    MORE_TO_COME = 1 << 1
    EXHAUST_ALLOWED = 1 << 16


class OpQueryFlags(_WireFlags):
    """Flags of an OP_QUERY message."""

    TAILABLE_CURSOR = 1 << 1
    SLAVE_OK = 1 << 2
    OPLOG_REPLAY = 1 << 3
    NO_CURSOR_TIMEOUT = 1 << 4
    AWAIT_DATA = 1 << 5
    EXHAUST = 1 << 6
    PARTIAL = 1 << 7


class OpReplyFlags(_WireFlags):
    """Flags of an OP_REPLY message."""

    CURSOR_NOT_FOUND = 1 << 0
    QUERY_FAILURE = 1 << 1
    SHARD_CONFIG_STALE = 1 << 2
    AWAIT_CAPABLE = 1 << 3


_LABELS: dict[type, dict[int, str]] = {
    OpMsgFlags: {
        int(OpMsgFlags.CHECKSUM_PRESENT): "checksumPresent",
        int(OpMsgFlags.MORE_TO_COME): "moreToCome",
        int(OpMsgFlags.EXHAUST_ALLOWED): "exhaustAllowed",
    },
    OpQueryFlags: {
        int(OpQueryFlags.TAILABLE_CURSOR): "TailableCursor",
        int(OpQueryFlags.SLAVE_OK): "SlaveOk",
        int(OpQueryFlags.OPLOG_REPLAY): "OplogReplay",
        int(OpQueryFlags.NO_CURSOR_TIMEOUT): "NoCursorTimeout",
        int(OpQueryFlags.AWAIT_DATA): "AwaitData",
        int(OpQueryFlags.EXHAUST): "Exhaust",
        int(OpQueryFlags.PARTIAL): "Partial",
    },
    OpReplyFlags: {
        int(OpReplyFlags.CURSOR_NOT_FOUND): "CursorNotFound",
        int(OpReplyFlags.QUERY_FAILURE): "QueryFailure",
        int(OpReplyFlags.SHARD_CONFIG_STALE): "ShardConfigStale",
        int(OpReplyFlags.AWAIT_CAPABLE): "AwaitCapable",
    },
}


def flag_names(value: _WireFlags) -> list[str]:
    """Return the protocol names of the bits set in value, lowest bit first."""
    labels = _LABELS.get(type(value))
    if labels is None:
        raise TypeError(f"unsupported flags type: {type(value).__name__}")
    number = int(value)
    names = []
    for shift in range(32):
        bit = 1 << shift
        if number & bit:
            names.append(labels.get(bit, f"{type(value).__name__}({bit})"))
    return names


def format_flags(value: _WireFlags) -> str:
    """Return value as "[name|name]"."""
    return "[" + "|".join(flag_names(value)) + "]"