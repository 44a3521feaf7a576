"""Validated BSON-style documents, wire protocol headers, flags and OP_MSG sections."""

__version__ = "0.1.0"

__all__ = ["types", "flags", "header", "hexdump", "pathutil", "opmsg", "ctxutil"]