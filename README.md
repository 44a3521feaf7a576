# wiredoc

Ordered, validated BSON-style documents and arrays, together with the parts
of the MongoDB wire protocol that sit around them: the 16-byte message
header, the flag sets of `OP_MSG`, `OP_QUERY` and `OP_REPLY`, and `OP_MSG`
sections merged into a single command document. It has no dependencies
beyond the standard library.

## Install

```
pip install wiredoc
```

## Documents and arrays

`wiredoc.types` provides `Document` and `Array`. They accept only values of
the supported types: `float`, `str`, `CString`, `bool`, `datetime.datetime`,
`Binary` (with a `BinarySubtype`), `ObjectID` (exactly 12 bytes), `Regex`,
`Timestamp`, `Int32`, `Int64`, `Null`, and nested `Document` / `Array`.
A plain `int` is rejected, since its width would be ambiguous; wrap it in
`Int32` or `Int64`, which check their range.

```python
from wiredoc.types import Array, Document, Int32

doc = Document(
    "insert", "actor",
    "ordered", True,
    "versions", Array(Int32(5), Int32(0)),
)
doc.command()                         # "insert"
doc.get_by_path("versions", "0")      # Int32(5)
doc.set("$db", "admin")
doc.remove("ordered")
doc.keys()                            # ["insert", "versions", "$db"]
```

- Keys keep insertion order. `keys()` returns them as a list and
  `as_dict()` returns a shallow copy of the fields.
- Empty keys and one- or two-character keys starting with `$` (such as
  `$k`) are invalid; longer ones such as `$db` are allowed.
- Unsupported values raise `TypeError`; invalid keys and duplicate keys in
  the constructor raise `ValueError`; a missing key raises `KeyError`; an
  out-of-range array index raises `IndexError`.
- `Array` supports `len()`, iteration, `get`, `set`, `append` and
  `subslice(low, high)`.
- `get_by_path(comp, *path)` walks documents by key and arrays by decimal
  index.

## Wire protocol pieces

- `wiredoc.header`: `OpCode`, `MsgHeader` (`to_bytes()`, `write_to(stream)`)
  and `read_header(stream)`, which raises `EOFError` on an exhausted stream
  and `ValueError` on a truncated header or a message length outside
  16..48000000.
- `wiredoc.flags`: `OpMsgFlags`, `OpQueryFlags` and `OpReplyFlags`.
  `flag_names(value)` lists the protocol names of the bits that are set and
  `format_flags(value)` (also `str(value)`) renders them as
  `[checksumPresent|exhaustAllowed]`.
- `wiredoc.opmsg`: `OpMsgSection` and `OpMsg`. `OpMsg.document()` copies the
  kind 0 body document and adds each kind 1 section as an `Array` under its
  identifier; `set_sections(...)` raises `ValueError` if the sections do not
  form a valid document.

```python
from wiredoc.opmsg import OpMsg, OpMsgSection
from wiredoc.types import Document

msg = OpMsg(
    OpMsgSection(0, documents=[Document("insert", "actor", "$db", "test")]),
    OpMsgSection(1, "documents", [Document("name", "NICK")]),
)
msg.document().keys()   # ["insert", "$db", "documents"]
```

## Utilities

- `wiredoc.hexdump`: `dump(data)` produces a canonical hex dump with offsets
  and an ASCII column; `parse_dump(text)` reads canonical or Wireshark-style
  dumps back into bytes; `parse_dump_file(*parts)` does the same for a file.
- `wiredoc.pathutil`: `get_by_path` and `set_by_path(comp, value, *path)`,
  which replaces the value at a path that must already exist.
- `wiredoc.ctxutil`: `with_delay(done, delay)` returns a `DelayedCancel`
  that cancels itself `delay` seconds after the `done` event is set. It can
  be cancelled directly with `cancel()`, checked with `is_cancelled()`,
  waited on with `wait(timeout)`, and used as a context manager that cancels
  on exit.

## What it does not do

wiredoc does not encode or decode BSON, so it cannot serialize documents or
read and write message bodies (`OP_MSG`, `OP_QUERY`, `OP_REPLY`) to bytes;
only the message header has a binary form. It has no network server, no
client, no storage and no command-line program.

## Tests

```
pip install wiredoc[test]
pytest
```