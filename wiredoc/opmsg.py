"""OP_MSG message sections and the command document they describe."""

from __future__ import annotations

from dataclasses import dataclass, field

from wiredoc.flags import OpMsgFlags
from wiredoc.types import Array, Document


@dataclass
class OpMsgSection:
    """One section of an OP_MSG.

    Kind 0 holds a single body document. Kind 1 holds a sequence of
    documents under an identifier.
    """

    kind: int = 0
    identifier: str = ""
    documents: list[Document] = field(default_factory=list)


class OpMsg:
    """Extensible message made of a body section and document sequences."""

    def __init__(
        self,
        *sections: OpMsgSection,
        flag_bits: OpMsgFlags | int = 0,
        checksum: int = 0,
    ) -> None:
        self.flag_bits = OpMsgFlags(flag_bits)
        self.checksum = checksum
        self._sections: list[OpMsgSection] = []
        if sections:
            self.set_sections(*sections)

    @property
    def sections(self) -> tuple[OpMsgSection, ...]:
        """The message sections in order."""
        return tuple(self._sections)

    def set_sections(self, *sections: OpMsgSection) -> None:
        """Replace the sections; raise ValueError if they do not form a document."""
        self._sections = list(sections)
        self.document()

    def document(self) -> Document | None:
        """Combine the sections into one document.

        The body document is copied shallowly; each kind 1 section is added
        to the copy as an array under its identifier. Returns None when the
        message has no sections.
        """
        doc: Document | None = None

        for section in self._sections:
            if section.kind == 0:
                count = len(section.documents)
                if count != 1:
                    raise ValueError(f"{count} documents in kind 0 section")
                if doc is not None:
                    raise ValueError(f"doc is not empty already: {doc!r}")

                body = section.documents[0]
                doc = Document()
                for key, value in body.as_dict().items():
                    doc.set(key, value)

            elif section.kind == 1:
                if not section.identifier:
                    raise ValueError("empty section identifier")
                if doc is None:
                    raise ValueError("doc is empty")
                if section.identifier in doc:
                    raise ValueError(f"doc already has {section.identifier!r} key")

                doc.set(section.identifier, Array(*section.documents))

            else:
                raise ValueError(f"unknown kind {section.kind}")

        return doc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpMsg):
            return NotImplemented
        return (
            self.flag_bits == other.flag_bits
            and self.checksum == other.checksum
            and self._sections == other._sections
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"OpMsg(flag_bits={self.flag_bits!s}, checksum={self.checksum}, "
            f"sections={self._sections!r})"
        )