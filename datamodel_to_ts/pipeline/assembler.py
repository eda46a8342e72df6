"""
Document assembler.

Joins the header, imports, enum declarations, model declarations and custom
type definitions into the final document.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..utils import line_comment


@dataclass
class DocumentParts:
    """Fragments making up a document, each already in its final order."""

    header_comment: str = ""
    imports: list[str] = field(default_factory=list)
    enums: list[str] = field(default_factory=list)
    models: list[str] = field(default_factory=list)
    type_definitions: list[str] = field(default_factory=list)


class DocumentAssembler:
    """Assembles document fragments in a fixed order.

    Blocks are separated by exactly one blank line and the document ends with
    a single newline. Import statements form one block.
    """

    def assemble(self, parts: DocumentParts) -> str:
        blocks = []
        if parts.header_comment:
            blocks.append(line_comment(parts.header_comment))
        if parts.imports:
            blocks.append("\n".join(parts.imports))
        blocks.extend(parts.enums)
        blocks.extend(parts.models)
        blocks.extend(parts.type_definitions)

        return "\n\n".join(blocks) + "\n"
