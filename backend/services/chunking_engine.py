"""Chunking engine that splits a markdown-ish document at its headings."""
import logging
import re
from typing import List

from models.chunk import Chunk

logger = logging.getLogger(__name__)

# "# Title" .. "###### Title"; a bare "#" is body text
HEADING_PATTERN = re.compile(r"^(#{1,6})\s+([^\r\n]+)\s*$")
LINE_BREAK_PATTERN = re.compile(r"\r?\n")

INTRO_TITLE = "Intro"
UNTITLED_TITLE = "Untitled"
ID_WIDTH = 5


class ChunkingEngine:
    """Segments a document into heading-delimited chunks with stable ids."""

    def chunk_document(self, text: str) -> List[Chunk]:
        """
        Split a document into chunks in a single pass over its lines.

        Every heading line starts a new chunk; the lines up to the next
        heading become its body. Content before the first heading is titled
        "Intro". Sections whose body is empty after trimming are dropped
        without consuming an id, so ids can have gaps.

        Args:
            text: Full raw document text

        Returns:
            Ordered list of chunks with ids "00000", "00001", ...
        """
        chunks: List[Chunk] = []
        current_title = INTRO_TITLE
        current_lines: List[str] = []

        def flush() -> None:
            nonlocal current_lines
            body = "\n".join(current_lines).strip()
            if not body:
                return
            chunk_id = str(len(chunks)).zfill(ID_WIDTH)
            chunks.append(Chunk(
                chunk_id=chunk_id,
                title=current_title.strip() or UNTITLED_TITLE,
                text=body
            ))
            current_lines = []

        for line in LINE_BREAK_PATTERN.split(text):
            heading = HEADING_PATTERN.match(line)
            if heading:
                flush()
                current_title = heading.group(2)
                continue
            current_lines.append(line)
        flush()

        logger.info(f"Created {len(chunks)} chunks from {len(text)} characters")
        return chunks


def chunk_markdown(text: str) -> List[Chunk]:
    """Chunk a document with a default ChunkingEngine."""
    return ChunkingEngine().chunk_document(text)
