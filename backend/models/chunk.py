"""Chunk data models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """Represents one heading-delimited section of the document."""
    chunk_id: str  # Format: 5-digit zero-padded, e.g. "00042"
    title: str
    text: str


@dataclass(frozen=True)
class ScoredChunk:
    """Chunk with lexical relevance score from search."""
    chunk: Chunk
    relevance_score: float  # > 0 for every returned match
