"""Data models for the XMTP docs search server."""
from .document import Document
from .chunk import Chunk, ScoredChunk
from .api import SearchRequest, ChunkRequest, SearchResult, SearchResponse, ChunkResponse

__all__ = [
    "Document",
    "Chunk",
    "ScoredChunk",
    "SearchRequest",
    "ChunkRequest",
    "SearchResult",
    "SearchResponse",
    "ChunkResponse",
]
