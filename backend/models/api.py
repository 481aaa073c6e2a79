"""Request and response models for the tool endpoints."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from config import (
    SEARCH_DEFAULT_LIMIT,
    SEARCH_MAX_LIMIT,
    CHUNK_DEFAULT_MAX_CHARS,
    CHUNK_MIN_MAX_CHARS,
    CHUNK_MAX_MAX_CHARS,
)


class SearchRequest(BaseModel):
    """Input for the docs search tool."""
    query: str = Field(..., min_length=1, description="Free-text search query")
    limit: int = Field(
        SEARCH_DEFAULT_LIMIT,
        ge=1,
        le=SEARCH_MAX_LIMIT,
        description="Maximum number of results to return"
    )


class ChunkRequest(BaseModel):
    """Input for the chunk lookup tool."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Chunk id, e.g. '00042'")
    max_chars: int = Field(
        CHUNK_DEFAULT_MAX_CHARS,
        ge=CHUNK_MIN_MAX_CHARS,
        le=CHUNK_MAX_MAX_CHARS,
        alias="maxChars",
        description="Maximum characters of chunk text to return"
    )


class SearchResult(BaseModel):
    """One ranked search hit."""
    id: str
    title: str
    score: float
    preview: str


class SearchResponse(BaseModel):
    """Ranked search results plus corpus metadata."""
    model_config = ConfigDict(populate_by_name=True)

    source: str
    total_chunks: int = Field(..., alias="totalChunks")
    results: List[SearchResult]


class ChunkResponse(BaseModel):
    """Rendered chunk text, or the not-found message."""
    id: str
    found: bool
    text: str
