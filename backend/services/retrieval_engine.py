"""Retrieval engine: lexical scoring, ranked search and chunk lookup."""
import logging
from typing import List

from config import SEARCH_DEFAULT_LIMIT, PREVIEW_CHARS, CHUNK_DEFAULT_MAX_CHARS
from models.api import SearchResponse, SearchResult
from models.chunk import Chunk, ScoredChunk
from services.chunk_index import ChunkIndex

logger = logging.getLogger(__name__)

ELLIPSIS = "…"
PHRASE_WEIGHT = 1.0
TOKEN_WEIGHT = 0.25
MIN_TOKEN_LENGTH = 2


def score_chunk(query: str, chunk: Chunk) -> float:
    """
    Score how well a chunk matches a free-text query.

    - +1 for each non-overlapping occurrence of the whole query
      (only for queries longer than one character)
    - +0.25 for each query word of 2+ characters present at least once

    Words that are part of a matched phrase still earn their own bonus.

    Args:
        query: Raw query text
        chunk: Chunk to score (title and body are both searched)

    Returns:
        Non-negative score; 0 means no match
    """
    q = query.lower()
    hay = (chunk.title + "\n" + chunk.text).lower()

    score = 0.0
    if len(q) > 1:
        score += hay.count(q) * PHRASE_WEIGHT

    for token in q.split():
        if len(token) < MIN_TOKEN_LENGTH:
            continue
        if token in hay:
            score += TOKEN_WEIGHT

    return score


def clip(text: str, max_chars: int) -> str:
    """Cut text to max_chars and mark the cut with an ellipsis."""
    if len(text) > max_chars:
        return text[:max_chars] + ELLIPSIS
    return text


def not_found_message(chunk_id: str) -> str:
    return f"No chunk found for id={chunk_id}"


class RetrievalEngine:
    """Answer search and fetch-by-id queries over a ChunkIndex."""

    def __init__(self, index: ChunkIndex, source: str):
        """
        Initialize the retrieval engine.

        Args:
            index: Immutable chunk index built at startup
            source: Descriptor of the document origin, echoed in search results
        """
        self.index = index
        self.source = source
        logger.info(f"Initialized RetrievalEngine over {len(index)} chunks from {source}")

    @property
    def total_chunks(self) -> int:
        return len(self.index)

    def retrieve(self, query: str, limit: int = SEARCH_DEFAULT_LIMIT) -> List[ScoredChunk]:
        """
        Rank chunks by lexical score.

        Chunks scoring 0 are dropped. Ties keep document order (sorted() is
        stable).

        Args:
            query: Non-empty query text
            limit: Maximum number of chunks to return

        Returns:
            At most `limit` scored chunks, best first
        """
        scored = [
            ScoredChunk(chunk=chunk, relevance_score=score_chunk(query, chunk))
            for chunk in self.index
        ]
        matches = [s for s in scored if s.relevance_score > 0]
        matches = sorted(matches, key=lambda s: s.relevance_score, reverse=True)

        logger.debug(f"Query {query[:100]!r} matched {len(matches)} chunks, returning up to {limit}")
        return matches[:limit]

    def search(self, query: str, limit: int = SEARCH_DEFAULT_LIMIT) -> SearchResponse:
        """Ranked search formatted with previews and corpus metadata."""
        results = [
            SearchResult(
                id=s.chunk.chunk_id,
                title=s.chunk.title,
                score=s.relevance_score,
                preview=clip(s.chunk.text, PREVIEW_CHARS)
            )
            for s in self.retrieve(query, limit)
        ]
        logger.info(f"Search {query[:100]!r} returned {len(results)} results")
        return SearchResponse(
            source=self.source,
            total_chunks=self.total_chunks,
            results=results
        )

    def get_chunk(self, chunk_id: str, max_chars: int = CHUNK_DEFAULT_MAX_CHARS) -> str:
        """
        Render one chunk as markdown, truncated to max_chars.

        Args:
            chunk_id: Chunk id such as "00042"
            max_chars: Character budget before the ellipsis is appended

        Returns:
            "# <title>\\n\\n<text>" (possibly clipped), or the not-found message
        """
        chunk = self.index.get(chunk_id)
        if chunk is None:
            logger.info(f"No chunk found for id={chunk_id}")
            return not_found_message(chunk_id)

        return clip(f"# {chunk.title}\n\n{chunk.text}", max_chars)

    def has_chunk(self, chunk_id: str) -> bool:
        return chunk_id in self.index
