"""Read-only index over the document's chunks."""
import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Tuple

from models.chunk import Chunk

logger = logging.getLogger(__name__)


class ChunkIndex:
    """Immutable id -> chunk lookup that preserves document order."""

    def __init__(self, chunks: Iterable[Chunk]):
        self._chunks: Tuple[Chunk, ...] = tuple(chunks)
        self._by_id = MappingProxyType({chunk.chunk_id: chunk for chunk in self._chunks})
        logger.info(f"Indexed {len(self._chunks)} chunks")

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        """All chunks in document order."""
        return self._chunks

    def get(self, chunk_id: str) -> Optional[Chunk]:
        return self._by_id.get(chunk_id)

    def __contains__(self, chunk_id: object) -> bool:
        return chunk_id in self._by_id

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)
