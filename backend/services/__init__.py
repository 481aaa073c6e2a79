"""Services for the XMTP docs search server."""
from .document_loader import DocumentLoader, DocumentLoadError
from .chunking_engine import ChunkingEngine, chunk_markdown
from .chunk_index import ChunkIndex
from .retrieval_engine import RetrievalEngine, score_chunk
from .index_builder import build_retrieval_engine

__all__ = ['DocumentLoader', 'DocumentLoadError', 'ChunkingEngine', 'chunk_markdown', 'ChunkIndex', 'RetrievalEngine', 'score_chunk', 'build_retrieval_engine']
