"""Startup wiring: load the document once and build the retrieval engine."""
import logging
import time
from typing import Optional

from config import DOCS_SOURCE, DOC_FETCH_TIMEOUT
from services.chunk_index import ChunkIndex
from services.chunking_engine import ChunkingEngine
from services.document_loader import DocumentLoader
from services.retrieval_engine import RetrievalEngine

logger = logging.getLogger(__name__)


def build_retrieval_engine(
    source: Optional[str] = None,
    timeout: float = DOC_FETCH_TIMEOUT,
    loader: Optional[DocumentLoader] = None
) -> RetrievalEngine:
    """
    Load, chunk and index the documentation.

    Args:
        source: URL or path (defaults to DOCS_SOURCE)
        timeout: HTTP timeout for URL sources
        loader: Preconfigured loader, mainly for tests

    Returns:
        RetrievalEngine ready to serve queries

    Raises:
        DocumentLoadError: If the document cannot be loaded
    """
    start_time = time.time()
    loader = loader or DocumentLoader(source=source or DOCS_SOURCE, timeout=timeout)

    document = loader.load()
    chunks = ChunkingEngine().chunk_document(document.text)
    engine = RetrievalEngine(ChunkIndex(chunks), source=document.source)

    elapsed_ms = int((time.time() - start_time) * 1000)
    logger.info(f"Docs index ready: {engine.total_chunks} chunks in {elapsed_ms}ms")
    return engine
