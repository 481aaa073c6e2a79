"""HTTP entry point exposing the docs search tools."""
import logging
from fastapi import FastAPI, HTTPException

from config import HOST, PORT, SERVER_NAME, SERVER_VERSION, SEARCH_TOOL_NAME, CHUNK_TOOL_NAME
from models.api import SearchRequest, SearchResponse, ChunkRequest, ChunkResponse
from services.retrieval_engine import RetrievalEngine
from services.index_builder import build_retrieval_engine

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=SERVER_NAME,
    description="Keyword search and section lookup over the XMTP documentation",
    version=SERVER_VERSION
)

# Built once on startup, read-only afterwards
retrieval_engine: RetrievalEngine = None


@app.on_event("startup")
async def startup_event():
    """Load and index the documentation on startup."""
    global retrieval_engine

    if retrieval_engine is not None:
        logger.info("Retrieval engine already initialized")
        return

    logger.info("Initializing docs index...")
    try:
        retrieval_engine = build_retrieval_engine()
    except Exception as e:
        logger.error(f"Failed to initialize docs index: {e}", exc_info=True)
        raise


def _get_engine() -> RetrievalEngine:
    if retrieval_engine is None:
        raise HTTPException(status_code=503, detail="Docs index is not ready")
    return retrieval_engine


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": SERVER_NAME}


@app.get("/health")
async def health():
    """Detailed health check."""
    engine = _get_engine()
    return {
        "status": "healthy",
        "service": SERVER_NAME,
        "version": SERVER_VERSION,
        "source": engine.source,
        "total_chunks": engine.total_chunks
    }


@app.post(f"/tools/{SEARCH_TOOL_NAME}", response_model=SearchResponse)
def search_endpoint(request: SearchRequest) -> SearchResponse:
    """
    Search the documentation and return ranked chunks with previews.

    Args:
        request: SearchRequest with query and optional limit (1-20)

    Returns:
        SearchResponse with source, totalChunks and results

    Raises:
        HTTPException: 503 before the index is ready, 500 on unexpected errors
    """
    engine = _get_engine()
    try:
        return engine.search(request.query, request.limit)
    except Exception as e:
        logger.error(f"Unexpected error searching docs: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )


@app.post(f"/tools/{CHUNK_TOOL_NAME}", response_model=ChunkResponse)
def get_chunk_endpoint(request: ChunkRequest) -> ChunkResponse:
    """
    Return the full text of one chunk, clipped to maxChars.

    Unknown ids are not an error: the response has found=false and the
    not-found message as text.
    """
    engine = _get_engine()
    try:
        return ChunkResponse(
            id=request.id,
            found=engine.has_chunk(request.id),
            text=engine.get_chunk(request.id, request.max_chars)
        )
    except Exception as e:
        logger.error(f"Unexpected error fetching chunk {request.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting {SERVER_NAME} HTTP API on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
