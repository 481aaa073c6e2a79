"""MCP stdio server exposing the docs search tools to AI assistants."""
import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from config import (
    LOG_LEVEL,
    LOG_FORMAT,
    SERVER_NAME,
    SEARCH_TOOL_NAME,
    CHUNK_TOOL_NAME,
    SEARCH_DEFAULT_LIMIT,
    SEARCH_MAX_LIMIT,
    CHUNK_DEFAULT_MAX_CHARS,
    CHUNK_MIN_MAX_CHARS,
    CHUNK_MAX_MAX_CHARS,
)
from logger import setup_logging
from services.retrieval_engine import RetrievalEngine

logger = logging.getLogger(__name__)

SEARCH_DESCRIPTION = (
    "Search the XMTP documentation by keyword. Returns ranked sections with "
    "their ids and a short preview; pass an id to "
    f"{CHUNK_TOOL_NAME} to read the full section."
)
CHUNK_DESCRIPTION = "Read one section of the XMTP documentation by id."


def render_search(engine: RetrievalEngine, query: str, limit: int) -> str:
    """Search results as the pretty-printed JSON text returned to MCP clients."""
    response = engine.search(query, limit)
    return response.model_dump_json(by_alias=True, indent=2)


def render_chunk(engine: RetrievalEngine, chunk_id: str, max_chars: int) -> str:
    return engine.get_chunk(chunk_id, max_chars)


def create_server(engine: RetrievalEngine) -> FastMCP:
    """
    Build an MCP server whose tools query the given engine.

    Tool arguments are validated by FastMCP against the pydantic Field
    constraints below before any handler runs.

    Args:
        engine: Retrieval engine built at startup

    Returns:
        FastMCP server with both tools registered
    """
    server = FastMCP(SERVER_NAME)

    @server.tool(name=SEARCH_TOOL_NAME, description=SEARCH_DESCRIPTION)
    def search_xmtp_docs(
        query: Annotated[str, Field(min_length=1, description="Search query")],
        limit: Annotated[
            int,
            Field(ge=1, le=SEARCH_MAX_LIMIT, description="Maximum number of results")
        ] = SEARCH_DEFAULT_LIMIT,
    ) -> str:
        logger.debug(f"{SEARCH_TOOL_NAME} called with limit={limit}")
        return render_search(engine, query, limit)

    # Argument names are part of the tool schema, hence maxChars
    @server.tool(name=CHUNK_TOOL_NAME, description=CHUNK_DESCRIPTION)
    def get_xmtp_doc_chunk(
        id: Annotated[str, Field(min_length=1, description="Chunk id from search results")],
        maxChars: Annotated[
            int,
            Field(
                ge=CHUNK_MIN_MAX_CHARS,
                le=CHUNK_MAX_MAX_CHARS,
                description="Maximum characters to return"
            )
        ] = CHUNK_DEFAULT_MAX_CHARS,
    ) -> str:
        logger.debug(f"{CHUNK_TOOL_NAME} called for id={id}")
        return render_chunk(engine, id, maxChars)

    logger.info(f"Registered tools {SEARCH_TOOL_NAME}, {CHUNK_TOOL_NAME} on {SERVER_NAME}")
    return server


def serve_stdio(engine: RetrievalEngine) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    server = create_server(engine)
    # FastMCP installs its own root handler
    setup_logging(LOG_LEVEL, LOG_FORMAT)
    logger.info(f"Starting {SERVER_NAME} on stdio")
    server.run(transport="stdio")
