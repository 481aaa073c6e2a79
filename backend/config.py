"""Configuration management for the XMTP docs search server."""
import os
import logging
import sys
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Document source (URL or local path)
DEFAULT_DOC_URL = "https://docs.xmtp.org/llms/llms-full.txt"
DOCS_SOURCE = os.getenv("DOCS_SOURCE", DEFAULT_DOC_URL)
DOC_FETCH_TIMEOUT = float(os.getenv("DOC_FETCH_TIMEOUT", "30"))

# Server identity
SERVER_NAME = os.getenv("SERVER_NAME", "xmtp-docs-mcp")
SERVER_VERSION = os.getenv("SERVER_VERSION", "1.0.0")

# HTTP transport
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"

# Tool names
SEARCH_TOOL_NAME = "search_xmtp_docs"
CHUNK_TOOL_NAME = "get_xmtp_doc_chunk"

# Search Configuration
SEARCH_DEFAULT_LIMIT = 5
SEARCH_MAX_LIMIT = 20
PREVIEW_CHARS = 400

# Chunk fetch Configuration
CHUNK_DEFAULT_MAX_CHARS = 6000
CHUNK_MIN_MAX_CHARS = 200
CHUNK_MAX_MAX_CHARS = 20000

# Logging Configuration (stdout is reserved for protocol responses)
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr
)
