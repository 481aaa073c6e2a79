"""Document loading service for the documentation text."""
import logging
from pathlib import Path
from typing import Optional

import httpx

from config import DOCS_SOURCE, DOC_FETCH_TIMEOUT
from models.document import Document

logger = logging.getLogger(__name__)


class DocumentLoadError(RuntimeError):
    """Raised when the documentation text cannot be obtained."""

    def __init__(self, source: str, message: str, status_code: Optional[int] = None):
        self.source = source
        self.status_code = status_code
        super().__init__(message)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class DocumentLoader:
    """Loads the documentation text from a URL or a local file."""

    def __init__(self, source: str = DOCS_SOURCE, timeout: float = DOC_FETCH_TIMEOUT):
        """
        Initialize DocumentLoader.

        Args:
            source: http(s) URL or filesystem path of the document
            timeout: HTTP request timeout in seconds
        """
        self.source = source
        self.timeout = timeout

    def load(self) -> Document:
        """
        Load the document once. No retries.

        Returns:
            Document with the raw text and its source

        Raises:
            DocumentLoadError: On network failure, non-success status or missing file
        """
        if is_url(self.source):
            text = self._fetch_url(self.source)
        else:
            text = self._read_file(self.source)

        logger.info(f"Loaded {len(text)} characters from {self.source}")
        return Document(text=text, source=self.source)

    def _fetch_url(self, url: str) -> str:
        logger.info(f"Fetching docs from {url}")
        try:
            with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                response = client.get(url)
        except httpx.TimeoutException as e:
            raise DocumentLoadError(url, f"Timed out fetching docs from {url} after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise DocumentLoadError(url, f"Failed to fetch docs from {url}: {e}") from e

        if not response.is_success:
            raise DocumentLoadError(
                url,
                f"Failed to fetch docs from {url} ({response.status_code})",
                status_code=response.status_code
            )

        return response.text

    def _read_file(self, path: str) -> str:
        file_path = Path(path).expanduser()
        logger.info(f"Reading docs from {file_path}")
        if not file_path.is_file():
            raise DocumentLoadError(path, f"Docs file not found: {file_path}")

        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(path, f"Failed to read docs from {file_path}: {e}") from e
