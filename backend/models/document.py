"""Document data models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """Represents the raw documentation text and where it came from."""
    text: str
    source: str  # URL or local path, opaque to the retrieval core
