"""Unit tests for ChunkingEngine."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from models.chunk import Chunk
from services.chunking_engine import ChunkingEngine, chunk_markdown, HEADING_PATTERN


SAMPLE_DOC = """Welcome to XMTP.

# Getting Started

Install the SDK.

## Send Messages
To send a message, call send.

### Groups
Create a group first.
"""


class TestChunkingEngine:
    """Test suite for ChunkingEngine."""

    @pytest.fixture
    def engine(self):
        return ChunkingEngine()

    def test_sample_document(self, engine):
        """Test chunk ids, titles and trimmed bodies of a typical document."""
        chunks = engine.chunk_document(SAMPLE_DOC)

        assert chunks == [
            Chunk(chunk_id="00000", title="Intro", text="Welcome to XMTP."),
            Chunk(chunk_id="00001", title="Getting Started", text="Install the SDK."),
            Chunk(chunk_id="00002", title="Send Messages", text="To send a message, call send."),
            Chunk(chunk_id="00003", title="Groups", text="Create a group first."),
        ]

    def test_empty_document(self, engine):
        """Test that empty or blank input yields no chunks."""
        assert engine.chunk_document("") == []
        assert engine.chunk_document("\n\n   \n") == []

    def test_no_headings_single_intro_chunk(self, engine):
        """Test that a document without headings is one Intro chunk."""
        chunks = engine.chunk_document("line one\nline two\n")

        assert len(chunks) == 1
        assert chunks[0].title == "Intro"
        assert chunks[0].text == "line one\nline two"

    def test_consecutive_headings_skip_empty_section(self, engine):
        """Test that a heading with no body is dropped without an id."""
        chunks = engine.chunk_document("intro text\n# A\n## B\nbody of b")

        assert [c.title for c in chunks] == ["Intro", "B"]
        assert [c.chunk_id for c in chunks] == ["00000", "00001"]

    def test_ids_only_count_emitted_chunks(self, engine):
        """Test that empty sections do not consume ids."""
        chunks = engine.chunk_document("# A\n\n# B\nb\n# C\n   \n# D\nd")

        assert [(c.chunk_id, c.title) for c in chunks] == [("00000", "B"), ("00001", "D")]

    def test_heading_title_is_trimmed(self, engine):
        """Test that trailing whitespace in a heading is not part of the title."""
        chunks = engine.chunk_document("##   Spaced Title   \nbody")

        assert chunks[0].title == "Spaced Title"

    def test_bare_hash_is_body(self, engine):
        """Test that '#' without text and '#tag' are body lines."""
        chunks = engine.chunk_document("# Title\n#\n#hashtag\ntext")

        assert len(chunks) == 1
        assert chunks[0].title == "Title"
        assert chunks[0].text == "#\n#hashtag\ntext"

    def test_seven_hashes_is_body(self, engine):
        """Test that headings deeper than six levels are body lines."""
        chunks = engine.chunk_document("####### Too deep\ntext")

        assert chunks[0].title == "Intro"
        assert chunks[0].text == "####### Too deep\ntext"

    def test_inner_blank_lines_preserved(self, engine):
        """Test that only leading and trailing blank lines are stripped."""
        chunks = engine.chunk_document("# T\n\n\nfirst\n\nsecond\n\n\n")

        assert chunks[0].text == "first\n\nsecond"

    def test_crlf_line_endings(self, engine):
        """Test that Windows line endings split like Unix ones."""
        chunks = engine.chunk_document("intro\r\n# Heading\r\nbody\r\n")

        assert [(c.title, c.text) for c in chunks] == [("Intro", "intro"), ("Heading", "body")]

    def test_ids_strictly_increasing_and_non_empty(self, engine):
        """Test id ordering and non-empty bodies on a larger document."""
        doc = "\n".join(f"## Section {i}\n{'body' if i % 3 else ''}" for i in range(30))
        chunks = engine.chunk_document(doc)

        ids = [int(c.chunk_id) for c in chunks]
        assert ids == sorted(set(ids))
        assert all(len(c.chunk_id) == 5 for c in chunks)
        assert all(c.text for c in chunks)

    def test_idempotent(self, engine):
        """Test that chunking is a pure function of its input."""
        assert engine.chunk_document(SAMPLE_DOC) == engine.chunk_document(SAMPLE_DOC)
        assert chunk_markdown(SAMPLE_DOC) == engine.chunk_document(SAMPLE_DOC)


@pytest.mark.parametrize("line,is_heading", [
    ("# Title", True),
    ("###### Six", True),
    ("#\tTabbed", True),
    ("#", False),
    ("#   ", True),
    ("# ", False),
    ("# Title\rmore", False),
    ("# Title\r", True),
    ("#Title", False),
    ("####### Seven", False),
    (" # Indented", False),
])
def test_heading_pattern(line, is_heading):
    """Test which lines are recognized as headings."""
    assert bool(HEADING_PATTERN.match(line)) is is_heading


def test_whitespace_heading_is_untitled():
    """Test that a heading made only of whitespace gets the Untitled title."""
    chunks = chunk_markdown("#   \nbody")

    assert chunks == [Chunk(chunk_id="00000", title="Untitled", text="body")]


def test_lone_carriage_return_line_is_body():
    """Test that a heading line broken by a bare carriage return stays in the body."""
    chunks = chunk_markdown("# Title\rmore\nbody")

    assert chunks == [Chunk(chunk_id="00000", title="Intro", text="# Title\rmore\nbody")]
