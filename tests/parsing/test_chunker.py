"""
Tests for splitting LG file content into parser chunks.
"""

from mslg.parsing.chunker import split_into_chunks


class TestSplitIntoChunks:
    """Test chunk boundaries, dropped lines and line endings."""

    def test_empty_content(self):
        """Test that empty or whitespace-only content yields no chunks."""
        assert split_into_chunks("") == []
        assert split_into_chunks("  \n\n\t") == []

    def test_one_chunk_per_marker(self):
        """Test that each marker line starts a new chunk."""
        content = (
            "# Greeting\n"
            "- Hi\n"
            "- Hello\n"
            "$ userName : string\n"
            "[Common](./common.lg)\n"
            "# Farewell\n"
            "- Bye\n"
        )

        assert split_into_chunks(content) == [
            "# Greeting\n- Hi\n- Hello",
            "$ userName : string",
            "[Common](./common.lg)",
            "# Farewell\n- Bye",
        ]

    def test_comments_and_blank_lines_dropped(self):
        """Test that comment and blank lines never reach the parser."""
        content = "> File header\n\n# Greeting\n> inline note\n\n- Hi\n"

        assert split_into_chunks(content) == ["# Greeting\n- Hi"]

    def test_body_indentation_kept(self):
        """Test that body lines keep leading whitespace but lose trailing."""
        content = "# Greeting\n- IF: {x > 1}\n    - Many   \n- ELSE:\n    - One"

        assert split_into_chunks(content) == [
            "# Greeting\n- IF: {x > 1}\n    - Many\n- ELSE:\n    - One"
        ]

    def test_indented_marker_starts_chunk(self):
        """Test that a marker line is recognized after stripping."""
        content = "  # Greeting\n- Hi"

        assert split_into_chunks(content) == ["# Greeting\n- Hi"]

    def test_crlf_and_cr_line_endings(self):
        """Test that Windows and old Mac line endings are split correctly."""
        content = "# Greeting\r\n- Hi\r\n# Farewell\r- Bye\r"

        assert split_into_chunks(content) == ["# Greeting\n- Hi", "# Farewell\n- Bye"]

    def test_leading_stray_lines_form_own_chunk(self):
        """Test that lines before any marker are kept together as one chunk."""
        content = "stray text\nmore text\n# Greeting\n- Hi"

        assert split_into_chunks(content) == [
            "stray text\nmore text",
            "# Greeting\n- Hi",
        ]
