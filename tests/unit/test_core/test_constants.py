"""
Unit tests for core.constants and core.exceptions modules.
"""
import pytest
from core.constants import (
    ATX_H1_PATTERN,
    CONTENT_KEY,
    DEFAULT_OUTPUT_FILENAME,
    SETEXT_H1_UNDERLINE_PATTERN,
    TITLE_KEY
)
from core.exceptions import (
    FrontMatterParseError,
    MarkdownJSONError,
    InvalidPathError,
    PathCollisionError,
    SerializationError,
    RenderError
)


class TestRecordKeys:
    """Tests for record key constants."""
    
    def test_keys_distinct(self):
        """Test title and content keys differ."""
        assert TITLE_KEY == 'title'
        assert CONTENT_KEY != TITLE_KEY
    
    def test_default_output_filename(self):
        """Test consolidated output default."""
        assert DEFAULT_OUTPUT_FILENAME == 'content.json'


class TestHeadingPatterns:
    """Tests for heading regexes."""
    
    def test_atx_h1_matches(self):
        """Test a level-1 heading matches."""
        match = ATX_H1_PATTERN.match('# Titulus')
        
        assert match
        assert match.group(1) == 'Titulus'
    
    def test_atx_h2_does_not_match(self):
        """Test level-2 headings are rejected."""
        assert ATX_H1_PATTERN.match('## Subtitle') is None
    
    def test_atx_requires_space(self):
        """Test '#Title' is not a heading."""
        assert ATX_H1_PATTERN.match('#Title') is None
    
    def test_setext_underline(self):
        """Test '=' underline detection."""
        assert SETEXT_H1_UNDERLINE_PATTERN.match('=======')
        assert SETEXT_H1_UNDERLINE_PATTERN.match('=')
        assert SETEXT_H1_UNDERLINE_PATTERN.match('--- ') is None
        assert SETEXT_H1_UNDERLINE_PATTERN.match('== =') is None


class TestExceptions:
    """Tests for the error hierarchy."""
    
    @pytest.mark.parametrize('cls', [
        FrontMatterParseError, RenderError, PathCollisionError, SerializationError, InvalidPathError
    ])
    def test_subclass_of_base(self, cls):
        """Test every error kind derives from MarkdownJSONError."""
        assert issubclass(cls, MarkdownJSONError)
    
    def test_path_in_message(self):
        """Test the path prefixes the message."""
        error = RenderError('bad input', 'blog/a.md')
        
        assert error.path == 'blog/a.md'
        assert str(error) == 'blog/a.md: bad input'
    
    def test_without_path(self):
        """Test message is unchanged without a path."""
        error = FrontMatterParseError('bad yaml')
        
        assert error.path is None
        assert str(error) == 'bad yaml'
