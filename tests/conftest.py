"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import Document


FRONT_MATTER_FIXTURE = '---\ntitle: lipsum ipsum\n---\n*"dipsum"*'
ATX_FIXTURE = '# Titulus\n*"tipsum"*'
SETEXT_FIXTURE = 'Titulus\n=======\n*"tipsum"*'
FRONT_MATTER_AND_HEADING_FIXTURE = '---\ntitle: lipsum ipsum\n---\n# Titulus\n*"tipsum"*'


@pytest.fixture
def front_matter_document():
    """Document with a front matter title."""
    return Document(path='fixture.md', contents=FRONT_MATTER_FIXTURE.encode('utf-8'))


@pytest.fixture
def atx_document():
    """Document whose body opens with an ATX h1."""
    return Document(path='fixture.md', contents=ATX_FIXTURE.encode('utf-8'))


@pytest.fixture
def setext_document():
    """Document whose body opens with a setext h1."""
    return Document(path='fixture.md', contents=SETEXT_FIXTURE.encode('utf-8'))


@pytest.fixture
def front_matter_and_heading_document():
    """Document with both a front matter title and an ATX h1."""
    return Document(path='fixture.md', contents=FRONT_MATTER_AND_HEADING_FIXTURE.encode('utf-8'))


@pytest.fixture
def blog_documents():
    """In-memory batch mirroring a small blog tree."""
    return [
        Document(
            path='blog/posts/oakland-activist.md',
            contents=b'---\ntitle: Oakland Activist\nauthor: jane\n---\nShe said "hi".\n'
        ),
        Document(
            path='blog/posts/other.md',
            contents=b'# Other Post\n\nBody text.\n'
        ),
        Document(
            path='about.md',
            contents=b'About\n=====\n\nWho we are.\n'
        ),
    ]


@pytest.fixture
def blog_tree(tmp_path, blog_documents):
    """Write the blog batch to disk and return its root directory."""
    root = tmp_path / "src"
    for document in blog_documents:
        target = root / document.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(document.contents)
    
    # Non-markdown files are ignored by the default pattern
    (root / "blog" / "notes.txt").write_text("not markdown", encoding="utf-8")
    return root
