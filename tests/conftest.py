"""
Pytest configuration and fixtures for scopegen-outline tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing scopegen_outline
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


# Configure anyio to only use asyncio (not trio)
@pytest.fixture
def anyio_backend():
    return "asyncio"


SAMPLE_POST = """---
title: Writing Better Scopes
excerpt: How to write a scope of work clients sign.
readTime: 6 min read
category: Guides
tags: [proposals, scopes]
---
## Getting Started

Some body text with **bold** and a [link](https://scopegen.app).

### Installation Steps

- First step
- **Second** step

---

## FAQ's

More text.
"""


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    """Create a posts directory with one sample post."""
    directory = tmp_path / "posts"
    directory.mkdir()
    (directory / "Writing_Better Scopes.md").write_text(SAMPLE_POST, encoding="utf-8")
    return directory
