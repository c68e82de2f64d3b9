"""Pytest fixtures for mdmodels tests."""

from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


SIMPLE_MODEL = """\
# Library

### Book (schema:Book)

- __title__
  - Type: string
  - Description: Title of the book
- isbn
  - Type: string
  - Term: schema:isbn
- authors
  - Type: Author[]

### Author

- __name__
  - Type: string
- genre
  - Type: Genre

### Genre

```python
FICTION = "fiction"
SCIENCE = "science"
```
"""


@pytest.fixture
def data_dir() -> Path:
    """Directory with sample documents."""
    return DATA_DIR


@pytest.fixture
def model_path(data_dir: Path) -> Path:
    """Path to the sample model with front matter."""
    return data_dir / "model.md"


@pytest.fixture
def simple_markdown() -> str:
    """A small valid model without front matter."""
    return SIMPLE_MODEL


@pytest.fixture
def simple_model_file(tmp_path: Path, simple_markdown: str) -> Path:
    """Write the small valid model to a temporary file."""
    path = tmp_path / "library.md"
    path.write_text(simple_markdown)
    return path


@pytest.fixture
def invalid_model_file(tmp_path: Path) -> Path:
    """Write a model that references an undeclared type."""
    path = tmp_path / "invalid.md"
    path.write_text(
        "# Broken\n"
        "\n"
        "### Shelf\n"
        "\n"
        "- books\n"
        "  - Type: Book[]\n"
    )
    return path
