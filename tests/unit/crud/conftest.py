"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import MemoryRepo


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty store returning shared references."""
    return MemoryRepo()


@pytest.fixture(name="seeded")
def seeded_fixture(repo):
    """Store holding a titled report without author and an authored note."""
    repo.save(Document(id="a", title="Report2023", content="annual figures",
                       created=datetime(2023, 1, 10, tzinfo=timezone.utc)))
    repo.save(Document(id="b", title="Other", content="meeting notes",
                       author=Author(id="u1", name="Ann"),
                       created=datetime(2023, 3, 1, tzinfo=timezone.utc)))
    return repo
