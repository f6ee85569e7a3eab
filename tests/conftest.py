"""Root test configuration: shared data file fixture and env isolation"""

import pytest


DATA_YAML = """\
documents:
  - id: a
    title: Report2023
    content: annual figures
    created: 2023-01-10T00:00:00Z
  - id: b
    title: Other
    content: meeting notes
    author: {id: u1, name: Ann}
    created: 2023-03-01T00:00:00Z
  - title: report draft
    content: Annual figures, lower case title
"""


@pytest.fixture(autouse=True)
def isolate_env(tmp_path, monkeypatch):
    """Run each test in an empty directory with no DOCSTORE_* env vars set."""
    monkeypatch.chdir(tmp_path)
    for name in ("APP_NAME", "LOG_LEVEL", "COPY_ON_READ", "DATA_FILE", "OUTPUT_INDENT"):
        monkeypatch.delenv(f"DOCSTORE_{name}", raising=False)


@pytest.fixture(name="data_file")
def data_file_fixture(tmp_path):
    """YAML data file with two identified documents and one without id/created."""
    path = tmp_path / "docs.yaml"
    path.write_text(DATA_YAML)
    return path
