import os

import pytest

from crispymd.cache.memory import MemoryStore
from crispymd.content.renderer import MarkdownRenderer
from crispymd.parser.markdown_it import ExtraParser


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files, env vars and the default DB out of tests."""
    for key in list(os.environ):
        if key.startswith("CRISPYMD_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(
        "crispymd.config.hierarchy._GLOBAL_CONFIG_PATH", tmp_path / "global" / "config.yaml"
    )
    monkeypatch.setattr("crispymd.cache.disk._DEFAULT_DB_PATH", tmp_path / "default" / "cache.db")
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)


@pytest.fixture
def parser():
    return ExtraParser()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def renderer(parser, store):
    return MarkdownRenderer(parser, store=store)


@pytest.fixture
def complex_markdown():
    return """# Project Notes

Some **bold** and *italic* text with a [link](https://example.com).

## Code

```python
def hello():
    return "world"
```

> A quoted line.

- Item 1
- Item 2
  - Nested item

| Name | Value |
| ---- | ----- |
| a    | 1     |
"""
