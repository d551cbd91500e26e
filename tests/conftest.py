from pathlib import Path

import pytest

from readme_generator import config, repo

SMALL_REPO = {
    "README.md": "# My Project\n\nA sample project for testing.\n",
    "package.json": '{"name": "my-project", "dependencies": {"express": "^4.0.0"}}\n',
    "src/index.js": "const express = require('express');\n",
    "src/lib/util.js": "module.exports = {};\n",
    "tests/test_index.js": "test('ok', () => {});\n",
}

REPO_WITH_JUNK = {
    **SMALL_REPO,
    ".git/config": "[core]\n",
    ".git/objects/ab/cdef": "blob",
    "node_modules/lodash/index.js": "module.exports = {};\n",
    "node_modules/lodash/package.json": '{"name": "lodash"}\n',
    "__pycache__/cache.pyc": "junk",
    ".venv/lib/site.py": "pass\n",
    "Dockerfile": "FROM node:20\n",
}


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_repo(tmp_path):
    def _make(files: dict[str, str | bytes]) -> Path:
        root = tmp_path / "repo"
        root.mkdir(exist_ok=True)
        return write_tree(root, files)

    return _make


@pytest.fixture
def context_config():
    return config.ContextConfig()


@pytest.fixture
def small_repo(make_repo):
    return make_repo(SMALL_REPO)


@pytest.fixture
def junk_repo(make_repo):
    return make_repo(REPO_WITH_JUNK)


@pytest.fixture
def clone_calls(monkeypatch):
    """Replace the git clone with one that writes SMALL_REPO into the target."""
    calls = []

    def fake_clone_from(url, to_path, **kwargs):
        calls.append(url)
        write_tree(Path(to_path), SMALL_REPO)

    monkeypatch.setattr(repo.Repo, "clone_from", fake_clone_from)
    return calls
