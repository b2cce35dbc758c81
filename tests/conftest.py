from collections.abc import Iterator
from pathlib import Path

import pytest

from skillcli.util.log import Log

from .helpers import write_skill


@pytest.fixture(autouse=True)
def _log_teardown() -> Iterator[None]:
    yield
    Log.reset()


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    """A skills root holding the ``alpha`` and ``beta`` skills."""
    root = tmp_path / "skills"
    write_skill(root / "alpha", "---\nname: Alpha\ndescription: does X\n---\nBody text here.")
    write_skill(
        root / "beta",
        "---\nname: Beta\ndescription: does Y\n---\nBeta quick reference.\n",
        {
            "NOTES.md": "# Notes\nRemember the Foo flag.\n",
            "README.md": "# Beta\nFor humans.\n",
        },
    )
    return root
