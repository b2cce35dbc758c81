from __future__ import annotations

from importlib.metadata import PackageNotFoundError

import pytest

from skillcli.core import version as version_module
from skillcli.core.version import DEFAULT_VERSION, resolve_version


def test_resolve_version_reads_metadata(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(version_module, "version", lambda name: "1.2.3")

    assert resolve_version() == "1.2.3"


def test_resolve_version_missing_distribution() -> None:
    assert resolve_version("skill-cli-not-installed-anywhere") == DEFAULT_VERSION


@pytest.mark.parametrize("error", [PackageNotFoundError("skill-cli"), ValueError("bad metadata"), OSError("io")])
def test_resolve_version_never_raises(monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
    def broken(name: str) -> str:
        raise error

    monkeypatch.setattr(version_module, "version", broken)

    assert resolve_version() == DEFAULT_VERSION
