"""Shared test helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional


def write_skill(
    directory: Path,
    descriptor: Optional[str],
    files: Optional[Mapping[str, str]] = None,
) -> Path:
    """Create a skill directory with an optional SKILL.md and extra files."""
    directory.mkdir(parents=True, exist_ok=True)
    if descriptor is not None:
        (directory / "SKILL.md").write_text(descriptor, encoding="utf-8")
    for name, content in (files or {}).items():
        (directory / name).write_text(content, encoding="utf-8")
    return directory
