"""Skill discovery and document resolution over a skills root directory.

Each skill is a directory directly under the root containing a SKILL.md
descriptor. Any other markdown file in the directory, except README.md, is a
detail file that can be loaded on request:
```
<root>/<skill-name>/SKILL.md
<root>/<skill-name>/CONCEPTS.md
<root>/<skill-name>/README.md
```
The repository keeps no state between calls; every lookup reads the
filesystem again.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from ..errors import DetailFileNotFoundError, SkillNotFoundError
from ..util.log import Log
from .frontmatter import parse_frontmatter

log = Log.create({"service": "skill.repository"})

SKILL_FILENAME = "SKILL.md"
README_FILENAME = "README.md"
DOC_SUFFIX = ".md"
DEFAULT_DESCRIPTION = "No description"

_RESERVED_FILENAMES = {SKILL_FILENAME.lower(), README_FILENAME.lower()}


@dataclass
class SkillInfo:
    """Summary of a discovered skill.

    Attributes:
        name: Directory name, unique within the root
        description: Descriptor ``description`` field, or a placeholder
        location: Path to the SKILL.md file
        directory: Directory containing the skill
    """
    name: str
    description: str
    location: Path
    directory: Path


@dataclass
class SkillDocument:
    """A skill's parsed descriptor."""
    skill: str
    meta: Dict[str, str]
    body: str
    location: Path

    @property
    def title(self) -> str:
        return self.meta.get("name") or self.skill

    @property
    def description(self) -> str:
        return self.meta.get("description") or DEFAULT_DESCRIPTION


@dataclass
class DetailFile:
    """A detail document listed by base name."""
    name: str
    filename: str
    location: Path


@dataclass
class DetailDocument:
    """Raw content of a resolved detail file."""
    skill: str
    name: str
    filename: str
    content: str
    location: Path


def read_document(path: Path) -> str:
    """Read a markdown document; undecodable bytes become U+FFFD."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def _is_reserved(filename: str) -> bool:
    """Descriptor and README are never detail files, in any letter case."""
    return filename.lower() in _RESERVED_FILENAMES


def _is_safe_name(name: str) -> bool:
    """Reject names that would resolve outside their parent directory."""
    if not name or name in {".", ".."}:
        return False
    return not any(sep in name for sep in (os.sep, os.altsep) if sep)


class SkillRepository:
    """Read-only access to the skills stored under ``root``.

    Example:
        repo = SkillRepository(Path("skills"))
        for skill in repo.list_skills():
            print(f"{skill.name} - {skill.description}")

        doc = repo.resolve_skill("commit")
        detail = repo.resolve_detail_file("commit", "concepts")
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _skill_dir(self, name: str) -> Path:
        """Return the directory for ``name``, raising if it does not exist."""
        if not _is_safe_name(name):
            raise SkillNotFoundError(name)
        directory = self.root / name
        if not directory.is_dir():
            raise SkillNotFoundError(name)
        return directory

    def list_skills(self) -> List[SkillInfo]:
        """List every skill under the root, sorted by name.

        Subdirectories without a SKILL.md are skipped. A missing root yields
        an empty list.
        """
        if not self.root.is_dir():
            log.warn("skills root not found", {"root": self.root})
            return []

        skills: List[SkillInfo] = []
        for entry in sorted(self.root.iterdir(), key=lambda p: p.name):
            if not entry.is_dir():
                continue

            descriptor = entry / SKILL_FILENAME
            if not descriptor.is_file():
                log.debug("skipping directory without descriptor", {"directory": entry})
                continue

            meta = parse_frontmatter(read_document(descriptor)).meta
            skills.append(SkillInfo(
                name=entry.name,
                description=meta.get("description") or DEFAULT_DESCRIPTION,
                location=descriptor,
                directory=entry,
            ))

        log.debug("listed skills", {"root": self.root, "count": len(skills)})
        return skills

    def resolve_skill(self, name: str) -> SkillDocument:
        """Load and parse a skill's descriptor.

        Raises:
            SkillNotFoundError: If the directory or its SKILL.md is missing
        """
        descriptor = self._skill_dir(name) / SKILL_FILENAME
        if not descriptor.is_file():
            raise SkillNotFoundError(name)

        parsed = parse_frontmatter(read_document(descriptor))
        return SkillDocument(skill=name, meta=parsed.meta, body=parsed.body, location=descriptor)

    def list_detail_files(self, name: str) -> List[DetailFile]:
        """List the detail files of a skill, sorted by filename.

        Raises:
            SkillNotFoundError: If the skill directory is missing
        """
        directory = self._skill_dir(name)
        return [
            DetailFile(name=path.name[: -len(DOC_SUFFIX)], filename=path.name, location=path)
            for path in self._markdown_files(directory)
            if not _is_reserved(path.name)
        ]

    def resolve_detail_file(self, name: str, detail: str) -> DetailDocument:
        """Load a detail file by base name.

        ``<detail>.md`` is tried first, then the upper-cased ``<DETAIL>.md``,
        so ``concepts`` finds ``CONCEPTS.md``.

        Raises:
            SkillNotFoundError: If the skill directory is missing
            DetailFileNotFoundError: If neither candidate file exists
        """
        directory = self._skill_dir(name)

        if _is_safe_name(detail):
            for candidate in (f"{detail}{DOC_SUFFIX}", f"{detail.upper()}{DOC_SUFFIX}"):
                if _is_reserved(candidate):
                    continue
                path = directory / candidate
                if path.is_file():
                    return DetailDocument(
                        skill=name,
                        name=detail,
                        filename=candidate,
                        content=read_document(path),
                        location=path,
                    )

        raise DetailFileNotFoundError(name, detail)

    def documents(self, name: str) -> List[Path]:
        """Every markdown file of a skill, descriptor and README included.

        Raises:
            SkillNotFoundError: If the skill directory is missing
        """
        return self._markdown_files(self._skill_dir(name))

    @staticmethod
    def _markdown_files(directory: Path) -> List[Path]:
        return sorted(
            (p for p in directory.iterdir() if p.name.endswith(DOC_SUFFIX) and p.is_file()),
            key=lambda p: p.name,
        )
