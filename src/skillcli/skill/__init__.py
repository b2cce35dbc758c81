"""Skill store: discovery, descriptor parsing and search.

Example usage:
    from skillcli.skill import SkillRepository, search

    repo = SkillRepository(Path("skills"))
    for skill in repo.list_skills():
        print(f"{skill.name}: {skill.description}")

    doc = repo.resolve_skill("commit")
    print(doc.title)
    print(doc.body)

    for result in search(repo, "rebase"):
        print(f"{result.skill}/{result.file}:{result.line} {result.text}")

Skill descriptors are markdown files named SKILL.md with a header block:
    ---
    name: My Skill
    description: Brief description
    ---

    Quick reference text...
"""

from .frontmatter import Frontmatter, dump_frontmatter, parse_frontmatter
from .repository import (
    DEFAULT_DESCRIPTION,
    SKILL_FILENAME,
    DetailDocument,
    DetailFile,
    SkillDocument,
    SkillInfo,
    SkillRepository,
)
from .search import SearchGroup, SearchResult, group_results, preview, search

__all__ = [
    "DEFAULT_DESCRIPTION",
    "SKILL_FILENAME",
    "DetailDocument",
    "DetailFile",
    "Frontmatter",
    "SearchGroup",
    "SearchResult",
    "SkillDocument",
    "SkillInfo",
    "SkillRepository",
    "dump_frontmatter",
    "group_results",
    "parse_frontmatter",
    "preview",
    "search",
]
