"""Case-insensitive substring search across every skill document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..util.log import Log
from .repository import SkillRepository, read_document

log = Log.create({"service": "skill.search"})

# Display policy for grouped results
MAX_MATCHES_PER_SKILL = 3
# Lines longer than this are cut and get "..."; shorter lines are shown whole
PREVIEW_WIDTH = 60


@dataclass
class SearchResult:
    """A single matching line.

    Attributes:
        skill: Skill the document belongs to
        file: Document filename within the skill directory
        line: 1-based line number
        text: The matching line with surrounding whitespace removed
    """
    skill: str
    file: str
    line: int
    text: str


@dataclass
class SearchGroup:
    """All matches for one skill, in scan order."""
    skill: str
    matches: List[SearchResult] = field(default_factory=list)

    def shown(self, limit: int = MAX_MATCHES_PER_SKILL) -> List[SearchResult]:
        return self.matches[:limit]

    def remaining(self, limit: int = MAX_MATCHES_PER_SKILL) -> int:
        return max(len(self.matches) - limit, 0)


def search(repository: SkillRepository, query: str) -> List[SearchResult]:
    """Find every line containing ``query``, ignoring case.

    Skills are scanned in listing order and documents in filename order.
    An empty query matches every line.
    """
    needle = query.lower()
    results: List[SearchResult] = []

    for skill in repository.list_skills():
        for path in repository.documents(skill.name):
            text = read_document(path)
            for number, line in enumerate(text.split("\n"), start=1):
                if needle in line.lower():
                    results.append(SearchResult(
                        skill=skill.name,
                        file=path.name,
                        line=number,
                        text=line.strip(),
                    ))

    log.debug("search complete", {"query": query, "matches": len(results)})
    return results


def group_results(results: List[SearchResult]) -> List[SearchGroup]:
    """Group results by skill, keeping the order skills were first seen."""
    groups: Dict[str, SearchGroup] = {}
    for result in results:
        if result.skill not in groups:
            groups[result.skill] = SearchGroup(skill=result.skill)
        groups[result.skill].matches.append(result)
    return list(groups.values())


def preview(text: str, width: int = PREVIEW_WIDTH) -> str:
    """Truncate a matching line for display."""
    if len(text) <= width:
        return text
    return text[:width] + "..."
