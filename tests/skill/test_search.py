from __future__ import annotations

from pathlib import Path

from skillcli.skill import SkillRepository, group_results, preview, search
from skillcli.skill.search import SearchResult
from tests.helpers import write_skill


def _total_lines(root: Path) -> int:
    return sum(
        len(path.read_text(encoding="utf-8").split("\n"))
        for path in root.glob("*/*.md")
        if (path.parent / "SKILL.md").is_file()
    )


def test_search_finds_lines_across_skills_and_files(skills_root: Path) -> None:
    results = search(SkillRepository(skills_root), "quick reference")

    assert results == [SearchResult(skill="beta", file="SKILL.md", line=5, text="Beta quick reference.")]


def test_search_is_case_insensitive(skills_root: Path) -> None:
    repo = SkillRepository(skills_root)

    upper = search(repo, "Foo")
    lower = search(repo, "foo")

    assert upper == lower
    assert [(r.skill, r.file, r.line) for r in upper] == [("beta", "NOTES.md", 2)]


def test_search_includes_readme_and_descriptor(skills_root: Path) -> None:
    files = {(r.skill, r.file) for r in search(SkillRepository(skills_root), "beta")}

    assert files == {("beta", "README.md"), ("beta", "SKILL.md")}


def test_empty_query_matches_every_line(skills_root: Path) -> None:
    write_skill(skills_root / "orphan", None, {"NOTES.md": "not part of any skill\n"})

    results = search(SkillRepository(skills_root), "")

    assert len(results) == _total_lines(skills_root)
    assert all(r.skill != "orphan" for r in results)


def test_search_trims_matching_lines(tmp_path: Path) -> None:
    write_skill(tmp_path / "spaced", "   indented needle   \n\tneedle\t\n")

    results = search(SkillRepository(tmp_path), "needle")

    assert [(r.line, r.text) for r in results] == [(1, "indented needle"), (2, "needle")]


def test_search_no_matches(skills_root: Path) -> None:
    assert search(SkillRepository(skills_root), "nothing matches this") == []


def test_group_results_keeps_first_seen_order() -> None:
    results = [
        SearchResult("beta", "SKILL.md", 1, "a"),
        SearchResult("alpha", "SKILL.md", 1, "b"),
        SearchResult("beta", "NOTES.md", 3, "c"),
    ]

    groups = group_results(results)

    assert [g.skill for g in groups] == ["beta", "alpha"]
    assert [m.text for m in groups[0].matches] == ["a", "c"]


def test_group_shows_three_and_counts_the_rest() -> None:
    results = [SearchResult("alpha", "SKILL.md", n, f"line {n}") for n in range(1, 6)]

    group = group_results(results)[0]

    assert [m.line for m in group.shown()] == [1, 2, 3]
    assert group.remaining() == 2


def test_preview_truncates_long_lines() -> None:
    assert preview("short") == "short"
    assert preview("x" * 60) == "x" * 60
    assert preview("y" * 61) == "y" * 60 + "..."


def test_search_reads_non_utf8_documents(tmp_path: Path) -> None:
    write_skill(tmp_path / "latin", "---\nname: Latin\n---\n")
    (tmp_path / "latin" / "LEGACY.md").write_bytes(b"caf\xe9 needle\n")

    results = search(SkillRepository(tmp_path), "needle")

    assert results == [SearchResult(skill="latin", file="LEGACY.md", line=1, text="caf\ufffd needle")]
