"""Terminal rendering for each command.

Skill names, descriptions and document text are user content, so they are
printed as ``Text`` or with markup disabled and never parsed as rich markup.
"""

from __future__ import annotations

from typing import List

from rich.console import Console
from rich.text import Text

from ..errors import PROG_NAME, SkillCliError
from ..skill import DetailDocument, DetailFile, SearchResult, SkillDocument, SkillInfo
from ..skill.search import group_results, preview

WIDTH = 60
RULE = "═" * WIDTH
THIN_RULE = "─" * WIDTH


def _raw(console: Console, text: str) -> None:
    console.print(text, markup=False, emoji=False, highlight=False)


def _document(console: Console, text: str) -> None:
    """Write document text unchanged; console.print would expand tabs."""
    console.file.write(text + "\n")
    console.file.flush()


def _banner(console: Console, title: Text) -> None:
    console.print()
    _raw(console, RULE)
    console.print(title)
    _raw(console, RULE)
    console.print()


def _footer(console: Console, hint: str, rule: str = RULE) -> None:
    console.print()
    _raw(console, rule)
    console.print(Text.assemble("💡 ", (hint, "yellow")))
    _raw(console, RULE)
    console.print()


def usage_text() -> str:
    """Full usage text shown for ``help``, ``--help``, ``-h`` and no arguments."""
    return f"""
{RULE}
📚 Skills CLI - Progressive Disclosure for skill documents
{RULE}

USAGE:
  {PROG_NAME} <command> [args]

COMMANDS:
  list                          List all available skills
  show <skill-name>             Show skill quick reference
  files <skill-name>            List available detail files
  detail <skill-name> <file>    Load a specific detail file
  search <query>                Search across all skills
  help, --help, -h              Show this help
  --version, -v                 Show version

EXAMPLES:
  {PROG_NAME} list
  {PROG_NAME} show my-skill
  {PROG_NAME} files my-skill
  {PROG_NAME} detail my-skill CONCEPTS
  {PROG_NAME} search "search term"
  {PROG_NAME} --version

PROGRESSIVE DISCLOSURE:
  1. Start with 'list' to see what's available
  2. Use 'show' to get quick reference (minimal tokens)
  3. Use 'files' to see what detailed docs exist
  4. Use 'detail' to load full documentation (only when needed)

Set SKILLS_DIR to read skills from another directory.
{RULE}
"""


def render_skill_list(console: Console, skills: List[SkillInfo]) -> None:
    _banner(console, Text(f"📚 Available Skills ({len(skills)})", style="bold"))
    for skill in skills:
        console.print(Text.assemble("  • ", (skill.name, "cyan"), " - ", skill.description))
    _footer(console, f"View a skill: {PROG_NAME} show <skill-name>", rule=THIN_RULE)


def render_skill(console: Console, doc: SkillDocument) -> None:
    _banner(console, Text(f"📚 {doc.title}", style="bold"))
    _document(console, doc.body)
    _footer(console, f"For more details, use: {PROG_NAME} files {doc.skill}")


def render_detail_files(console: Console, skill: str, files: List[DetailFile]) -> None:
    if not files:
        console.print()
        console.print(Text(f"📄 {skill} has no additional detail files"))
        console.print()
        return

    _banner(console, Text(f"📁 {skill} - Available Detail Files", style="bold"))
    for index, detail in enumerate(files, 1):
        console.print(Text.assemble(
            f"  {index}. ",
            (f"{detail.name:<20}", "cyan"),
            (f" ({detail.filename})", "dim"),
        ))
    _footer(
        console,
        f"Load a file: {PROG_NAME} detail {skill} {files[0].name}",
        rule=THIN_RULE,
    )


def render_detail(console: Console, doc: DetailDocument) -> None:
    _banner(console, Text(f"📖 {doc.skill} / {doc.name}", style="bold"))
    _document(console, doc.content)
    console.print()
    _raw(console, RULE)
    console.print()


def render_search(console: Console, query: str, results: List[SearchResult]) -> None:
    if not results:
        console.print()
        console.print(Text(f'❌ No results found for: "{query}"'))
        console.print()
        return

    _banner(console, Text(f'🔍 Search Results for "{query}" ({len(results)} matches)', style="bold"))
    for group in group_results(results):
        console.print(Text.assemble(
            "📚 ",
            (group.skill, "cyan"),
            f" ({len(group.matches)} matches)",
        ))
        for match in group.shown():
            console.print(Text.assemble(
                "   ",
                (f"{match.file}:{match.line}", "dim"),
                f" - {preview(match.text)}",
            ))
        if remaining := group.remaining():
            console.print(Text(f"   ... and {remaining} more", style="dim"))
        console.print()
    _raw(console, RULE)
    console.print()


def render_error(console: Console, error: SkillCliError) -> None:
    console.print(Text(f"❌ {error.message}", style="red"))
    if error.hint:
        console.print(Text(f"   {error.hint}"))
