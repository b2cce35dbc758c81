"""CLI entry point for skill-cli.

Commands follow a progressive-disclosure flow: ``list`` the skills, ``show``
a quick reference, then ``files`` and ``detail`` for deeper documents only
when needed. ``search`` scans every document of every skill.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NoReturn, Optional

import click
import typer
from rich.console import Console
from typer.core import TyperGroup

from ..core.config import Settings
from ..core.version import resolve_version
from ..errors import SkillCliError, UnknownCommandError, UsageError
from ..skill import SkillRepository, search
from ..util.log import Log
from . import render

log = Log.create({"service": "cli"})

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _fail(error: SkillCliError) -> NoReturn:
    """Report an expected failure on stderr and exit non-zero."""
    log.info("command failed", {"error": error.__class__.__name__, "message": error.message})
    render.render_error(err_console, error)
    raise typer.Exit(error.exit_code)


class SkillGroup(TyperGroup):
    """Command group with custom usage text and unknown-command handling."""

    def get_help(self, ctx: click.Context) -> str:
        return render.usage_text()

    def resolve_command(self, ctx: click.Context, args: List[str]):
        if args and self.get_command(ctx, args[0]) is None:
            _fail(UnknownCommandError(args[0]))
        return super().resolve_command(ctx, args)


@dataclass
class AppState:
    """Per-invocation objects shared with commands through ``ctx.obj``."""
    settings: Settings
    repository: SkillRepository


app = typer.Typer(
    name="skill-cli",
    cls=SkillGroup,
    help="Progressive disclosure for markdown skill documents",
    add_completion=False,
    invoke_without_command=True,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
)


# Surplus arguments are ignored and unknown options are kept as plain words
EXTRA_ARGS = {"ignore_unknown_options": True, "allow_extra_args": True}


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(resolve_version(), markup=False, highlight=False)
        raise typer.Exit()


def _repository(ctx: typer.Context) -> SkillRepository:
    return ctx.find_object(AppState).repository


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Skills CLI - progressive disclosure for markdown skill documents."""
    try:
        settings = Settings.from_env()
    except SkillCliError as e:
        _fail(e)

    Log.configure(
        level=settings.logging.log_level(),
        format=settings.logging.log_format(),
        console=True,
        file=settings.logging.file,
    )
    log.debug("skills root", {"root": settings.skills_dir})
    ctx.obj = AppState(settings=settings, repository=SkillRepository(settings.skills_dir))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("help")
def help_command(ctx: typer.Context):
    """Show usage."""
    typer.echo(ctx.find_root().get_help())


@app.command("list")
def list_command(ctx: typer.Context):
    """List all available skills."""
    render.render_skill_list(console, _repository(ctx).list_skills())


@app.command("show", context_settings=EXTRA_ARGS)
def show_command(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Skill name"),
):
    """Show a skill's quick reference."""
    if not name:
        _fail(UsageError("show <skill-name>"))
    try:
        doc = _repository(ctx).resolve_skill(name)
    except SkillCliError as e:
        _fail(e)
    render.render_skill(console, doc)


@app.command("files", context_settings=EXTRA_ARGS)
def files_command(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Skill name"),
):
    """List the detail files available for a skill."""
    if not name:
        _fail(UsageError("files <skill-name>"))
    try:
        files = _repository(ctx).list_detail_files(name)
    except SkillCliError as e:
        _fail(e)
    render.render_detail_files(console, name, files)


@app.command("detail", context_settings=EXTRA_ARGS)
def detail_command(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Skill name"),
    file: Optional[str] = typer.Argument(None, help="Detail file name, e.g. CONCEPTS"),
):
    """Load a specific detail file."""
    if not name or not file:
        _fail(UsageError("detail <skill-name> <file-name>"))
    try:
        doc = _repository(ctx).resolve_detail_file(name, file)
    except SkillCliError as e:
        _fail(e)
    render.render_detail(console, doc)


@app.command("search", context_settings=EXTRA_ARGS)
def search_command(
    ctx: typer.Context,
    query: Optional[List[str]] = typer.Argument(None, help="Text to search for"),
):
    """Search across all skills."""
    if not query or not query[0]:
        _fail(UsageError("search <query>"))

    text = " ".join(query)
    try:
        results = search(_repository(ctx), text)
    except SkillCliError as e:
        _fail(e)
    render.render_search(console, text, results)


if __name__ == "__main__":
    app()
