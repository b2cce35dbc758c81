"""Exceptions shared by the skill store and the command line.

Every error carries a one-line ``hint`` telling the user what to run next.
The core raises these; only the CLI turns them into stderr output and an
exit code.
"""

from __future__ import annotations

from typing import Optional

PROG_NAME = "skill-cli"


class SkillCliError(Exception):
    """Base class for expected, user-facing failures."""

    exit_code: int = 1

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(message)


class UsageError(SkillCliError):
    """A required positional argument is missing."""

    def __init__(self, usage: str):
        self.usage = usage
        super().__init__(f"Usage: {PROG_NAME} {usage}")


class UnknownCommandError(SkillCliError):
    """The command token is not one the CLI knows."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown command: {command}", hint=f"Try: {PROG_NAME} help")


class NotFoundError(SkillCliError):
    """A skill or one of its documents does not exist."""


class SkillNotFoundError(NotFoundError):
    """Raised when a requested skill directory or descriptor is missing.

    Attributes:
        name: Name of the skill that was not found
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Skill not found: {name}", hint=f"Try: {PROG_NAME} list")


class DetailFileNotFoundError(NotFoundError):
    """Raised when neither ``<name>.md`` nor ``<NAME>.md`` exists in a skill."""

    def __init__(self, skill: str, name: str):
        self.skill = skill
        self.name = name
        super().__init__(
            f"Detail file not found: {name}",
            hint=f"Try: {PROG_NAME} files {skill}",
        )


class ConfigError(SkillCliError):
    """Configuration error."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Config error in {key}: {message}")
