"""skill-cli - progressive disclosure for markdown skill documents.

Exposes a directory of skills (one SKILL.md per subdirectory, plus optional
detail files) on the command line: a short quick reference first, deeper
documents only on explicit request, and a text search across everything.
"""

from .core.version import resolve_version

__version__ = resolve_version()

__all__ = ["__version__"]
