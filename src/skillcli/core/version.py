"""Version lookup from installed package metadata."""

from importlib.metadata import version

DISTRIBUTION = "skill-cli"
DEFAULT_VERSION = "0.1.0"


def resolve_version(distribution: str = DISTRIBUTION) -> str:
    """Return the installed version, or ``DEFAULT_VERSION`` if it can't be read.

    Missing, broken or unreadable metadata all fall back silently.
    """
    try:
        return version(distribution) or DEFAULT_VERSION
    except Exception:
        return DEFAULT_VERSION
