"""Well-known directories used by skill-cli.

The bundled skills directory lives next to the package; log files go to the
platform data directory resolved by platformdirs.
"""

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "skill-cli"

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class GlobalPath:
    """Global path lookups, overridable in tests via monkeypatch."""

    @classmethod
    def skills(cls) -> str:
        """Default skills root, used when ``SKILLS_DIR`` is not set."""
        return str(PACKAGE_DIR / "skills")

    @classmethod
    def data(cls) -> str:
        """Application data directory."""
        return os.environ.get("SKILL_CLI_DATA_DIR") or user_data_dir(APP_NAME)

    @classmethod
    def log(cls) -> str:
        """Log file directory."""
        return str(Path(cls.data()) / "log")
