"""Allows running the package as a module: ``python -m skillcli``."""

from .cli.main import app

if __name__ == "__main__":
    app(prog_name="skill-cli")
