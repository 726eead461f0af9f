"""Version management for the Lab Docs API.

Provides version information using importlib.metadata with fallback to pyproject.toml.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT_PATH = Path(__file__).resolve().parents[3] / "pyproject.toml"


def get_version() -> str:
    """Get the application version.

    Reads installed package metadata first; falls back to the repository's
    pyproject.toml when running from a source checkout.

    Returns:
        Version string (e.g., "0.1.0")
    """
    try:
        return version("labdocs-api")
    except PackageNotFoundError:
        with open(_PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomllib.load(f)

        return pyproject_data["project"]["version"]


__version__ = get_version()
