"""Runtime lookup of the installed functional-collections version."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

import tomllib

DISTRIBUTION_NAME = "functional-collections"
_PYPROJECT_PATH = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version_from_metadata(distribution: str = DISTRIBUTION_NAME) -> str:
    """Return the version recorded in the installed distribution's metadata."""

    return metadata.version(distribution)


def get_version_from_pyproject(path: Path = _PYPROJECT_PATH) -> str:
    """Return the ``[project] version`` declared in a ``pyproject.toml`` file."""

    data = tomllib.loads(path.read_text("utf-8"))
    return str(data["project"]["version"])


def get_version(
    distribution: str = DISTRIBUTION_NAME, path: Path = _PYPROJECT_PATH
) -> str:
    """Return the version from metadata, then ``pyproject.toml``, else ``"unknown"``."""

    try:
        return get_version_from_metadata(distribution)
    except metadata.PackageNotFoundError:
        try:
            return get_version_from_pyproject(path)
        except (FileNotFoundError, KeyError):
            return "unknown"


__version__ = get_version()
