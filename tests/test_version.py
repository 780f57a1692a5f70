from __future__ import annotations

from importlib import metadata
from pathlib import Path

import pytest
import functional_collections
from functional_collections import version


def test_package_exposes_version() -> None:
    assert isinstance(functional_collections.__version__, str)
    assert functional_collections.__version__ != ""


def test_reads_version_from_pyproject(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "x"\nversion = "9.8.7"\n', "utf-8")
    assert version.get_version_from_pyproject(pyproject) == "9.8.7"


def test_falls_back_to_pyproject_when_not_installed(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nversion = "1.2.3"\n', "utf-8")
    assert version.get_version("no-such-distribution-xyz", pyproject) == "1.2.3"


def test_unknown_when_nothing_is_available(tmp_path: Path) -> None:
    missing = tmp_path / "absent.toml"
    assert version.get_version("no-such-distribution-xyz", missing) == "unknown"


def test_metadata_lookup_raises_for_missing_distribution() -> None:
    with pytest.raises(metadata.PackageNotFoundError):
        version.get_version_from_metadata("no-such-distribution-xyz")
