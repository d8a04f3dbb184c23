"""Tests for the tache package root and project info."""

from pathlib import Path
import tomllib

import tache
from tache import ProjectInfo
from tache import get_project_info
from tache.project_info import PYPROJECT_PATH
from tache.project_info import UNKNOWN_VERSION


def test_get_project_info_success():
    """Test get_project_info returns correct values from pyproject.toml."""
    info = get_project_info()

    assert isinstance(info, ProjectInfo)

    project_root_path = Path(__file__).parent.parent
    assert PYPROJECT_PATH == (project_root_path / "pyproject.toml").resolve()
    with (project_root_path / "pyproject.toml").open("rb") as f:
        project_info = tomllib.load(f).get("project", {})
        assert info.name == project_info["name"]
        assert info.version == project_info.get("version", None)
        assert info.description == project_info.get("description", None)


def test_version_attribute():
    """Test __version__ mirrors the project version."""
    assert tache.__version__ == get_project_info().version


def test_get_project_info_missing_file(tmp_path: Path):
    """Test get_project_info when pyproject.toml doesn't exist."""
    info = get_project_info(tmp_path / "pyproject.toml")

    assert info.name == "tache"
    assert info.description == "Project description not available"
    assert info.version == UNKNOWN_VERSION


def test_get_project_info_invalid_toml(tmp_path: Path):
    """Test get_project_info when pyproject.toml cannot be parsed."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("[project\nname = ")

    info = get_project_info(pyproject)

    assert "Error reading project info:" in info.description
    assert info.version == UNKNOWN_VERSION


def test_get_project_info_partial_table(tmp_path: Path):
    """Test fields missing from the [project] table keep their defaults."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "other"\nversion = "9.9"\n')

    info = get_project_info(pyproject)

    assert info.name == "other"
    assert info.version == "9.9"
    assert info.description == "Project description not available"


def test_public_api():
    """Test the names exported from the package root."""
    for name in tache.__all__:
        assert hasattr(tache, name), name
    assert tache.render_template("{{x}}", {"x": "<y>"}) == "&lt;y&gt;"
