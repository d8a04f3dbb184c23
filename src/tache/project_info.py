"""Name, version and description of the project, read from pyproject.toml."""

from pathlib import Path
import tomllib

from pydantic import BaseModel

PYPROJECT_PATH = Path(__file__).resolve().parents[2] / "pyproject.toml"
UNKNOWN_VERSION = "Version not available"


class ProjectInfo(BaseModel):
    """The ``[project]`` table fields the CLI reports."""

    name: str = "tache"
    version: str = UNKNOWN_VERSION
    description: str = "Project description not available"


def get_project_info(pyproject_path: Path | None = None) -> ProjectInfo:
    """Read project information.

    Args:
        pyproject_path: File to read; defaults to the source checkout's
            pyproject.toml

    Returns:
        ProjectInfo with defaults for anything missing or unreadable.

    """
    path = pyproject_path or PYPROJECT_PATH
    try:
        with path.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except FileNotFoundError:
        return ProjectInfo()
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(description=f"Error reading project info: {e}")
    return ProjectInfo.model_validate(project)
