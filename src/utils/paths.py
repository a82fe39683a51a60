import os
from pathlib import Path

PROJECT_ROOT_ENV = "LMS_DEV_PROJECT_ROOT"


def get_project_root() -> Path:
    """Get the project root directory.

    ``LMS_DEV_PROJECT_ROOT`` wins when set. Otherwise walks up from the module
    location to find the meta-repository root, identified by the presence of
    pyproject.toml, and falls back to the current working directory.

    Returns:
        Path to the project root directory
    """
    override = os.environ.get(PROJECT_ROOT_ENV)
    if override:
        return Path(override).resolve()

    current = Path(__file__).resolve()

    # Walk up the directory tree looking for pyproject.toml
    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists():
            return parent

    return Path.cwd()
