# ==============================================================================
# Project Paths
# ==============================================================================
"""
Project root detection and certificate paths.
"""

from pathlib import Path


def get_project_root() -> Path:
    """
    Get the project root directory.

    Searches upward from the current file for a directory containing
    pyproject.toml. Falls back to current working directory if not found.

    Returns:
        Path to the project root directory
    """
    current = Path(__file__).parent.parent.parent  # utils/paths.py -> edge_collector -> project
    if (current / "pyproject.toml").exists():
        return current

    return Path.cwd()


def resolve_project_path(path: str) -> Path:
    """
    Resolve a configured path against the project root.

    Absolute paths are returned unchanged.

    Args:
        path: Path as written in configuration (e.g., "certs/ca.pem")

    Returns:
        Absolute path
    """
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return get_project_root() / candidate
