"""
Workspace and package resolution.

Both are found by walking up from the current directory until a marker
file or folder shows up: package.xml for a package, a build/ folder or
.colb.toml for the workspace root.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..core.di import resolve_or_default
from ..core.exceptions import PackageNotFoundError, WorkspaceNotFoundError
from ..core.interfaces.logger import ILogger
from ..core.settings import CONFIG_FILENAME
from .logging import NullLogger

PACKAGE_MARKERS: tuple[str, ...] = ("package.xml",)
WORKSPACE_MARKERS: tuple[str, ...] = ("build", CONFIG_FILENAME)


def _logger() -> ILogger:
    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def contains_marker(path: Path, markers: Sequence[str]) -> bool:
    """Whether any of ``markers`` exists directly inside ``path``.

    Probing errors (permissions, broken mounts) count as absent.
    """
    for marker in markers:
        try:
            if (path / marker).exists():
                return True
        except OSError:
            continue
    return False


def find_upwards(markers: Sequence[str], start: str | Path | None = None) -> Path | None:
    """
    Find the nearest directory containing one of ``markers``.

    Args:
        markers: File or folder names to look for
        start: Directory to start from (defaults to the cwd)

    Returns:
        The first matching directory, walking towards the filesystem
        root, or None if there is none
    """
    try:
        current = Path(start or Path.cwd()).resolve(strict=True)
    except OSError:
        return None

    for candidate in (current, *current.parents):
        if contains_marker(candidate, markers):
            _logger().debug("Found %s in %s", markers, candidate)
            return candidate
    return None


def package_or(package: str | None = None, start: str | Path | None = None) -> str | None:
    """The given package name, or the name of the enclosing package directory."""
    if package:
        return package
    found = find_upwards(PACKAGE_MARKERS, start)
    if found is None:
        return None
    return found.name


def require_package(package: str | None = None, start: str | Path | None = None) -> str:
    """Like package_or(), but raise if no package can be determined."""
    resolved = package_or(package, start)
    if resolved is None:
        raise PackageNotFoundError(context={"cwd": str(start or Path.cwd())})
    return resolved


def detect_workspace(start: str | Path | None = None) -> Path | None:
    """Nearest ancestor with a build/ folder or a .colb.toml."""
    return find_upwards(WORKSPACE_MARKERS, start)


def resolve_workspace(explicit: str | Path | None = None, start: str | Path | None = None) -> Path:
    """
    Determine the workspace root.

    An explicit --workspace wins, then detection from ``start``, then
    ``start`` (or the cwd) itself.

    Raises:
        WorkspaceNotFoundError: An explicit workspace is not a directory
    """
    if explicit is not None:
        path = Path(explicit)
        if not path.is_dir():
            raise WorkspaceNotFoundError(
                f"Workspace '{explicit}' is not a directory", workspace=str(explicit)
            )
        return path.resolve()

    detected = detect_workspace(start)
    if detected is not None:
        return detected

    fallback = Path(start or Path.cwd())
    _logger().debug("No workspace markers found, using %s", fallback)
    try:
        return fallback.resolve()
    except OSError:
        return fallback
