"""
Temporary workspace management.

The workspace is an explicit handle owned by a single run: it is created before
anything is compiled and removed exactly once, whichever way the run ends.
"""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from ..core.config import WorkspaceConfig
from ..core.exceptions import WorkspaceError
from ..core.logging import get_logger
from ..core.types import ArtifactPath

logger = get_logger(__name__)


@dataclass
class Workspace:
    """Handle to a run's temporary directory tree."""

    root: ArtifactPath
    package_path: str
    released: bool = field(default=False)

    @property
    def class_dir(self) -> Path:
        """Compiler output root."""
        return self.root / "work"

    @property
    def dex_path(self) -> Path:
        """Linker output file."""
        return self.root / "classes.dex"


def acquire(package_path: str, config: WorkspaceConfig | None = None) -> Workspace:
    """Create a fresh workspace with ``work/<package_path>`` in place.

    Raises:
        WorkspaceError: If the directory tree cannot be created.
    """
    config = config or WorkspaceConfig()
    try:
        root = Path(tempfile.mkdtemp(prefix=config.prefix, dir=config.temp_root))
    except OSError as e:
        raise WorkspaceError(
            message=f"cannot create workspace under {config.temp_root or tempfile.gettempdir()}",
            temp_root=str(config.temp_root or ""),
            cause=e,
        ) from e

    ws = Workspace(root=root, package_path=package_path)
    try:
        (ws.class_dir / package_path).mkdir(mode=0o775, parents=True, exist_ok=True)
    except OSError as e:
        release(ws)
        raise WorkspaceError(
            message=f"cannot create {ws.class_dir / package_path}",
            temp_root=str(config.temp_root or ""),
            cause=e,
        ) from e
    logger.debug("Workspace acquired", root=str(root))
    return ws


def release(ws: Workspace) -> None:
    """Remove the workspace tree.

    Raises:
        RuntimeError: If the workspace was already released.
    """
    if ws.released:
        raise RuntimeError(f"Workspace {ws.root} released twice")
    ws.released = True
    shutil.rmtree(ws.root, ignore_errors=True)
    logger.debug("Workspace released", root=str(ws.root))


@contextmanager
def scoped_workspace(package_path: str, config: WorkspaceConfig | None = None) -> Iterator[Workspace]:
    """Scoped workspace: released on every exit path."""
    ws = acquire(package_path, config)
    try:
        yield ws
    finally:
        release(ws)
