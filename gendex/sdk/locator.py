"""
Android SDK discovery.

Resolves the SDK root and picks the platform and build-tools versions to build
against. "Newest" means lexicographically last: ``android-9`` sorts after
``android-34`` and ``9.0.0`` after ``34.0.0``. This is a heuristic, not a
version comparison.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from ..core.config import SdkConfig
from ..core.exceptions import EmptyVersionDirectoryError, SdkNotFoundError
from ..core.logging import get_logger

logger = get_logger(__name__)


def default_sdk_path(platform: str | None = None) -> Path:
    """Return the location Android Studio installs the SDK to by default."""
    platform = platform or sys.platform
    home = Path.home()
    if platform.startswith("win"):
        return Path(os.environ.get("LOCALAPPDATA", "")) / "Android" / "Sdk"
    if platform == "darwin":
        return home / "Library" / "Android" / "sdk"
    return home / "Android" / "Sdk"


def locate_sdk_root(config: SdkConfig | None = None) -> Path:
    """Locate the Android SDK root.

    The ``ANDROID_HOME`` environment variable is trusted as-is when set;
    otherwise the platform default is used if it is an existing directory.

    Raises:
        SdkNotFoundError: If neither yields an SDK root.
    """
    config = config or SdkConfig()
    override = os.environ.get(config.home_env_var)
    if override:
        logger.debug("Using SDK root from environment", variable=config.home_env_var, path=override)
        return Path(override)

    candidate = default_sdk_path()
    if candidate.is_dir():
        logger.debug("Using default SDK location", path=str(candidate))
        return candidate

    raise SdkNotFoundError(
        message=(
            f"no Android SDK found in the default location ({candidate}); "
            f"use {config.home_env_var}"
        ),
        searched_path=str(candidate),
    )


def newest_child(parent: Path) -> Path:
    """Return the child of ``parent`` whose name sorts last.

    Raises:
        EmptyVersionDirectoryError: If ``parent`` is empty, missing or unreadable.
    """
    try:
        names = sorted(entry.name for entry in parent.iterdir())
    except OSError as e:
        raise EmptyVersionDirectoryError(
            message=f"cannot list {parent}",
            directory=str(parent),
            cause=e,
        ) from e

    if not names:
        raise EmptyVersionDirectoryError(
            message=f"no versions installed under {parent}",
            directory=str(parent),
        )
    return parent / names[-1]


def resolve_platform(sdk_root: Path, config: SdkConfig | None = None) -> Path:
    """Pick the newest installed platform directory."""
    config = config or SdkConfig()
    platform = newest_child(sdk_root / config.platforms_dir)
    logger.info("Resolved platform", platform=platform.name)
    return platform


def resolve_build_tools(sdk_root: Path, config: SdkConfig | None = None) -> Path:
    """Pick the newest installed build-tools directory."""
    config = config or SdkConfig()
    build_tools = newest_child(sdk_root / config.build_tools_dir)
    logger.info("Resolved build-tools", version=build_tools.name)
    return build_tools
