"""Android SDK discovery."""

from .locator import (
    default_sdk_path,
    locate_sdk_root,
    newest_child,
    resolve_build_tools,
    resolve_platform,
)

__all__ = [
    "default_sdk_path",
    "locate_sdk_root",
    "newest_child",
    "resolve_build_tools",
    "resolve_platform",
]
