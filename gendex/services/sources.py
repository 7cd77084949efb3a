"""Java source discovery."""

from __future__ import annotations

import glob
from pathlib import Path

from ..core.exceptions import NoSourceFilesFoundError
from ..core.logging import get_logger

logger = get_logger(__name__)


def find_sources(pattern: str) -> list[Path]:
    """Expand ``pattern`` into a sorted list of Java sources.

    An empty compile set would produce an empty DEX downstream, so no match is
    an error rather than a warning.

    Raises:
        NoSourceFilesFoundError: If nothing matches.
    """
    matches = sorted(glob.glob(pattern))
    if not matches:
        raise NoSourceFilesFoundError(
            message=f"could not find {pattern} files",
            pattern=pattern,
        )
    logger.info("Found Java sources", count=len(matches), pattern=pattern)
    return [Path(m) for m in matches]
