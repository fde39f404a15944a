"""Default database path discovery.

Looks for an existing LanceDB directory under the user's home, preferring
the current layout and falling back to legacy state directories. Probing is
best-effort: a failing existence check counts as "not there".
"""

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

PREFERRED_STATE_DIR = ".openclaw"
DB_SUBPATH = Path("memory") / "lancedb"

# Older state directory names, checked in order after the preferred one
LEGACY_STATE_DIRS: list[str] = []


def _safe_exists(path: Path, exists: Callable[[str], bool]) -> bool:
    try:
        return bool(exists(str(path)))
    except (OSError, ValueError) as e:
        logger.debug(f"Existence check failed for {path}: {e}")
        return False


def resolve_default_db_path(
    home: Optional[Union[str, Path]] = None,
    exists: Optional[Callable[[str], bool]] = None,
) -> str:
    """Return the database path to use when none is configured.

    Args:
        home: Home directory; defaults to ``Path.home()``, falling back to
            ``os.path.expanduser("~")`` when that cannot be determined.
        exists: Existence check taking a path string; defaults to
            ``os.path.exists``.

    Returns:
        The preferred path if it exists, else the first existing legacy
        path, else the preferred path (which may not exist yet).
    """
    if home is not None:
        home_dir = Path(home)
    else:
        try:
            home_dir = Path.home()
        except RuntimeError as e:
            logger.debug(f"Could not determine home directory: {e}")
            home_dir = Path(os.path.expanduser("~"))
    check = exists or os.path.exists

    preferred = home_dir / PREFERRED_STATE_DIR / DB_SUBPATH
    if _safe_exists(preferred, check):
        logger.debug(f"Using existing database at {preferred}")
        return str(preferred)

    for legacy in LEGACY_STATE_DIRS:
        candidate = home_dir / legacy / DB_SUBPATH
        if _safe_exists(candidate, check):
            logger.info(f"Using legacy database location {candidate}")
            return str(candidate)

    logger.debug(f"No existing database found, defaulting to {preferred}")
    return str(preferred)
