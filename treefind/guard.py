"""Root path safety checks.

A search root is declined when it falls under a protected system
location. The comparison is a plain case-insensitive prefix test with no
normalization, so "/etcetera" is declined along with "/etc".
"""

import logging
from typing import Optional

from .errors import ForbiddenRootError

logger = logging.getLogger(__name__)

FORBIDDEN_DIRS = (
    '/',
    'C:\\Windows',
    'C:\\Program Files',
    'C:\\Program Files (x86)',
    '/etc',
    '/bin',
    '/usr',
    '/var',
)

# Filesystem roots only match themselves; a prefix test would decline
# every absolute path.
_ROOT_ENTRIES = frozenset({'/'})


def forbidden_entry(path: str) -> Optional[str]:
    """Return the deny-list entry that declines ``path``, if any.

    Args:
        path: Candidate root, not required to exist or be normalized

    Returns:
        Matching entry from FORBIDDEN_DIRS, or None if the path is allowed
    """
    lowered = path.lower()
    for entry in FORBIDDEN_DIRS:
        if entry in _ROOT_ENTRIES:
            if lowered == entry.lower():
                return entry
        elif lowered.startswith(entry.lower()):
            return entry
    return None


def is_forbidden(path: str) -> bool:
    """Check whether ``path`` starts with a protected location."""
    return forbidden_entry(path) is not None


def check_root(path: str) -> None:
    """Decline a forbidden root.

    Raises:
        ForbiddenRootError: If the path matches the deny-list
    """
    entry = forbidden_entry(path)
    if entry is not None:
        logger.warning("Declining root %r (matches %r)", path, entry)
        raise ForbiddenRootError(path, entry)
