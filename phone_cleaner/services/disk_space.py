"""Total disk space of the volume holding the app's home directory."""

import shutil
from pathlib import Path
from typing import Optional, Union

from ..config import settings

INT64_MAX = 2**63 - 1


class DiskSpaceUnavailable(Exception):
    """Filesystem metadata for the requested path could not be read."""


def read_total_capacity(path: Union[str, Path]) -> int:
    """Return total bytes of the volume containing ``path``.

    Every failure (missing path, permission denial, I/O error, bad path value,
    or a capacity that is not a non-negative 64-bit int) is raised as
    DiskSpaceUnavailable.
    """
    try:
        total = shutil.disk_usage(path).total
    except (OSError, ValueError, TypeError) as e:
        raise DiskSpaceUnavailable(f"cannot stat filesystem for {path!r}: {e}") from e

    if isinstance(total, bool) or not isinstance(total, int):
        raise DiskSpaceUnavailable(f"unexpected capacity type {type(total).__name__}")
    if not 0 <= total <= INT64_MAX:
        raise DiskSpaceUnavailable(f"capacity out of range: {total}")
    return total


def get_total_disk_space(path: Optional[Union[str, Path]] = None) -> int:
    """Total capacity in bytes, or 0 when it cannot be determined.

    Never raises and never logs. A zero result is indistinguishable from a
    failed lookup; callers that need the difference should use
    read_total_capacity().
    """
    target = settings.home_dir if path is None else path
    try:
        return read_total_capacity(target)
    except DiskSpaceUnavailable:
        return 0
