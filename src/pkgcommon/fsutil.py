from __future__ import annotations

import errno
import os
from pathlib import Path


DEFAULT_DIR_MODE = 0o755


def join(base: os.PathLike[str] | str, *parts: str) -> Path:
    """Join path segments below `base`.

    Segments are treated as relative even when they carry a leading slash,
    so a metadata subpath like "/var/db/xbps" stays inside the root.
    """
    path = Path(base)
    for part in parts:
        path = path / str(part).lstrip("/")
    return path


def exists(path: os.PathLike[str] | str) -> bool:
    return Path(path).exists()


def mkpath(path: os.PathLike[str] | str, mode: int = DEFAULT_DIR_MODE) -> Path:
    """Create `path` and any missing parents, each with `mode` (minus umask).

    An already existing directory is not an error. Any other OSError
    (permissions, a regular file in the way, read-only filesystem)
    propagates unchanged so callers can inspect `errno`.
    """
    p = Path(path)
    missing = []
    cur = p
    while not cur.exists() and cur.parent != cur:
        missing.append(cur)
        cur = cur.parent

    for d in reversed(missing):
        try:
            d.mkdir(mode=mode)
        except FileExistsError:
            # created concurrently; fine as long as it is a directory
            if not d.is_dir():
                raise

    if not p.is_dir():
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(p))
    return p
