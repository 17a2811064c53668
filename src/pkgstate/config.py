from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pkgcommon import fsutil


# Environment variable names for convenience configuration
ENV_ROOTDIR = "PKGSTATE_ROOTDIR"
ENV_COMPRESS = "PKGSTATE_COMPRESS"

DEFAULT_METADIR = "var/db/xbps"
DEFAULT_REGPKGDB = "regpkgdb.plist"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.environ.get(name)
    return val if val not in (None, "") else default


def _parse_bool(s: str) -> bool:
    return s.strip().lower() not in ("0", "false", "no", "off")


class RegistryConfig(BaseModel):
    """
    Explicit context passed to every registry operation.

    Fields
    - rootdir: root directory the package manager operates on ("/" on a live system).
    - metadir: metadata subdirectory below `rootdir`.
    - regpkgdb: registry file name inside `metadir`.
    - compress: write the registry file gzip-compressed.

    Environment variables (optional, via `from_env`)
    - `PKGSTATE_ROOTDIR`:  root directory (required when using `from_env`)
    - `PKGSTATE_COMPRESS`: "0"/"false" to write uncompressed files
    """

    model_config = ConfigDict(frozen=True)

    rootdir: Path = Field(..., description="Root directory")
    metadir: str = Field(default=DEFAULT_METADIR, description="Metadata subdirectory")
    regpkgdb: str = Field(default=DEFAULT_REGPKGDB, description="Registry file name")
    compress: bool = Field(default=True, description="gzip-compress on write")

    # -------- Construction helpers --------
    @classmethod
    def from_env(cls) -> "RegistryConfig":
        rootdir = _getenv(ENV_ROOTDIR)
        if not rootdir:
            raise RuntimeError(
                f"Missing required environment variables for package state registry: {ENV_ROOTDIR}"
            )
        compress = _getenv(ENV_COMPRESS)
        if compress is None:
            return cls(rootdir=Path(rootdir))
        return cls(rootdir=Path(rootdir), compress=_parse_bool(compress))

    # -------- Derived paths --------
    @property
    def metadir_path(self) -> Path:
        return fsutil.join(self.rootdir, self.metadir)

    @property
    def regpkgdb_path(self) -> Path:
        return fsutil.join(self.metadir_path, self.regpkgdb)
