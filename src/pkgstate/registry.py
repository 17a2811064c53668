from __future__ import annotations

import errno
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pkgcommon import fsutil
from pkgcommon.plist import DocumentError, load_document, save_document

from .codec import PackageState
from .config import RegistryConfig
from .errors import InvalidValueError, RegistryFilesystemError, RegistryOutOfMemoryError
from .models import PackageRecord, RegistryDocument
from .records import find_by_name, set_state


logger = logging.getLogger(__name__)


class StateRegistry:
    """
    On-disk registry of package states, one property-list file per root.

    Usage
    - `apply(pkgname, version, pkgver, state)` runs a full transaction:
      load (or start fresh), locate or create the record, set its state,
      ensure the metadata directory exists and rewrite the whole file.
    - `read()` returns the current document. A missing, unreadable or
      invalid file yields `RegistryDocument.empty()`.
    - `write(document)` creates the metadata directory if needed and
      overwrites the registry file with `document`.

    Notes
    - Nothing is cached between calls; every `apply` reloads the file.
    - There is no locking. Two writers racing on the same root can lose
      an update, since the last full rewrite wins.
    """

    def __init__(self, config: RegistryConfig) -> None:
        self._config = config

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def metadir(self) -> Path:
        return self._config.metadir_path

    @property
    def path(self) -> Path:
        return self._config.regpkgdb_path

    # -------- Core operations --------
    def read(self) -> RegistryDocument:
        """Load the registry document, falling back to a fresh one.

        A file that exists but cannot be parsed is discarded the same way
        as an absent one; a warning is logged so the loss is visible.
        """
        try:
            raw = load_document(self.path)
        except FileNotFoundError:
            return RegistryDocument.empty()
        except (OSError, DocumentError) as ex:
            logger.warning("discarding unreadable registry file %s: %s", self.path, ex)
            return RegistryDocument.empty()

        try:
            return RegistryDocument.from_dict(raw)
        except ValidationError as ex:
            logger.warning("discarding invalid registry file %s: %s", self.path, ex)
            return RegistryDocument.empty()

    def write(self, document: RegistryDocument) -> None:
        """Ensure the metadata directory exists, then rewrite the registry file.

        Raises:
        - RegistryFilesystemError if the directory cannot be created or the
          file cannot be written.
        """
        if not fsutil.exists(self.metadir):
            try:
                fsutil.mkpath(self.metadir)
            except OSError as ex:
                logger.debug("[pkgstate] failed to create metadir %s: %s", self.metadir, ex)
                raise RegistryFilesystemError.from_oserror("Failed to create metadata directory", ex) from ex

        try:
            save_document(document.to_dict(), self.path, compress=self._config.compress)
        except OSError as ex:
            logger.debug("[pkgstate] cannot write plist '%s': %s", self.path, ex)
            raise RegistryFilesystemError.from_oserror("Failed to write registry file", ex) from ex
        except DocumentError as ex:
            logger.debug("[pkgstate] cannot serialize plist '%s': %s", self.path, ex)
            raise RegistryFilesystemError(
                f"Failed to serialize registry file: {ex}", errno=errno.EINVAL, filename=str(self.path)
            ) from ex

    def apply(
        self,
        pkgname: str,
        version: Optional[str],
        pkgver: Optional[str],
        state: PackageState,
    ) -> PackageRecord:
        """Set the state of `pkgname` and persist the registry.

        `version` and `pkgver` are only recorded when the package is new to
        the registry; an existing record keeps its own values.

        Returns the record as written.

        Raises:
        - InvalidValueError if `pkgname` is empty.
        - InvalidStateError if `state` cannot be encoded (nothing is written).
        - RegistryFilesystemError on directory creation or write failure.
        - RegistryOutOfMemoryError if an allocation fails along the way.
        """
        if not pkgname:
            raise InvalidValueError("pkgname is required")
        try:
            return self._apply(pkgname, version, pkgver, state)
        except MemoryError as ex:
            raise RegistryOutOfMemoryError(f"Out of memory while updating state of {pkgname}") from ex

    def _apply(
        self,
        pkgname: str,
        version: Optional[str],
        pkgver: Optional[str],
        state: PackageState,
    ) -> PackageRecord:
        document = self.read()

        record = find_by_name(document, pkgname)
        is_new = record is None
        if record is None:
            record = PackageRecord(pkgname=pkgname, version=version, pkgver=pkgver)

        set_state(record, state)

        if is_new:
            if document.packages is None:
                document.packages = []
            document.packages.append(record)

        self.write(document)
        return record


# -------- Convenience top-level helpers --------
def set_pkg_state_installed(
    config: RegistryConfig,
    pkgname: str,
    version: Optional[str],
    pkgver: Optional[str],
    state: PackageState,
) -> PackageRecord:
    registry = StateRegistry(config)
    return registry.apply(pkgname, version, pkgver, state)
