from __future__ import annotations

from typing import Optional

from .config import RegistryConfig
from .models import PackageRecord, RegistryDocument
from .records import find_by_name
from .registry import StateRegistry


def load_installed_document(config: RegistryConfig) -> RegistryDocument:
    """Load the live installed-package document for `config.rootdir`."""
    return StateRegistry(config).read()


def find_installed_record(config: RegistryConfig, pkgname: str) -> Optional[PackageRecord]:
    """Return the installed record for `pkgname`, or None when it is not registered."""
    return find_by_name(load_installed_document(config), pkgname)
