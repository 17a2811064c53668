from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PackageRecord(BaseModel):
    """
    One package entry of the registry document.

    Fields
    - pkgname: package name, unique within a document.
    - version: package version, if known.
    - pkgver: canonical "name-version" string, if known.
    - state: canonical state token (e.g. "installed"); only written through
      `pkgstate.codec.encode_state`.

    Notes
    - Only `pkgname` is checked at load time. `version`, `pkgver` and `state`
      are strings whenever this package writes them, but whatever another
      writer left there is kept as is; a non-string `state` decodes to
      PackageState.UNKNOWN.
    - Keys this model does not know about (other bookkeeping written by the
      package manager) are kept as extras and written back unchanged.
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    pkgname: str = Field(..., description="Package name")
    version: Optional[Any] = Field(default=None, description="Package version")
    pkgver: Optional[Any] = Field(default=None, description="name-version string")
    state: Optional[Any] = Field(default=None, description="Canonical state token")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


# Entries without a string pkgname stay raw: not addressable, but written back.
RegistryEntry = Annotated[Union[PackageRecord, Any], Field(union_mode="left_to_right")]


class RegistryDocument(BaseModel):
    """
    Top-level registry document: `packages` holds the entries in insertion order.

    `packages` is None when a loaded document has no such key; a fresh document
    starts with an empty list. Entries that are not valid records are carried
    through untouched, so one bad entry never costs the others.
    """

    model_config = ConfigDict(extra="allow")

    packages: Optional[List[RegistryEntry]] = None

    @classmethod
    def empty(cls) -> "RegistryDocument":
        """Convenience constructor for a fresh, empty document."""
        return cls(packages=[])

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "RegistryDocument":
        return cls.model_validate(raw)

    def records(self) -> List[PackageRecord]:
        """The addressable records, in document order."""
        return [entry for entry in self.packages or () if isinstance(entry, PackageRecord)]

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
