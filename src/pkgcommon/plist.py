from __future__ import annotations

import gzip
import os
import plistlib
import zlib
from pathlib import Path
from typing import Any, Dict
from xml.parsers.expat import ExpatError


GZIP_MAGIC = b"\x1f\x8b"


class DocumentError(ValueError):
    """Raised when a document cannot be parsed or serialized."""


def _dump_document(doc: Dict[str, Any]) -> bytes:
    # Deterministic XML: stable key order
    try:
        return plistlib.dumps(doc, fmt=plistlib.FMT_XML, sort_keys=True)
    except (TypeError, OverflowError) as ex:
        raise DocumentError(f"Document is not serializable as a property list: {ex}") from ex


def _load_document(data: bytes) -> Dict[str, Any]:
    if data.startswith(GZIP_MAGIC):
        try:
            data = gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as ex:
            raise DocumentError("Failed to decompress document") from ex
    try:
        raw = plistlib.loads(data)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as ex:
        raise DocumentError("Failed to parse property list") from ex
    if not isinstance(raw, dict):
        raise DocumentError(f"Expected a dictionary at top level, got {type(raw).__name__}")
    return raw


def load_document(path: os.PathLike[str] | str) -> Dict[str, Any]:
    """Read a dictionary document from `path`.

    Plain and gzip-compressed files are both accepted.

    Raises:
    - OSError if the file cannot be read (FileNotFoundError when absent).
    - DocumentError if the content is not a property-list dictionary.
    """
    with Path(path).open("rb") as f:
        data = f.read()
    return _load_document(data)


def save_document(doc: Dict[str, Any], path: os.PathLike[str] | str, *, compress: bool = True) -> None:
    """Serialize `doc` and overwrite `path` with it.

    The whole document is written in one go; there is no append mode.
    `mtime=0` keeps compressed output byte-stable for identical documents.
    """
    payload = _dump_document(doc)
    if compress:
        payload = gzip.compress(payload, mtime=0)
    with Path(path).open("wb") as f:
        f.write(payload)
