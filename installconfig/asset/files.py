"""Asset files: fetching persisted documents and writing generated ones.

The loader only depends on the :class:`FileFetcher` protocol.  A fetcher
signals a missing file by raising :class:`FileNotFoundError`; any other
exception is treated as a transport failure.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

logger = logging.getLogger(__name__)

#: Environment variable overriding the default asset directory.
ASSET_DIR_ENV = "OPENSHIFT_INSTALL_DIR"


@dataclass(frozen=True)
class AssetFile:
    """A named blob of asset content."""

    filename: str
    data: bytes


class FileFetcher(Protocol):
    """Anything that can return an :class:`AssetFile` by name."""

    def fetch_by_name(self, name: str) -> AssetFile:
        ...


# ---------------------------------------------------------------------------
# Directory resolution
# ---------------------------------------------------------------------------


def asset_dir(directory: Optional[Union[str, Path]] = None) -> Path:
    """Return the asset directory.

    Precedence: explicit *directory* → ``OPENSHIFT_INSTALL_DIR`` → current
    working directory.
    """
    if directory:
        return Path(directory)
    env = os.environ.get(ASSET_DIR_ENV, "")
    if env:
        return Path(env)
    return Path.cwd()


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------


class DirectoryFetcher:
    """Fetch asset files from a directory on the local filesystem."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def fetch_by_name(self, name: str) -> AssetFile:
        """Read *name* from the directory.

        Raises :class:`FileNotFoundError` when it does not exist and other
        :class:`OSError` subclasses on read failures.
        """
        path = self.directory / name
        data = path.read_bytes()
        logger.debug("Fetched %s (%d bytes)", path, len(data))
        return AssetFile(filename=name, data=data)

    def __repr__(self) -> str:
        return f"DirectoryFetcher({str(self.directory)!r})"


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def _safe_filename(name: str) -> str:
    """Reject names that would escape the asset directory."""
    if not name or Path(name).is_absolute() or ".." in Path(name).parts:
        raise ValueError(f"invalid asset filename: {name!r}")
    return name


def write_asset_files(files: Iterable[AssetFile], directory: Union[str, Path]) -> List[Path]:
    """Write each of *files* under *directory* and return the written paths."""
    base = Path(directory)
    written: List[Path] = []
    for asset_file in files:
        dest = base / _safe_filename(asset_file.filename)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(asset_file.data)
        logger.info("Asset written to %s", dest)
        written.append(dest)
    return written
