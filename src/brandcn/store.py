"""Directory-backed logo stores.

A store is a directory of ``<identifier>.svg`` files. The bundled library is
only ever read; the project's target directory is written to. Listings and
membership checks hit the file system on every call.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from pathlib import Path

from brandcn.config.constants import LOGO_EXT
from brandcn.config.logging import get_logger
from brandcn.exceptions import LogoCopyError, LogoNotFoundError, StoreReadError

logger = get_logger(__name__)

LatencyHook = Callable[[], float]


class LogoStore:
    """A directory of SVG logos keyed by filename stem."""

    def __init__(self, directory: Path, latency: LatencyHook | None = None):
        """Initialize the store.

        Args:
            directory: Directory holding ``<identifier>.svg`` files. It does
                not need to exist yet for a target store.
            latency: Optional hook returning seconds to wait before each
                existence check; used to emulate a remote library.
        """
        self.directory = Path(directory)
        self._latency = latency

    def __repr__(self) -> str:
        return f"LogoStore({str(self.directory)!r})"

    def path_for(self, logo_name: str) -> Path:
        return self.directory / f"{logo_name}{LOGO_EXT}"

    def _wait(self) -> None:
        if self._latency is None:
            return
        delay = self._latency()
        if delay > 0:
            time.sleep(delay)

    def list_logos(self) -> list[str]:
        """List identifiers in the store, sorted, without the extension.

        Raises:
            StoreReadError: If the directory cannot be listed.
        """
        try:
            entries = list(self.directory.iterdir())
        except OSError as e:
            raise StoreReadError(f"Failed to read library directory: {e}") from e
        names = [p.name[: -len(LOGO_EXT)] for p in entries if p.name.endswith(LOGO_EXT)]
        names.sort()
        logger.debug("Listed %d logos in %s", len(names), self.directory)
        return names

    def exists(self, logo_name: str) -> bool:
        """Check whether ``<logo_name>.svg`` is present right now."""
        self._wait()
        return self.path_for(logo_name).is_file()

    def directory_exists(self) -> bool:
        return self.directory.is_dir()

    def ensure_directory(self) -> None:
        """Create the store directory (and parents) if missing."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def copy_to(self, logo_name: str, target: LogoStore) -> Path:
        """Copy one logo into ``target`` without overwriting.

        Args:
            logo_name: Identifier to copy.
            target: Destination store.

        Returns:
            Path of the written file.

        Raises:
            LogoNotFoundError: If the logo is not in this store.
            LogoCopyError: If the destination cannot be written or already
                has a file with that name.
        """
        if not self.exists(logo_name):
            raise LogoNotFoundError(f'Logo "{logo_name}{LOGO_EXT}" not found in library')

        src = self.path_for(logo_name)
        dest = target.path_for(logo_name)
        try:
            target.ensure_directory()
            # "x" refuses to replace a file that appeared after the caller's check
            fdest = open(dest, "xb")
        except FileExistsError as e:
            raise LogoCopyError(
                f'Logo "{logo_name}{LOGO_EXT}" already exists in {target.directory}'
            ) from e
        except OSError as e:
            raise LogoCopyError(f'Failed to copy "{logo_name}{LOGO_EXT}": {e.strerror or e}') from e

        try:
            with fdest, open(src, "rb") as fsrc:
                shutil.copyfileobj(fsrc, fdest)
        except OSError as e:
            # A partial file would be skipped as "already exists" on the next run
            dest.unlink(missing_ok=True)
            raise LogoCopyError(f'Failed to copy "{logo_name}{LOGO_EXT}": {e.strerror or e}') from e

        logger.debug("Copied %s -> %s", src, dest)
        return dest
