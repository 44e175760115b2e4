"""Type source over directories of compiled classes and jar archives."""

from __future__ import annotations

import logging
import time
import zipfile
from dataclasses import dataclass
from typing import TYPE_CHECKING

from compscan.domain.exceptions import ClassFileError, ScanTimeoutError
from compscan.domain.ports.type_source import TypeSourcePort
from compscan.infrastructure.classfile import read_class

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from compscan.domain.model.type_info import TypeInfo

logger = logging.getLogger(__name__)

CLASS_SUFFIX = ".class"
ARCHIVE_SUFFIX = ".jar"

# Descriptor files that are not types
_SKIPPED_CLASS_FILES = frozenset({"module-info.class", "package-info.class"})


@dataclass(frozen=True, slots=True)
class ClassDirectoryTypeSource(TypeSourcePort):
    """Reads every class file under a scan root.

    Files are visited in sorted path order so discovery is deterministic.
    Malformed class files are logged and skipped.

    Attributes:
        timeout: Max seconds for one walk. None = unlimited.
        include_archives: Also read .jar files found under the root.
    """

    timeout: float | None = None
    include_archives: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")

    def iter_types(self, root: Path) -> Iterator[TypeInfo]:
        """Yield types from root (directory, .class file or .jar archive).

        Raises:
            ScanTimeoutError: If the walk exceeds timeout
            OSError: If a file cannot be read
        """
        deadline = None if self.timeout is None else time.monotonic() + self.timeout

        if root.is_file():
            paths: list[Path] = [root]
        else:
            paths = sorted(p for p in root.rglob("*") if p.is_file())

        for path in paths:
            if deadline is not None and time.monotonic() > deadline:
                raise ScanTimeoutError(root, self.timeout)  # type: ignore[arg-type]

            if path.suffix == CLASS_SUFFIX:
                if path.name in _SKIPPED_CLASS_FILES:
                    continue
                type_info = self._read(path.read_bytes(), path)
                if type_info is not None:
                    yield type_info
            elif self.include_archives and path.suffix == ARCHIVE_SUFFIX:
                yield from self._iter_archive(path)

    def _iter_archive(self, archive: Path) -> Iterator[TypeInfo]:
        """Yield types from class entries of a jar archive."""
        try:
            with zipfile.ZipFile(archive) as jar:
                names = sorted(
                    n
                    for n in jar.namelist()
                    if n.endswith(CLASS_SUFFIX)
                    and n.rpartition("/")[2] not in _SKIPPED_CLASS_FILES
                    and not n.startswith("META-INF/")
                )
                for name in names:
                    type_info = self._read(jar.read(name), f"{archive}!/{name}")
                    if type_info is not None:
                        yield type_info
        except zipfile.BadZipFile:
            logger.warning("Skipping unreadable archive %s", archive, exc_info=True)

    @staticmethod
    def _read(data: bytes, source: Path | str) -> TypeInfo | None:
        try:
            return read_class(data, source)
        except ClassFileError as e:
            logger.warning("Skipping class file: %s", e)
            return None
