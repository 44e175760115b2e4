"""Type source port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from compscan.domain.model.type_info import TypeInfo


class TypeSourcePort(ABC):
    """Port for reading compiled type metadata.

    Infrastructure layer must provide implementation
    (e.g., a class-file reader over a directory of compiled classes).
    """

    @abstractmethod
    def iter_types(self, root: Path) -> Iterator[TypeInfo]:
        """Yield every compiled type found under root.

        Args:
            root: Scan root (existing directory or archive)

        Yields:
            TypeInfo per compiled type

        Raises:
            ScanTimeoutError: If the walk exceeds the source's time limit
        """
        ...
