"""Scanning exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from compscan.domain.exceptions.base import CompScanError

if TYPE_CHECKING:
    from pathlib import Path


class ScanTimeoutError(CompScanError):
    """Walking a scan root took longer than allowed.

    Attributes:
        root: Scan root being walked
        timeout: Limit in seconds
    """

    def __init__(self, root: Path, timeout: float) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {timeout}")

        self.root = root
        self.timeout = timeout
        super().__init__(f"Scanning {root} exceeded {timeout:g}s")


class NoComponentsError(CompScanError):
    """No component was discovered in any container.

    Raised by CI modes that require a non-empty discovery result.

    Attributes:
        container_count: Number of containers that were scanned
    """

    def __init__(self, container_count: int) -> None:
        if container_count < 0:
            raise ValueError(f"container_count must be >= 0, got {container_count}")

        self.container_count = container_count
        if container_count == 0:
            message = "No containers were scanned"
        else:
            message = f"No components found in any of {container_count} container(s)"
        super().__init__(message)
