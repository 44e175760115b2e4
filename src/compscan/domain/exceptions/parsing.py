"""Compiled artifact parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from compscan.domain.exceptions.base import CompScanError

if TYPE_CHECKING:
    from pathlib import Path


class ClassFileError(CompScanError):
    """Compiled class file could not be decoded.

    Attributes:
        path: File (or archive member) that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")
