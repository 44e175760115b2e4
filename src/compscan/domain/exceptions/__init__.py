"""Domain exceptions."""

from compscan.domain.exceptions.base import CompScanError
from compscan.domain.exceptions.configuration import (
    ConfigurationError,
    DuplicateComponentError,
    StrategyValidationError,
)
from compscan.domain.exceptions.parsing import ClassFileError
from compscan.domain.exceptions.scanning import NoComponentsError, ScanTimeoutError

__all__ = [
    "CompScanError",
    "ConfigurationError",
    "StrategyValidationError",
    "DuplicateComponentError",
    "ClassFileError",
    "ScanTimeoutError",
    "NoComponentsError",
]
