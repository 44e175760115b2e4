"""Strategy registry: validation and matcher creation."""

from compscan.application.strategies.registry import (
    CONTAINER_KEY,
    REQUIRED_PARAMETERS,
    build_matcher,
    create_matcher,
    validate,
    validate_all,
)

__all__ = [
    "CONTAINER_KEY",
    "REQUIRED_PARAMETERS",
    "build_matcher",
    "create_matcher",
    "validate",
    "validate_all",
]
