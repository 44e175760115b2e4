"""Declarative configuration loading."""

from compscan.infrastructure.config.loader import load_configuration, parse_configuration
from compscan.infrastructure.config.schema import CONFIGURATION_SCHEMA

__all__ = [
    "CONFIGURATION_SCHEMA",
    "load_configuration",
    "parse_configuration",
]
