"""Component discovery: scanning containers with strategies.

- Global filters and naming conventions
- Strategy application per container
- Enrichment from declared component details
"""

from compscan.application.discovery.conventions import describe, functional_tags, is_excluded
from compscan.application.discovery.enrichment import apply_enrichment
from compscan.application.discovery.scanner import ComponentScanner, require_components

__all__ = [
    "ComponentScanner",
    "apply_enrichment",
    "describe",
    "functional_tags",
    "is_excluded",
    "require_components",
]
