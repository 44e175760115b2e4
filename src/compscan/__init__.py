"""compscan - strategy-driven component discovery and snapshot diffing for compiled codebases."""

__version__ = "0.1.0"

from compscan.application.change_detection import ChangeDetector
from compscan.application.discovery.scanner import ComponentScanner
from compscan.application.snapshot.canonical import content_hash
from compscan.application.snapshot.comparator import compare_snapshots

__all__ = [
    "ChangeDetector",
    "ComponentScanner",
    "compare_snapshots",
    "content_hash",
    "__version__",
]
