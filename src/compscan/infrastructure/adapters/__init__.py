"""Infrastructure adapters implementing domain ports."""

from compscan.infrastructure.adapters.class_directory import ClassDirectoryTypeSource

__all__ = ["ClassDirectoryTypeSource"]
