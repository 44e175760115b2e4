"""JVM class-file decoding."""

from compscan.infrastructure.classfile.reader import decode_modified_utf8, read_class

__all__ = [
    "decode_modified_utf8",
    "read_class",
]
