"""Minimal JVM class-file reader.

Decodes only what component discovery needs: the constant pool, the class
name and the class-level annotation attributes. Fields, methods and all
other attributes are skipped by length.
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

from compscan.domain.exceptions import ClassFileError
from compscan.domain.model.annotation import (
    AnnotationEntry,
    ArrayValue,
    ClassValue,
    ConstantValue,
    ElementValue,
    ElementValuePair,
    EnumValue,
    NestedAnnotationValue,
)
from compscan.domain.model.type_info import TypeInfo

if TYPE_CHECKING:
    from pathlib import Path

MAGIC = 0xCAFEBABE

# Constant pool tags
CONSTANT_UTF8 = 1
CONSTANT_INTEGER = 3
CONSTANT_FLOAT = 4
CONSTANT_LONG = 5
CONSTANT_DOUBLE = 6
CONSTANT_CLASS = 7

# Payload size of every constant that is not Utf8
_CONSTANT_SIZES: dict[int, int] = {
    3: 4,  # Integer
    4: 4,  # Float
    5: 8,  # Long (two slots)
    6: 8,  # Double (two slots)
    7: 2,  # Class
    8: 2,  # String
    9: 4,  # Fieldref
    10: 4,  # Methodref
    11: 4,  # InterfaceMethodref
    12: 4,  # NameAndType
    15: 3,  # MethodHandle
    16: 2,  # MethodType
    17: 4,  # Dynamic
    18: 4,  # InvokeDynamic
    19: 2,  # Module
    20: 2,  # Package
}

VISIBLE_ANNOTATIONS = "RuntimeVisibleAnnotations"
INVISIBLE_ANNOTATIONS = "RuntimeInvisibleAnnotations"

ACC_MODULE = 0x8000


def decode_modified_utf8(raw: bytes) -> str:
    """Decode JVM modified UTF-8 (encoded NUL, surrogate pairs as two code points)."""
    text = raw.replace(b"\xc0\x80", b"\x00").decode("utf-8", errors="surrogatepass")
    return text.encode("utf-16", errors="surrogatepass").decode("utf-16")


class _ByteReader:
    """Big-endian cursor over class-file bytes."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def u1(self) -> int:
        return self._unpack(">B", 1)

    def u2(self) -> int:
        return self._unpack(">H", 2)

    def u4(self) -> int:
        return self._unpack(">I", 4)

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise EOFError(f"need {size} byte(s) at offset {self._pos}")
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def skip(self, size: int) -> None:
        self.take(size)

    def _unpack(self, fmt: str, size: int) -> int:
        (value,) = struct.unpack(fmt, self.take(size))
        return value


class _ConstantPool:
    """Decoded constant pool. Index 0 and the second slot of wide constants are None."""

    def __init__(self, reader: _ByteReader) -> None:
        count = reader.u2()
        self._entries: list[tuple[int, object] | None] = [None] * count
        index = 1
        while index < count:
            tag = reader.u1()
            if tag == CONSTANT_UTF8:
                self._entries[index] = (tag, decode_modified_utf8(reader.take(reader.u2())))
            elif tag in _CONSTANT_SIZES:
                self._entries[index] = (tag, reader.take(_CONSTANT_SIZES[tag]))
            else:
                raise ValueError(f"unknown constant pool tag {tag} at index {index}")
            index += 2 if tag in (CONSTANT_LONG, CONSTANT_DOUBLE) else 1

    def _entry(self, index: int, expected: int) -> object:
        entry = self._entries[index] if 0 < index < len(self._entries) else None
        if entry is None or entry[0] != expected:
            raise ValueError(f"constant #{index} is not of tag {expected}")
        return entry[1]

    def utf8(self, index: int) -> str:
        return self._entry(index, CONSTANT_UTF8)  # type: ignore[return-value]

    def class_name(self, index: int) -> str:
        (name_index,) = struct.unpack(">H", self._entry(index, CONSTANT_CLASS))  # type: ignore[arg-type]
        return self.utf8(name_index)

    def int32(self, index: int) -> int:
        (value,) = struct.unpack(">i", self._entry(index, CONSTANT_INTEGER))  # type: ignore[arg-type]
        return value

    def int64(self, index: int) -> int:
        (value,) = struct.unpack(">q", self._entry(index, CONSTANT_LONG))  # type: ignore[arg-type]
        return value

    def float32(self, index: int) -> float:
        (value,) = struct.unpack(">f", self._entry(index, CONSTANT_FLOAT))  # type: ignore[arg-type]
        return value

    def float64(self, index: int) -> float:
        (value,) = struct.unpack(">d", self._entry(index, CONSTANT_DOUBLE))  # type: ignore[arg-type]
        return value


def _read_element_value(
    reader: _ByteReader,
    pool: _ConstantPool,
    *,
    runtime_visible: bool,
) -> ElementValue:
    """Read one element value. Nested annotations inherit runtime_visible."""
    tag = chr(reader.u1())
    match tag:
        case "B" | "I" | "S":
            return ConstantValue(tag, pool.int32(reader.u2()))
        case "C":
            return ConstantValue(tag, chr(pool.int32(reader.u2())))
        case "Z":
            return ConstantValue(tag, pool.int32(reader.u2()) != 0)
        case "J":
            return ConstantValue(tag, pool.int64(reader.u2()))
        case "F":
            return ConstantValue(tag, pool.float32(reader.u2()))
        case "D":
            return ConstantValue(tag, pool.float64(reader.u2()))
        case "s":
            return ConstantValue(tag, pool.utf8(reader.u2()))
        case "e":
            type_descriptor = pool.utf8(reader.u2())
            return EnumValue(type_descriptor, pool.utf8(reader.u2()))
        case "c":
            return ClassValue(pool.utf8(reader.u2()))
        case "@":
            return NestedAnnotationValue(_read_annotation(reader, pool, runtime_visible=runtime_visible))
        case "[":
            count = reader.u2()
            return ArrayValue(
                tuple(
                    _read_element_value(reader, pool, runtime_visible=runtime_visible)
                    for _ in range(count)
                )
            )
        case _:
            raise ValueError(f"unknown element value tag {tag!r}")


def _read_annotation(
    reader: _ByteReader,
    pool: _ConstantPool,
    *,
    runtime_visible: bool,
) -> AnnotationEntry:
    type_descriptor = pool.utf8(reader.u2())
    pairs = []
    for _ in range(reader.u2()):
        name = pool.utf8(reader.u2())
        value = _read_element_value(reader, pool, runtime_visible=runtime_visible)
        pairs.append(ElementValuePair(name, value))
    return AnnotationEntry(type_descriptor, tuple(pairs), runtime_visible)


def _skip_members(reader: _ByteReader) -> None:
    """Skip fields or methods table."""
    for _ in range(reader.u2()):
        reader.skip(6)  # access_flags, name_index, descriptor_index
        for _ in range(reader.u2()):
            reader.skip(2)
            reader.skip(reader.u4())


def _parse(data: bytes) -> tuple[str, int, tuple[AnnotationEntry, ...]]:
    reader = _ByteReader(data)
    if reader.u4() != MAGIC:
        raise ValueError("bad magic number")
    reader.skip(4)  # minor_version, major_version

    pool = _ConstantPool(reader)
    access_flags = reader.u2()
    internal_name = pool.class_name(reader.u2())
    reader.skip(2)  # super_class
    reader.skip(2 * reader.u2())  # interfaces
    _skip_members(reader)  # fields
    _skip_members(reader)  # methods

    annotations: list[AnnotationEntry] = []
    for _ in range(reader.u2()):
        attribute_name = pool.utf8(reader.u2())
        body = _ByteReader(reader.take(reader.u4()))
        if attribute_name in (VISIBLE_ANNOTATIONS, INVISIBLE_ANNOTATIONS):
            visible = attribute_name == VISIBLE_ANNOTATIONS
            for _ in range(body.u2()):
                annotations.append(_read_annotation(body, pool, runtime_visible=visible))

    return internal_name, access_flags, tuple(annotations)


def read_class(data: bytes, source: Path | str) -> TypeInfo | None:
    """Read type metadata from class-file bytes.

    Args:
        data: Complete class-file content
        source: File or archive member name (for error reporting)

    Returns:
        TypeInfo, or None for module descriptors (module-info)

    Raises:
        ClassFileError: If data is not a well-formed class file
    """
    try:
        internal_name, access_flags, annotations = _parse(data)
    except (EOFError, ValueError, struct.error) as e:
        raise ClassFileError(source, str(e)) from e

    if access_flags & ACC_MODULE:
        return None

    return TypeInfo.from_fqn(internal_name.replace("/", "."), annotations)
