"""Tests for domain/model/type_info.py and domain/model/annotation.py."""

import pytest

from compscan.domain.model.annotation import (
    AnnotationEntry,
    ArrayValue,
    ConstantValue,
    ElementValuePair,
    EnumValue,
    to_type_descriptor,
)
from compscan.domain.model.type_info import TypeInfo


class TestTypeInfo:
    """Tests for TypeInfo."""

    def test_from_fqn_derives_name(self) -> None:
        info = TypeInfo.from_fqn("com.acme.billing.Invoice")
        assert info.name == "Invoice"
        assert info.package == "com.acme.billing"

    def test_default_package(self) -> None:
        info = TypeInfo.from_fqn("Main")
        assert info.name == "Main"
        assert info.package == ""

    def test_nested_type(self) -> None:
        info = TypeInfo.from_fqn("com.acme.Outer$Inner")
        assert info.name == "Outer$Inner"
        assert info.is_nested

    def test_fqn_must_end_with_name(self) -> None:
        with pytest.raises(ValueError, match="must end with name"):
            TypeInfo(name="Other", fqn="com.acme.Invoice")

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="type name must not be empty"):
            TypeInfo(name="", fqn="com.acme.Invoice")


class TestAnnotationEntry:
    """Tests for AnnotationEntry and element values."""

    def test_element_lookup(self) -> None:
        entry = AnnotationEntry(
            "Lcom/acme/Service;",
            (ElementValuePair("name", ConstantValue("s", "billing")),),
        )
        assert entry.element("name") == ConstantValue("s", "billing")
        assert entry.element("missing") is None

    def test_str_renders_elements(self) -> None:
        entry = AnnotationEntry(
            "Lcom/acme/Service;",
            (
                ElementValuePair("enabled", ConstantValue("Z", True)),
                ElementValuePair("scope", EnumValue("Lcom/acme/Scope;", "SINGLETON")),
                ElementValuePair("tags", ArrayValue((ConstantValue("s", "a"), ConstantValue("I", 1)))),
            ),
        )
        assert str(entry) == "@Lcom/acme/Service;(enabled=true, scope=SINGLETON, tags=[a, 1])"

    def test_empty_descriptor_raises(self) -> None:
        with pytest.raises(ValueError, match="type_descriptor must not be empty"):
            AnnotationEntry("")

    def test_to_type_descriptor(self) -> None:
        assert to_type_descriptor("com.acme.Service") == "Lcom/acme/Service;"
