"""Tests for domain/matchers/type_matchers.py."""

import pytest

from compscan.domain.matchers import (
    has_annotation,
    has_annotation_property,
    has_name_ending_with,
    has_name_matching,
)
from tests.factories import COMPONENT_ANNOTATION, make_annotation, make_type


class TestHasAnnotation:
    """Tests for has_annotation matcher."""

    def test_matches_annotated_type(self) -> None:
        matcher = has_annotation(COMPONENT_ANNOTATION)
        assert matcher(make_type("com.acme.Service", make_annotation(COMPONENT_ANNOTATION)))

    def test_rejects_type_without_annotation(self) -> None:
        matcher = has_annotation(COMPONENT_ANNOTATION)
        assert not matcher(make_type("com.acme.Service"))

    def test_rejects_other_annotation(self) -> None:
        matcher = has_annotation(COMPONENT_ANNOTATION)
        other = make_annotation("com.acme.Other")
        assert not matcher(make_type("com.acme.Service", other))

    def test_empty_annotation_type_raises(self) -> None:
        with pytest.raises(ValueError, match="annotation type must be supplied"):
            has_annotation("  ")


class TestHasNameMatching:
    """Tests for has_name_matching matcher."""

    def test_full_match_on_fqn(self) -> None:
        matcher = has_name_matching(r"com\.acme\..*Service")
        assert matcher(make_type("com.acme.billing.InvoiceService"))

    def test_partial_match_is_not_enough(self) -> None:
        matcher = has_name_matching(r"Service")
        assert not matcher(make_type("com.acme.InvoiceService"))

    def test_invalid_regex_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid regex"):
            has_name_matching("[unclosed")

    def test_empty_pattern_raises(self) -> None:
        with pytest.raises(ValueError, match="pattern must be supplied"):
            has_name_matching("")


class TestHasNameEndingWith:
    """Tests for has_name_ending_with matcher."""

    def test_simple_name_suffix(self) -> None:
        matcher = has_name_ending_with("Factory")
        assert matcher(make_type("com.acme.ConnectionFactory"))

    def test_package_is_not_considered(self) -> None:
        matcher = has_name_ending_with("Factory")
        assert not matcher(make_type("com.Factory.Connection"))

    def test_empty_suffix_raises(self) -> None:
        with pytest.raises(ValueError, match="suffix must be supplied"):
            has_name_ending_with("")


class TestHasAnnotationProperty:
    """Tests for has_annotation_property matcher."""

    @pytest.fixture
    def matcher(self):
        return has_annotation_property(COMPONENT_ANNOTATION, "connector", "property")

    def test_matches_property_prefix(self, matcher) -> None:
        annotation = make_annotation(
            COMPONENT_ANNOTATION, property=["version=2.1", "connector=isma.himsa"]
        )
        assert matcher(make_type("com.acme.HimsaConnector", annotation))

    def test_rejects_missing_property(self, matcher) -> None:
        annotation = make_annotation(COMPONENT_ANNOTATION, property=["version=2.1"])
        assert not matcher(make_type("com.acme.HimsaConnector", annotation))

    def test_rejects_name_without_equals(self, matcher) -> None:
        annotation = make_annotation(COMPONENT_ANNOTATION, property=["connector"])
        assert not matcher(make_type("com.acme.HimsaConnector", annotation))

    def test_rejects_non_array_element(self, matcher) -> None:
        annotation = make_annotation(COMPONENT_ANNOTATION, property="connector=x")
        assert not matcher(make_type("com.acme.HimsaConnector", annotation))

    def test_rejects_missing_element(self, matcher) -> None:
        annotation = make_annotation(COMPONENT_ANNOTATION, service="x")
        assert not matcher(make_type("com.acme.HimsaConnector", annotation))

    def test_rejects_type_without_annotation(self, matcher) -> None:
        assert not matcher(make_type("com.acme.HimsaConnector"))

    def test_only_first_entry_is_inspected(self, matcher) -> None:
        first = make_annotation(COMPONENT_ANNOTATION, property=["version=1"])
        second = make_annotation(COMPONENT_ANNOTATION, property=["connector=x"])
        assert not matcher(make_type("com.acme.HimsaConnector", first, second))

    @pytest.mark.parametrize(
        ("annotation_type", "property_name", "annotation_property"),
        [
            ("", "connector", "property"),
            (COMPONENT_ANNOTATION, "", "property"),
            (COMPONENT_ANNOTATION, "connector", ""),
        ],
    )
    def test_empty_argument_raises(
        self, annotation_type: str, property_name: str, annotation_property: str
    ) -> None:
        with pytest.raises(ValueError, match="must be supplied"):
            has_annotation_property(annotation_type, property_name, annotation_property)
