"""Tests for domain/model/enums.py."""

import pytest

from compscan.domain.model.enums import StrategyKind


class TestStrategyKindParse:
    """Tests for StrategyKind.parse()."""

    @pytest.mark.parametrize("kind", list(StrategyKind))
    def test_parses_own_value(self, kind: StrategyKind) -> None:
        assert StrategyKind.parse(kind.value) is kind

    def test_custom_annotation_alias(self) -> None:
        assert StrategyKind.parse("CUSTOM_ANNOTATION") is StrategyKind.ANNOTATION_PROPERTY

    def test_unknown_kind_lists_known_ones(self) -> None:
        with pytest.raises(ValueError, match="unknown strategy type 'PACKAGE'.*NAME_SUFFIX"):
            StrategyKind.parse("PACKAGE")


class TestProvenanceTag:
    """Tests for StrategyKind.provenance_tag."""

    @pytest.mark.parametrize(
        ("kind", "tag"),
        [
            (StrategyKind.ANNOTATION, "Annotated"),
            (StrategyKind.ANNOTATION_PROPERTY, "Annotated"),
            (StrategyKind.REGEX, "Pattern-Matched"),
            (StrategyKind.NAME_SUFFIX, "Convention-Based"),
        ],
    )
    def test_tag_per_kind(self, kind: StrategyKind, tag: str) -> None:
        assert kind.provenance_tag == tag
