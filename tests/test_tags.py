"""Tests for OSM tag interpretation."""

from __future__ import annotations

import pytest

from cycle_parking.tags import (
    ACCESS_LABELS,
    implies_covered,
    is_hangar_operator,
    normalize_boolean_like,
    resolve_access_label,
)


class TestNormalizeBooleanLike:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("yes", "Yes"), ("no", "No"), ("partial", "Partially")],
    )
    def test_known_values(self, value: str, expected: str) -> None:
        assert normalize_boolean_like(value) == expected

    def test_other_values_pass_through(self) -> None:
        assert normalize_boolean_like("seasonal") == "seasonal"
        assert normalize_boolean_like("Yes") == "Yes"

    def test_none_passes_through(self) -> None:
        assert normalize_boolean_like(None) is None


class TestResolveAccessLabel:
    def test_private_students(self) -> None:
        assert resolve_access_label("private", "students") == "Students only"

    def test_private_employees(self) -> None:
        assert resolve_access_label("private", "employees") == "Employees only"

    def test_customers_without_private(self) -> None:
        assert resolve_access_label("customers", None) == "Customers only"

    def test_members(self) -> None:
        assert resolve_access_label("members") == "Members only"

    def test_private_with_unknown_refinement(self) -> None:
        assert resolve_access_label("private", "residents") == "Private"

    def test_unknown_access_is_none(self) -> None:
        assert resolve_access_label("yes", "students") is None

    def test_missing_access_is_none(self) -> None:
        assert resolve_access_label(None, None) is None

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            ACCESS_LABELS["public"] = "Public"  # type: ignore[index]


class TestClassification:
    @pytest.mark.parametrize("name", ["Falco", "Cyclehoop"])
    def test_hangar_operators(self, name: str) -> None:
        assert is_hangar_operator(name) is True

    @pytest.mark.parametrize("name", ["falco", "CYCLEHOOP", "Sheffield City Council", "", None])
    def test_not_hangar_operators(self, name) -> None:
        assert is_hangar_operator(name) is False

    @pytest.mark.parametrize("kind", ["shed", "building"])
    def test_implied_covered(self, kind: str) -> None:
        assert implies_covered(kind) is True

    @pytest.mark.parametrize("kind", ["stands", "wall_loops", None])
    def test_not_implied_covered(self, kind) -> None:
        assert implies_covered(kind) is False
