"""Tests for the bundled food catalog."""

import pytest

from nutrition_advisor.services.catalog import DEFAULT_FOODS, default_catalog


def test_catalog_keeps_insertion_order() -> None:
    catalog = default_catalog()

    assert catalog.names()[:5] == ["김치찌개", "샐러드", "닭가슴살", "밥", "치킨"]


def test_catalog_is_read_only() -> None:
    catalog = default_catalog()

    with pytest.raises(TypeError):
        catalog.foods["피자"] = DEFAULT_FOODS["밥"]  # type: ignore[index]


def test_chicken_entry_values() -> None:
    record = default_catalog().get("치킨")

    assert record is not None
    assert record.calories == 250
    assert record.protein == 25.0
    assert record.minerals.calcium == 20


def test_get_is_exact_match_only() -> None:
    catalog = default_catalog()

    assert catalog.get(" 치킨") is None
    assert catalog.get("chicken") is None
