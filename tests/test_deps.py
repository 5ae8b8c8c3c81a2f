import pytest
from fastapi import HTTPException

from registry_api.core.deps import (
    parse_importance_levels,
    parse_optional_id,
    parse_supply_cycle_range,
)
from registry_api.db.models.enums import ImportanceLevel


@pytest.mark.parametrize("value", [None, "", "all", " all "])
def test_optional_id_no_filter(value):
    assert parse_optional_id(value, "equipmentId") is None


def test_optional_id_parses_integer():
    assert parse_optional_id("12", "equipmentId") == 12


@pytest.mark.parametrize("value", ["x", "0", "-3"])
def test_optional_id_rejects(value):
    with pytest.raises(HTTPException) as info:
        parse_optional_id(value, "equipmentId")
    assert info.value.status_code == 400


def test_importance_levels():
    assert parse_importance_levels("a, B,") == [ImportanceLevel.A, ImportanceLevel.B]
    assert parse_importance_levels("") is None
    with pytest.raises(HTTPException):
        parse_importance_levels("A,Z")


def test_supply_cycle_range():
    assert parse_supply_cycle_range("2, 6") == (2, 6)
    assert parse_supply_cycle_range(None) is None
    with pytest.raises(HTTPException):
        parse_supply_cycle_range("1,2,3")
