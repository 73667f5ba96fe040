"""Identifier, key and reference naming tests."""

from __future__ import annotations

import pytest

from oas_proptypes.core.naming import ComponentNamer, format_property_key, get_ref_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("widget", "WidgetPropTypes"),
        ("User", "UserPropTypes"),
        ("petStore", "PetStorePropTypes"),
        ("x", "XPropTypes"),
        ("2fa", "2faPropTypes"),
        ("", "PropTypes"),
    ],
)
def test_component_name_capitalizes_first_character(name: str, expected: str) -> None:
    assert ComponentNamer().component_name(name) == expected


def test_component_name_uses_configured_suffix() -> None:
    namer = ComponentNamer(suffix="Shape")

    assert namer.component_name("order") == "OrderShape"
    assert namer.reference_name("#/components/schemas/order") == "OrderShape"


def test_reset_picks_up_new_suffix() -> None:
    namer = ComponentNamer()
    assert namer.component_name("order") == "OrderPropTypes"

    namer.suffix = "Type"
    namer.reset()

    assert namer.component_name("order") == "OrderType"


@pytest.mark.parametrize(
    ("ref", "expected"),
    [
        ("#/components/schemas/widget", "widget"),
        ("#/definitions/Pet", "Pet"),
        ("widget", "widget"),
        ("#/components/schemas/", ""),
    ],
)
def test_get_ref_name_returns_last_segment(ref: str, expected: str) -> None:
    assert get_ref_name(ref) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("name", "name"),
        ("createdAt", "createdAt"),
        ("created_at", "'created_at'"),
        ("line2", "'line2'"),
        ("x-rate-limit", "'x-rate-limit'"),
        ("", ""),
        ("it's", "'it\\'s'"),
        ("back\\slash", "'back\\\\slash'"),
        ("café", "'café'"),
        ("a\nb", "'a\\nb'"),
        ("a\r\nb", "'a\\r\\nb'"),
        ("a\u2028b\u2029", "'a\\u2028b\\u2029'"),
    ],
)
def test_format_property_key(name: str, expected: str) -> None:
    assert format_property_key(name) == expected


def test_find_collisions_reports_only_shared_identifiers() -> None:
    collisions = ComponentNamer().find_collisions(["user", "User", "order"])

    assert collisions == {"UserPropTypes": ["user", "User"]}
