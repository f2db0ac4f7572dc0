"""Unit tests for the GraphQL query catalog."""

import re

import pytest

from soapbank_client import queries

TEMPLATES = {
    "impactStatsByPropertyId": queries.IMPACT_STATS_BY_PROPERTY_ID,
    "userById": queries.USER_BY_ID,
    "hubByPropertyId": queries.HUB_BY_PROPERTY_ID,
    "propertiesByUserId": queries.PROPERTIES_BY_USER_ID,
    "pickupsByPropertyId": queries.PICKUPS_BY_PROPERTY_ID,
    "logIn": queries.LOG_IN,
}


def _root_fields(template: str) -> list:
    """Names of fields selected directly under the operation."""
    body = template[template.index("{") + 1 : template.rindex("}")]
    depth = 0
    fields = []
    for token in re.findall(r"[A-Za-z_]\w*|[{}()]", body):
        if token in "{(":
            depth += 1
        elif token in "})":
            depth -= 1
        elif depth == 0:
            fields.append(token)
    return fields


@pytest.mark.parametrize("root_field,template", TEMPLATES.items())
def test_each_template_selects_exactly_one_root_field(root_field, template):
    assert _root_fields(template) == [root_field]


@pytest.mark.parametrize("template", TEMPLATES.values())
def test_braces_are_balanced(template):
    assert template.count("{") == template.count("}")
    assert template.count("(") == template.count(")")


def test_fragments_are_interpolated():
    assert "{ADDRESS_FIELDS}" not in queries.PROPERTY_FIELDS
    assert "postalCode" in queries.HUB_BY_PROPERTY_ID
    assert "soapRecycled" in queries.IMPACT_STATS_BY_PROPERTY_ID


def test_login_declares_token_variable():
    assert "$token: String!" in queries.LOG_IN


def test_input_helpers_stringify_ids():
    assert queries.property_input(4) == {"input": {"propertyId": "4"}}
    assert queries.user_input("7") == {"input": {"userId": "7"}}
