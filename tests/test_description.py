"""describe_filter tests: lock the rendered text."""

from contact_filters.domain.description import (
    NO_FILTERS_TEXT,
    describe_condition,
    describe_filter,
    humanize_field,
)
from contact_filters.domain.filters import FilterCondition


def test_no_groups():
    assert describe_filter({"groups": []}) == "No filters applied"
    assert describe_filter(None) == NO_FILTERS_TEXT


def test_humanize_field():
    assert humanize_field("first_name") == "First Name"
    assert humanize_field("email") == "Email"
    assert humanize_field(None) == ""


class TestDescribeCondition:
    def test_value_operator(self):
        c = FilterCondition(field="company_name", operator="starts_with", value="Acme")
        assert describe_condition(c) == 'Company Name starts with "Acme"'

    def test_empty_operators_have_no_value(self):
        assert describe_condition(FilterCondition(field="phone", operator="is_empty")) == "Phone is empty"
        assert describe_condition(FilterCondition(field="phone", operator="is_not_empty")) == "Phone is not empty"

    def test_missing_value_rendered_as_placeholder(self):
        c = FilterCondition(field="title", operator="contains")
        assert describe_condition(c) == 'Title contains "(empty)"'

    def test_numeric_value(self):
        c = FilterCondition(field="age", operator="equals", value=30)
        assert describe_condition(c) == 'Age equals "30"'


class TestDescribeFilter:
    def test_single_group_not_parenthesised(self):
        config = {
            "groups": [{
                "conditions": [
                    {"field": "status", "operator": "equals", "value": "open"},
                    {"field": "city", "operator": "is_not_empty"},
                ],
            }],
        }
        assert describe_filter(config) == 'Status equals "open" and City is not empty'

    def test_group_operator_lowercased(self):
        config = {
            "groups": [{
                "operator": "OR",
                "conditions": [
                    {"field": "status", "operator": "equals", "value": "open"},
                    {"field": "status", "operator": "equals", "value": "new"},
                ],
            }],
        }
        assert describe_filter(config) == 'Status equals "open" or Status equals "new"'

    def test_logical_operator_alias_used_for_joiner(self):
        config = {
            "groups": [{
                "logicalOperator": "OR",
                "conditions": [
                    {"field": "a", "operator": "is_empty"},
                    {"field": "b", "operator": "is_empty"},
                ],
            }],
        }
        assert describe_filter(config) == "A is empty or B is empty"

    def test_multiple_groups_parenthesised_with_literal_separator(self):
        config = {
            "groups": [
                {"conditions": [{"field": "status", "operator": "equals", "value": "open"}]},
                {"conditions": [{"field": "city", "operator": "is_empty"}]},
            ],
            "groupOperator": "AND",
        }
        assert describe_filter(config) == '(Status equals "open") AND (City is empty)'

    def test_separator_not_normalised(self):
        config = {
            "groups": [
                {"conditions": [{"field": "a", "operator": "is_empty"}]},
                {"conditions": [{"field": "b", "operator": "is_empty"}]},
            ],
            "groupOperator": "or",
        }
        assert describe_filter(config) == "(A is empty) or (B is empty)"

    def test_unset_separator_uses_default_or(self):
        config = {
            "groups": [
                {"conditions": [{"field": "a", "operator": "is_empty"}]},
                {"conditions": [{"field": "b", "operator": "is_empty"}]},
            ],
        }
        assert describe_filter(config) == "(A is empty) OR (B is empty)"
