"""validate_filter tests: error strings are shown to users as-is."""

from contact_filters.interface.validation import ValidationResult, validate_filter


def _config(*conditions, **extra) -> dict:
    return {"groups": [{"conditions": list(conditions)}], **extra}


class TestValidationResult:
    def test_add_error_marks_invalid(self):
        result = ValidationResult()
        result.add_error("boom")
        assert result.is_valid is False
        assert result.errors == ["boom"]

    def test_to_dict(self):
        result = ValidationResult().add_warning("careful")
        assert result.to_dict() == {"valid": True, "errors": [], "warnings": ["careful"]}


class TestValidateFilter:
    def test_no_groups_is_valid(self):
        for config in (None, {}, {"groups": []}):
            result = validate_filter(config)
            assert result.is_valid
            assert result.errors == []

    def test_missing_value(self):
        result = validate_filter(_config({"field": "title", "operator": "contains"}))
        assert not result.is_valid
        assert len(result.errors) == 1
        assert "Value is required" in result.errors[0]
        assert result.errors[0] == "Group 1, Condition 1: Value is required"

    def test_empty_operators_need_no_value(self):
        result = validate_filter(_config(
            {"field": "title", "operator": "is_empty"},
            {"field": "title", "operator": "is_not_empty"},
        ))
        assert result.is_valid
        assert result.errors == []

    def test_positions_are_one_indexed(self):
        config = {
            "groups": [
                {"conditions": [{"field": "a", "operator": "equals", "value": "x"}]},
                {"conditions": [{"operator": "equals", "value": "x"}]},
            ],
        }
        result = validate_filter(config)
        assert result.errors == ["Group 2, Condition 1: Field is required"]

    def test_missing_everything(self):
        result = validate_filter(_config({}))
        assert result.errors == [
            "Group 1, Condition 1: Field is required",
            "Group 1, Condition 1: Operator is required",
            "Group 1, Condition 1: Value is required",
        ]

    def test_blank_string_value_is_missing(self):
        result = validate_filter(_config({"field": "title", "operator": "equals", "value": "  "}))
        assert result.errors == ["Group 1, Condition 1: Value is required"]

    def test_zero_is_a_value(self):
        result = validate_filter(_config({"field": "count", "operator": "equals", "value": 0}))
        assert result.is_valid

    def test_unknown_operator_warns(self):
        result = validate_filter(_config({"field": "a", "operator": "between", "value": "1"}))
        assert result.is_valid
        assert any("Unknown operator 'between'" in w for w in result.warnings)

    def test_empty_group_warns(self):
        result = validate_filter({"groups": [{"conditions": []}]})
        assert result.is_valid
        assert result.warnings == ["Group 1: has no conditions"]

    def test_odd_group_operator_warns(self):
        result = validate_filter(_config(
            {"field": "a", "operator": "is_empty"},
            groupOperator="XOR",
        ))
        assert result.is_valid
        assert any("groupOperator 'XOR'" in w for w in result.warnings)

    def test_mixed_case_and_warns(self):
        result = validate_filter(_config(
            {"field": "a", "operator": "is_empty"},
            groupOperator="And",
        ))
        assert result.is_valid
        assert any("groupOperator 'And'" in w for w in result.warnings)

    def test_exact_and_spellings_do_not_warn(self):
        for spelling in ("AND", "and", "OR", "or"):
            result = validate_filter(_config({"field": "a", "operator": "is_empty"}, groupOperator=spelling))
            assert result.warnings == []
