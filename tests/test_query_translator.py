"""QueryTranslator tests: predicate mapping and pushdown policy."""

import logging

import pytest

from contact_filters.domain.query_translator import QueryTranslator, escape_like
from contact_filters.ports.query_builder import QueryBuilderPort


class FakeQuery:
    """Immutable query handle that records the chain of calls."""

    def __init__(self, calls: tuple = ()):
        self.calls = calls

    def _add(self, *call):
        return FakeQuery(self.calls + (call,))

    def select_all(self):
        return self._add("select_all")

    def is_null(self, field):
        return self._add("is_null", field)

    def is_not_null(self, field):
        return self._add("is_not_null", field)

    def eq(self, field, value):
        return self._add("eq", field, value)

    def not_eq(self, field, value):
        return self._add("not_eq", field, value)

    def ilike(self, field, pattern):
        return self._add("ilike", field, pattern)


def _single_group(*conditions, operator=None) -> dict:
    group = {"conditions": list(conditions)}
    if operator:
        group["operator"] = operator
    return {"groups": [group]}


def test_fake_satisfies_port():
    assert isinstance(FakeQuery(), QueryBuilderPort)


class TestToRemoteQuery:
    """Each operator maps to one chained predicate."""

    def test_no_groups_returns_base_query(self):
        q = QueryTranslator().to_remote_query(FakeQuery(), {"groups": []})
        assert q.calls == (("select_all",),)

    def test_operator_mapping(self):
        config = _single_group(
            {"field": "phone", "operator": "is_empty"},
            {"field": "email", "operator": "is_not_empty"},
            {"field": "status", "operator": "equals", "value": "open"},
            {"field": "status", "operator": "not_equals", "value": "closed"},
            {"field": "name", "operator": "contains", "value": "acme"},
            {"field": "name", "operator": "starts_with", "value": "ac"},
            {"field": "name", "operator": "ends_with", "value": "corp"},
        )
        q = QueryTranslator().to_remote_query(FakeQuery(), config)
        assert q.calls == (
            ("select_all",),
            ("is_null", "phone"),
            ("is_not_null", "email"),
            ("eq", "status", "open"),
            ("not_eq", "status", "closed"),
            ("ilike", "name", "%acme%"),
            ("ilike", "name", "ac%"),
            ("ilike", "name", "%corp"),
        )

    def test_untranslatable_operators_are_skipped(self):
        config = _single_group(
            {"field": "name", "operator": "not_contains", "value": "x"},
            {"field": "name", "operator": "sounds_like", "value": "x"},
            {"field": "status", "operator": "equals", "value": "open"},
        )
        q = QueryTranslator().to_remote_query(FakeQuery(), config)
        assert q.calls == (("select_all",), ("eq", "status", "open"))

    def test_only_first_group_translated(self, caplog):
        config = {
            "groups": [
                {"conditions": [{"field": "a", "operator": "equals", "value": "1"}]},
                {"conditions": [{"field": "b", "operator": "equals", "value": "2"}]},
            ],
        }
        translator = QueryTranslator(logger=logging.getLogger("contact_filters.translator_test"))
        with caplog.at_level(logging.WARNING, logger="contact_filters.translator_test"):
            q = translator.to_remote_query(FakeQuery(), config)
        assert q.calls == (("select_all",), ("eq", "a", "1"))
        assert any(r.getMessage() == "remote_translation_partial" for r in caplog.records)

    def test_like_wildcards_in_value_are_escaped(self):
        config = _single_group({"field": "code", "operator": "contains", "value": "50%_off"})
        q = QueryTranslator().to_remote_query(FakeQuery(), config)
        assert q.calls[-1] == ("ilike", "code", "%50\\%\\_off%")

    def test_escape_like_backslash(self):
        assert escape_like("a\\b") == "a\\\\b"


class TestCanPushDown:
    """Pushdown only when remote rows are a superset of in-memory matches."""

    @pytest.mark.parametrize("config", [None, {"groups": []}])
    def test_no_groups(self, config):
        assert QueryTranslator().can_push_down(config)

    @pytest.mark.parametrize("operator", ["contains", "starts_with", "ends_with", "not_equals"])
    def test_safe_value_operators(self, operator):
        config = _single_group({"field": "name", "operator": operator, "value": "x"})
        assert QueryTranslator().can_push_down(config)

    def test_is_not_empty_safe(self):
        assert QueryTranslator().can_push_down(_single_group({"field": "name", "operator": "is_not_empty"}))

    @pytest.mark.parametrize("operator", ["equals", "is_empty", "not_contains", "bogus"])
    def test_unsafe_operators(self, operator):
        config = _single_group({"field": "name", "operator": operator, "value": "x"})
        assert not QueryTranslator().can_push_down(config)

    def test_multiple_groups_not_pushed(self):
        config = {
            "groups": [
                {"conditions": [{"field": "a", "operator": "contains", "value": "1"}]},
                {"conditions": [{"field": "b", "operator": "contains", "value": "2"}]},
            ],
        }
        assert not QueryTranslator().can_push_down(config)

    def test_or_group_with_several_conditions_not_pushed(self):
        config = _single_group(
            {"field": "a", "operator": "contains", "value": "1"},
            {"field": "b", "operator": "contains", "value": "2"},
            operator="OR",
        )
        assert not QueryTranslator().can_push_down(config)

    def test_or_group_with_one_condition_pushed(self):
        config = _single_group({"field": "a", "operator": "contains", "value": "1"}, operator="OR")
        assert QueryTranslator().can_push_down(config)
