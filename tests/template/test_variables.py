import pytest

from mhb.template.tokens import Directive
from mhb.template.variables import MISSING, lookup, process_variable, stringify


@pytest.mark.parametrize("value, expected", [
    ("text", "text"),
    (True, "true"),
    (False, "false"),
    (42, "42"),
    (1.5, "1.5"),
])
def test_stringify(value, expected):
    assert stringify(value) == expected


def test_lookup_treats_none_as_missing():
    assert lookup({"a": None}, "a") is MISSING
    assert lookup({}, "a") is MISSING
    assert lookup({"a": 0}, "a") == 0


def test_replaces_first_occurrence_only():
    d = Directive.from_raw("{{a}}", 0)

    assert process_variable(d, "{{a}} {{a}}", {"a": "x"}) == "x {{a}}"


def test_missing_value_removes_tag():
    d = Directive.from_raw("{{ a }}", 0)

    assert process_variable(d, "[{{ a }}]", {}) == "[]"


def test_lookup_uses_normalized_name():
    d = Directive.from_raw("{{ first name }}", 0)

    assert process_variable(d, "{{ first name }}", {"firstname": "Ann"}) == "Ann"


def test_absent_directive_text_leaves_string():
    d = Directive.from_raw("{{a}}", 0)

    assert process_variable(d, "nothing", {"a": "x"}) == "nothing"
