""" Unit tests for the magic rule tables. """

import pytest

from afterburner_magic.classify.rules import DEFAULT_MAGIC_RULES, DEFAULT_SKIP_MAGIC_RULES, MagicRuleTable


def test_default_tables() -> None:
    assert dict(DEFAULT_MAGIC_RULES) == {"a": "o", "g": "s", "h": "y", "u": "e", "x": "t", "y": "h"}
    assert len(DEFAULT_SKIP_MAGIC_RULES) == 23
    assert DEFAULT_SKIP_MAGIC_RULES["q"] == "e"
    assert DEFAULT_SKIP_MAGIC_RULES[";"] == "e"
    assert DEFAULT_SKIP_MAGIC_RULES["/"] == "a"
    for table in (DEFAULT_MAGIC_RULES, DEFAULT_SKIP_MAGIC_RULES):
        for trigger, output in table.items():
            assert trigger != output


@pytest.mark.parametrize("trigger, current, expected", [
    ("a", "o", True),
    ("A", "O", True),
    ("a", "a", False),   # Explicit entries replace the repeat rule.
    ("s", "s", True),    # No entry: the key repeats the trigger.
    ("S", "s", True),
    ("s", "t", False),
    (" ", " ", True),
    ("7", "8", False),
])
def test_matches(trigger, current, expected) -> None:
    assert DEFAULT_MAGIC_RULES.matches(trigger, current) is expected


def test_output() -> None:
    assert DEFAULT_SKIP_MAGIC_RULES.output("d") == "t"
    assert DEFAULT_SKIP_MAGIC_RULES.output("e") is None


@pytest.mark.parametrize("rules", [
    {"a": "a"},
    {"A": "o"},
    {"a": "O"},
    {"ab": "o"},
    {"a": ""},
])
def test_invalid_rules(rules) -> None:
    with pytest.raises(ValueError):
        MagicRuleTable(rules)


def test_immutable() -> None:
    with pytest.raises(TypeError):
        DEFAULT_MAGIC_RULES["b"] = "c"
