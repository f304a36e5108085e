""" Unit tests for word override patterns and word extraction. """

import pytest

from afterburner_magic.classify import MagicType
from afterburner_magic.classify.overrides import DEFAULT_WORD_OVERRIDES, extract_word, OverrideConfigError, \
    parse_override_pattern, WordOverrideTable

NONE = MagicType.NONE
MAGIC = MagicType.MAGIC
SKIP = MagicType.SKIP_MAGIC


def test_parse_pattern() -> None:
    assert parse_override_pattern("qu$u$") == (NONE, NONE, SKIP, NONE, SKIP)
    assert parse_override_pattern("a#b$ ") == (NONE, MAGIC, NONE, SKIP, NONE)
    assert parse_override_pattern("") == ()


@pytest.mark.parametrize("pattern", ["institut$", "amus$memt", "##$$", "plain"])
def test_pattern_symbols(pattern) -> None:
    """ '#' and '$' are the only symbols that force a key. The parser never passes a position through. """
    tags = parse_override_pattern(pattern)
    assert len(tags) == len(pattern)
    for c, tag in zip(pattern, tags):
        assert tag == {"#": MAGIC, "$": SKIP}.get(c, NONE)


def test_default_overrides() -> None:
    assert set(DEFAULT_WORD_OVERRIDES) == {"queue", "institute", "amusement", "quieted"}
    assert "houses" not in DEFAULT_WORD_OVERRIDES
    assert DEFAULT_WORD_OVERRIDES.pattern("queue") == "qu$u$"
    for word, tags in DEFAULT_WORD_OVERRIDES.items():
        assert len(tags) == len(word)


def test_lookup_ignores_case() -> None:
    assert DEFAULT_WORD_OVERRIDES.get("QUEUE") == DEFAULT_WORD_OVERRIDES["queue"]
    assert "Quieted" in DEFAULT_WORD_OVERRIDES
    assert DEFAULT_WORD_OVERRIDES.get("queues") is None


@pytest.mark.parametrize("entries", [
    [("queue", "qu$u")],
    [("queue", "qu$u$$")],
    [("", "")],
    [("two words", "two words")],
    [("queue", "qu$u$"), ("QUEUE", "qu$u$")],
])
def test_invalid_overrides(entries) -> None:
    with pytest.raises(OverrideConfigError):
        WordOverrideTable(entries)


@pytest.mark.parametrize("text, index, expected", [
    ("the queue", 6, ("queue", 2)),
    ("the queue", 4, ("queue", 0)),
    ("the queue", 2, ("the", 2)),
    ("QUEUE", 4, ("queue", 4)),
    ("a\tb", 2, ("b", 0)),
    ("x\ny", 0, ("x", 0)),
    ("queue.", 1, ("queue.", 1)),
    ("queue", 5, None),
    ("queue", -1, None),
    ("", 0, None),
])
def test_extract_word(text, index, expected) -> None:
    assert extract_word(text, index) == expected
