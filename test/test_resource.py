""" Unit tests for loading rule tables and word overrides from asset files. """

import os

import pytest

from afterburner_magic.classify.overrides import DEFAULT_WORD_OVERRIDES
from afterburner_magic.classify.rules import DEFAULT_MAGIC_RULES, DEFAULT_SKIP_MAGIC_RULES
from afterburner_magic.resource import FrozenStruct, ResourceError
from afterburner_magic.resource.io import CSONDictionaryIO, MagicResourceIO
from afterburner_magic.util.path import package_directory

ASSETS_PATH = os.path.join(package_directory("afterburner_magic"), "assets")
RESOURCE_IO = MagicResourceIO()


def test_assets_match_defaults() -> None:
    """ The shipped assets are the same data the classifier uses by default. """
    magic_rules, skip_magic_rules = RESOURCE_IO.load_rule_tables(os.path.join(ASSETS_PATH, "magic_rules.cson"))
    assert magic_rules == DEFAULT_MAGIC_RULES
    assert skip_magic_rules == DEFAULT_SKIP_MAGIC_RULES
    overrides = RESOURCE_IO.load_word_overrides(os.path.join(ASSETS_PATH, "word_overrides.cson"))
    assert overrides == DEFAULT_WORD_OVERRIDES
    for word in overrides:
        assert overrides.pattern(word) == DEFAULT_WORD_OVERRIDES.pattern(word)


def test_comments(tmp_path) -> None:
    path = tmp_path / "commented.cson"
    path.write_text('# Header comment\n{\n  # Indented comment\n  "a": "b"\n}\n', encoding='utf-8')
    assert CSONDictionaryIO().load(str(path)) == {"a": "b"}


@pytest.mark.parametrize("filename, contents", [
    ("rules.cson", '{"magic": {"a": "o"}'),
    ("rules.cson", '["magic", "skip_magic"]'),
    ("rules.cson", '{"magic": {"a": "o"}}'),
    ("rules.cson", '{"magic": {"a": "a"}, "skip_magic": {}}'),
    ("rules.cson", '{"magic": {}, "skip_magic": {"Q": "e"}}'),
    ("rules.json", '# Comments are only allowed in CSON.\n{"magic": {}, "skip_magic": {}}'),
])
def test_bad_rules(tmp_path, filename, contents) -> None:
    path = tmp_path / filename
    path.write_text(contents, encoding='utf-8')
    with pytest.raises(ResourceError):
        RESOURCE_IO.load_rule_tables(str(path))


@pytest.mark.parametrize("contents", [
    '{"queue": "qu$u"}',
    '{"queue": 5}',
    '{"Queue": "qu$u$", "queue": "qu$u$"}',
    '{"to do": "to do"}',
])
def test_bad_overrides(tmp_path, contents) -> None:
    path = tmp_path / "overrides.cson"
    path.write_text(contents, encoding='utf-8')
    with pytest.raises(ResourceError):
        RESOURCE_IO.load_word_overrides(str(path))


def test_missing_file(tmp_path) -> None:
    with pytest.raises(ResourceError):
        RESOURCE_IO.load_word_overrides(str(tmp_path / "nothing.cson"))


class _Point(FrozenStruct):
    x: int
    y: int


def test_frozen_struct() -> None:
    p = _Point(x=1, y=2)
    with pytest.raises(AttributeError):
        p.x = 3
    with pytest.raises(AttributeError):
        del p.y
    q = p.replace(y=5)
    assert (q.x, q.y) == (1, 5)
    assert type(q) is _Point
    assert p == _Point(x=1, y=2)
