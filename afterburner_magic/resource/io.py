""" Module for loading static Afterburner data from JSON-based asset files. """

import json
from typing import Tuple

from afterburner_magic.classify.overrides import OverrideConfigError, WordOverrideTable
from afterburner_magic.classify.rules import MagicRuleTable
from . import ResourceError

RuleTablePair = Tuple[MagicRuleTable, MagicRuleTable]  # (magic rules, skip magic rules)


class CSONDictionaryIO:
    """ Reads string dictionaries from JSON files, allowing full-line comments in .cson files (CSON = commented JSON).
        JSON doesn't care about leading or trailing whitespace, so every line is stripped before the prefix test. """

    def __init__(self, *, encoding='utf-8', comment_prefix="#") -> None:
        self._encoding = encoding              # Character encoding. UTF-8 must be explicitly set on some platforms.
        self._comment_prefix = comment_prefix  # Prefix for comment lines.

    def _strip_comments(self, s:str) -> str:
        lines = [line.strip() for line in s.split("\n")]
        return "\n".join([line for line in lines if line and not line.startswith(self._comment_prefix)])

    def load(self, filename:str) -> dict:
        """ Load a dict from a JSON-based file. Every failure is reraised as a ResourceError naming the file. """
        try:
            with open(filename, 'r', encoding=self._encoding) as fp:
                s = fp.read()
        except OSError as e:
            raise ResourceError(f'Could not read {filename}: {e}') from e
        if filename.endswith(".cson"):
            s = self._strip_comments(s)
        try:
            d = json.loads(s)
        except json.JSONDecodeError as e:
            # Show some context around the error (the original line number is wrong after stripping comments).
            i = e.pos
            context = repr(e.doc[i-20:i] + '<<!>>' + e.doc[i:i+20])[1:-1]
            raise ResourceError(f'JSON decoding error in {filename}: ...{context}...') from None
        if not isinstance(d, dict):
            raise ResourceError(f'{filename} must contain a dictionary, not a {type(d).__name__}.')
        return d


class MagicResourceIO:
    """ Top-level IO for the rule tables and word overrides. Validation failures become ResourceErrors. """

    MAGIC_SECTION = "magic"            # Section of the rules file keyed on the previous character.
    SKIP_MAGIC_SECTION = "skip_magic"  # Section of the rules file keyed on the character two back.

    def __init__(self, io:CSONDictionaryIO=None) -> None:
        self._io = io or CSONDictionaryIO()

    def _load_table(self, filename:str, d:dict, section:str) -> MagicRuleTable:
        rules = d.get(section)
        if not isinstance(rules, dict):
            raise ResourceError(f'{filename} is missing the rule table "{section}".')
        try:
            return MagicRuleTable(rules)
        except (TypeError, ValueError) as e:
            raise ResourceError(f'Bad rule in table "{section}" of {filename}: {e}') from e

    def load_rule_tables(self, filename:str) -> RuleTablePair:
        """ Load the magic and skip magic rule tables from one file. """
        d = self._io.load(filename)
        magic_rules = self._load_table(filename, d, self.MAGIC_SECTION)
        skip_magic_rules = self._load_table(filename, d, self.SKIP_MAGIC_SECTION)
        return magic_rules, skip_magic_rules

    def load_word_overrides(self, filename:str) -> WordOverrideTable:
        """ Load curated word overrides from a file mapping each word to its pattern string. """
        d = self._io.load(filename)
        for word, pattern in d.items():
            if not isinstance(pattern, str):
                raise ResourceError(f'Override pattern for "{word}" in {filename} must be a string.')
        try:
            return WordOverrideTable(d.items())
        except OverrideConfigError as e:
            raise ResourceError(f'Bad word override in {filename}: {e}') from e
