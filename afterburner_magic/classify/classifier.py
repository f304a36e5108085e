""" Module for the classification engine. Every call is a pure function of its arguments. """

from typing import List, Optional

from . import CharSequence, MagicType, OverrideEntry
from .options import MagicOptions
from .overrides import DEFAULT_WORD_OVERRIDES, extract_word, WordOverrideTable
from .rules import DEFAULT_MAGIC_RULES, DEFAULT_SKIP_MAGIC_RULES, MagicRuleTable
from .suppress import SuppressionPolicy

DEFAULT_OPTIONS = MagicOptions()


class MagicClassifier(SuppressionPolicy):
    """ Decides which key types each character of a line of text, in strict priority order:

        1. A curated word override, if enabled and defined for this position, wins unconditionally.
        2. Skip magic, if the character two back triggers it and no enabled heuristic vetoes it.
        3. Magic, if the previous character triggers it and no enabled heuristic vetoes it.
        4. Otherwise, the character's own key.

        Only the three tables given at construction are held; they are read-only and may be shared by threads. """

    def __init__(self, magic_rules:MagicRuleTable, skip_magic_rules:MagicRuleTable,
                 word_overrides:WordOverrideTable) -> None:
        self._magic_rules = magic_rules            # Rules keyed on the previous character.
        self._skip_magic_rules = skip_magic_rules  # Rules keyed on the character two positions back.
        self._word_overrides = word_overrides      # Curated per-word tag sequences.

    def would_use_magic(self, chars:CharSequence, index:int) -> bool:
        if index < 1 or index >= len(chars):
            return False
        return self._magic_rules.matches(chars[index - 1], chars[index])

    def would_use_skip_magic(self, chars:CharSequence, index:int, options:MagicOptions, nested:bool) -> bool:
        if index < 2 or index >= len(chars):
            return False
        if not self._skip_magic_rules.matches(chars[index - 2], chars[index]):
            return False
        return not self.suppresses(MagicType.SKIP_MAGIC, chars, index, options, nested)

    def _override_at(self, chars:CharSequence, index:int) -> OverrideEntry:
        """ Return the forced tag from a word override at <index>, or None to fall through to the rules. """
        found = extract_word(chars, index)
        if found is None:
            return None
        word, position = found
        override = self._word_overrides.get(word)
        if override is None or position >= len(override):
            return None
        return override[position]

    def classify(self, chars:CharSequence, index:int, options:Optional[MagicOptions]=None) -> str:
        """ Return the MagicType tag for the character at <index> in <chars>. Never raises on any index. """
        if index < 0 or index >= len(chars):
            return MagicType.NONE
        if options is None:
            options = DEFAULT_OPTIONS
        if options.word_overrides_enabled:
            forced = self._override_at(chars, index)
            if forced is not None:
                return forced
        if self.would_use_skip_magic(chars, index, options, False):
            return MagicType.SKIP_MAGIC
        if (self.would_use_magic(chars, index) and
                not self.suppresses(MagicType.MAGIC, chars, index, options, False)):
            return MagicType.MAGIC
        return MagicType.NONE

    def classify_all(self, chars:CharSequence, options:Optional[MagicOptions]=None) -> List[str]:
        """ Return the tag for every position in <chars>. """
        return [self.classify(chars, i, options) for i in range(len(chars))]


DEFAULT_CLASSIFIER = MagicClassifier(DEFAULT_MAGIC_RULES, DEFAULT_SKIP_MAGIC_RULES, DEFAULT_WORD_OVERRIDES)
get_magic_type = DEFAULT_CLASSIFIER.classify
