""" Module for hand-curated word overrides, used where the general algorithm is known to pick the wrong keys. """

from typing import Iterable, Iterator, Mapping, Optional, Tuple

from . import CharSequence, MagicType, OverrideEntry, WORD_BOUNDARIES

WordOverride = Tuple[OverrideEntry, ...]  # Forced tag for each character position in a word.


class OverrideConfigError(ValueError):
    """ Raised at load time when a curated word override is inconsistent with its word. """


def parse_override_pattern(pattern:str) -> WordOverride:
    """ Parse an override pattern string into one forced tag per character.
        '#' forces magic, '$' forces skip magic, and any other character forces no magic at all:

            qu$u$  -> (none, none, skipMagic, none, skipMagic)

        The parser never produces a pass-through (None) entry. """
    symbols = {v: k for k, v in MagicType.SYMBOLS.items()}
    return tuple([symbols.get(c, MagicType.NONE) for c in pattern])


class WordOverrideTable(Mapping[str, WordOverride]):
    """ Immutable mapping of lowercase words to their parsed override patterns.
        All entries are validated on construction so that a bad pattern is a loading fault, not a silent fallback. """

    def __init__(self, entries:Iterable[Tuple[str, str]]=()) -> None:
        self._overrides = {}
        self._patterns = {}
        for word, pattern in entries:
            if not word:
                raise OverrideConfigError("Word overrides may not have an empty word.")
            if WORD_BOUNDARIES.intersection(word):
                raise OverrideConfigError(f"Word override {word!r} contains whitespace.")
            if len(pattern) != len(word):
                raise OverrideConfigError(f"Pattern {pattern!r} has {len(pattern)} characters, "
                                          f"but word {word!r} has {len(word)}.")
            key = word.lower()
            if key in self._overrides:
                raise OverrideConfigError(f"Duplicate word override: {key!r}")
            self._overrides[key] = parse_override_pattern(pattern)
            self._patterns[key] = pattern

    def __len__(self) -> int:
        return len(self._overrides)

    def __iter__(self) -> Iterator[str]:
        return iter(self._overrides)

    def __getitem__(self, word:str) -> WordOverride:
        return self._overrides[word.lower()]

    def __contains__(self, word:object) -> bool:
        return isinstance(word, str) and word.lower() in self._overrides

    def get(self, word:str, default=None) -> Optional[WordOverride]:
        """ Return the override for <word> in any case, or <default> if the word isn't curated. """
        return self._overrides.get(word.lower(), default)

    def pattern(self, word:str) -> str:
        """ Return the original pattern string for <word>. """
        return self._patterns[word.lower()]


def extract_word(chars:CharSequence, index:int) -> Optional[Tuple[str, int]]:
    """ Find the whitespace-delimited word containing the character at <index>.
        Return the word in lowercase with the position of <index> inside it, or None if <index> is out of range.
        Only the characters of that one word are scanned. """
    if index < 0 or index >= len(chars):
        return None
    start = index
    while start > 0 and chars[start - 1] not in WORD_BOUNDARIES:
        start -= 1
    end = index + 1
    while end < len(chars) and chars[end] not in WORD_BOUNDARIES:
        end += 1
    word = "".join(chars[start:end]).lower()
    return word, index - start


DEFAULT_WORD_OVERRIDES = WordOverrideTable([
    ("queue", "qu$u$"),              # Default options give qu$u#.
    ("institute", "institut$"),      # Default options give insti$u$e (plain rules give insti$u$$).
    # Two skip magic keys separated by one character (e.g. $t$) are awkward to type.
    ("amusement", "amus$memt"),      # Default options give amus$m$nt.
    ("quieted", "qui$ted"),          # Default options give qui$t$d.
])
