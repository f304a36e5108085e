""" Package for the Afterburner magic key classifier.

    The Afterburner layout has two special keys that exist to avoid same-finger usage:

    magic      - outputs a character chosen by the key pressed immediately before it.
    skip magic - outputs a character chosen by the key pressed two keys before it.

    The classifier looks at a line of practice text one position at a time and decides which of the two
    keys (if either) would actually be pressed to type that character. It works purely from the static text;
    no key press history is simulated. Every query is recomputed from scratch, so the tables built here at
    import time are the only shared state, and they are never modified afterward. """

from typing import Iterable, List, Optional, Sequence

CharSequence = Sequence[str]  # One line of text. Each item is a single character (a plain str works).


class MagicType:
    """ Tag values for a classified character. Override entries may also be None, meaning "use the algorithm". """
    NONE = "none"             # Typed with the character's own key.
    MAGIC = "magic"           # Typed with the magic key (depends on the previous character).
    SKIP_MAGIC = "skipMagic"  # Typed with the skip magic key (depends on the character two back).

    ALL = (NONE, MAGIC, SKIP_MAGIC)

    # Pattern notation symbols, as used by word overrides and annotated text.
    SYMBOLS = {MAGIC: "#", SKIP_MAGIC: "$"}


OverrideEntry = Optional[str]  # Forced tag at one position, or None to pass through to the algorithm.

# Characters that end a word on either side.
WORD_BOUNDARIES = frozenset(" \t\n")


def chars_from_codepoints(codepoints:Iterable[int]) -> List[str]:
    """ Convert a sequence of Unicode code points into characters usable by the classifier. """
    return [*map(chr, codepoints)]
