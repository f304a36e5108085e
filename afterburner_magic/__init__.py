""" Package for highlighting magic keys of the Afterburner keyboard layout in touch-typing practice text.

    The Afterburner layout has two special keys: the magic key, whose output depends on the previous key,
    and the skip magic key, whose output depends on the key two presses back. A learner needs to see which
    characters of the practice text are typed with one of those keys instead of their own.

    classify - The core. A pure, position-indexed classifier over one line of text, built from:

        rules - Two fixed tables (trigger character -> output character) plus the implicit repeat rule.

        overrides - Hand-curated per-word patterns (e.g. queue -> qu$u$) for words the rules get wrong.

        suppress - Independently toggleable heuristics that veto rule matches likely to mislead the learner.

        classifier - Tries the word override, then skip magic, then magic, in that order of priority.

    resource - The rule tables and word overrides also ship as CSON assets, validated when loaded.

    settings - The user's highlighting settings, kept in a CFG file. Highlighting only applies when the
    selected layout is Afterburner.

    render - Shows classifier output as pattern notation (as#as#in) or as HTML with colored backgrounds.

    afterburner - Container that builds and caches every component from command-line options.

    qt - An optional preview window with live highlighting and the settings check boxes (requires PyQt5).

    __main__ - When run directly as a script, the first command-line argument chooses an entry point:
    annotate (the default), html, or gui. """

from afterburner_magic.afterburner import Afterburner
from afterburner_magic.classify import MagicType
from afterburner_magic.classify.classifier import get_magic_type, MagicClassifier
from afterburner_magic.classify.options import MagicOptions
from afterburner_magic.options import AfterburnerOptions
