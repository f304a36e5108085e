""" Module for the per-call options that control suppression heuristics and word overrides. """

from afterburner_magic.resource import FrozenStruct


class MagicOptions(FrozenStruct):
    """ Independent switches supplied with every classification call. Nothing here is stored by the classifier. """

    suppress_skip_magic_after_magic: bool       # No skip magic if the character two back was typed with magic.
    suppress_skip_magic_after_skip_magic: bool  # No skip magic if the previous character was typed with skip magic.
    suppress_magic_after_skip_magic: bool       # No magic if the previous character was typed with skip magic.
    suppress_skip_magic_after_space: bool       # No skip magic on the first character of a word.
    word_overrides_enabled: bool                # Curated word overrides take precedence over the rules.

    def __init__(self, *,
                 suppress_skip_magic_after_magic=True,
                 suppress_skip_magic_after_skip_magic=True,
                 suppress_magic_after_skip_magic=True,
                 suppress_skip_magic_after_space=False,
                 word_overrides_enabled=True) -> None:
        """ The space heuristic is off unless a caller's configuration turns it on. """
        super().__init__(suppress_skip_magic_after_magic=suppress_skip_magic_after_magic,
                         suppress_skip_magic_after_skip_magic=suppress_skip_magic_after_skip_magic,
                         suppress_magic_after_skip_magic=suppress_magic_after_skip_magic,
                         suppress_skip_magic_after_space=suppress_skip_magic_after_space,
                         word_overrides_enabled=word_overrides_enabled)

    @classmethod
    def all_off(cls) -> "MagicOptions":
        """ Return options with every heuristic and the word overrides disabled (plain rule matching). """
        return cls(suppress_skip_magic_after_magic=False,
                   suppress_skip_magic_after_skip_magic=False,
                   suppress_magic_after_skip_magic=False,
                   suppress_skip_magic_after_space=False,
                   word_overrides_enabled=False)

    @classmethod
    def all_on(cls) -> "MagicOptions":
        """ Return options with every heuristic and the word overrides enabled. """
        return cls(suppress_skip_magic_after_space=True)
