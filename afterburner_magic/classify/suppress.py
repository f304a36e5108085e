""" Module for heuristics that veto an otherwise matching rule when the hint would mislead the learner. """

from typing import Callable, List

from . import CharSequence, MagicType
from .options import MagicOptions


class SuppressionPolicy:
    """ Abstract base for the classifier containing every suppression heuristic.
        Each heuristic asks whether a nearby character would itself be typed with one of the magic keys.
        Those questions are answered by the two predicates below, which subclasses implement with real rules. """

    class Heuristic:
        """ Decorator for a predicate method that suppresses one kind of magic key when its option is enabled. """
        LIST = []

        def __init__(self, target:str, option:str, label:str, desc:str) -> None:
            self.target = target  # Tag that this heuristic may veto.
            self.option = option  # Name of the MagicOptions attribute that enables it.
            self.label = label    # Short name for settings displays.
            self.desc = desc      # Longer description with an example.

        def __call__(self, func:Callable) -> Callable:
            self.meth_name = func.__name__
            self.LIST.append(self)
            return func

    def would_use_magic(self, chars:CharSequence, index:int) -> bool:
        """ Return True if the character at <index> matches a magic rule (without any suppression). """
        raise NotImplementedError

    def would_use_skip_magic(self, chars:CharSequence, index:int, options:MagicOptions, nested:bool) -> bool:
        """ Return True if the character at <index> would be typed with skip magic under <options>.
            If <nested> is True, the skip-after-skip heuristic is not applied, which stops the recursion. """
        raise NotImplementedError

    @Heuristic(MagicType.SKIP_MAGIC, "suppress_skip_magic_after_magic",
               "Suppress skip magic after magic key",
               "Skip magic is not highlighted if the character two positions back was typed using the magic key. "
               "There is no same-finger skipgram to avoid (e.g. ASSASSIN -> AS#AS#IN instead of AS#A$#IN).")
    def _skip_magic_after_magic(self, chars:CharSequence, index:int, options:MagicOptions, nested:bool) -> bool:
        """ The key actually pressed two positions back was already the magic key. """
        return self.would_use_magic(chars, index - 2)

    @Heuristic(MagicType.SKIP_MAGIC, "suppress_skip_magic_after_skip_magic",
               "Suppress skip magic after skip magic key",
               "Skip magic is not highlighted if the previous character was typed using the skip magic key. "
               "Two skip magic presses in a row are a same-finger bigram (e.g. QUEEN -> QU$EN instead of QU$$N).")
    def _skip_magic_after_skip_magic(self, chars:CharSequence, index:int, options:MagicOptions, nested:bool) -> bool:
        """ Look one position back with this heuristic disabled, so the check goes exactly one level deep. """
        if nested or index < 3:
            return False
        return self.would_use_skip_magic(chars, index - 1, options, True)

    @Heuristic(MagicType.MAGIC, "suppress_magic_after_skip_magic",
               "Suppress magic after skip magic key",
               "Magic is not highlighted if the previous character was typed using the skip magic key. "
               "There is no same-finger bigram to avoid (e.g. NINETEEN -> NI$ET$EN instead of NI$ET$#N).")
    def _magic_after_skip_magic(self, chars:CharSequence, index:int, options:MagicOptions, nested:bool) -> bool:
        """ The previous position is evaluated with the caller's full set of options. """
        return self.would_use_skip_magic(chars, index - 1, options, False)

    @Heuristic(MagicType.SKIP_MAGIC, "suppress_skip_magic_after_space",
               "Suppress skip magic after space key",
               "Skip magic is not highlighted at the start of a new word. Each word keeps the same fingering "
               "no matter what came before it, which helps build muscle memory (e.g. SIT TIE instead of SIT $IE).")
    def _skip_magic_after_space(self, chars:CharSequence, index:int, options:MagicOptions, nested:bool) -> bool:
        return chars[index - 1] == " "

    def heuristics(self, target:str) -> List[Heuristic]:
        """ Return every heuristic that can veto <target>, in order of declaration. """
        return [h for h in self.Heuristic.LIST if h.target == target]

    def suppresses(self, target:str, chars:CharSequence, index:int, options:MagicOptions, nested:bool) -> bool:
        """ Return True if any enabled heuristic vetoes a <target> match at <index>. """
        for h in self.Heuristic.LIST:
            if h.target == target and getattr(options, h.option):
                if getattr(self, h.meth_name)(chars, index, options, nested):
                    return True
        return False
