""" Module for the magic and skip magic substitution tables of the Afterburner layout. """

from typing import Iterator, Mapping, Optional


class MagicRuleTable(Mapping[str, str]):
    """ Immutable table mapping a lowercase trigger character to the character its magic key outputs.
        A trigger with no explicit entry falls back to the repeat rule: the key outputs the trigger itself. """

    def __init__(self, rules:Mapping[str, str]) -> None:
        for trigger, output in rules.items():
            if len(trigger) != 1 or len(output) != 1:
                raise ValueError(f"Rule {trigger!r} -> {output!r} must map one character to one character.")
            if trigger != trigger.lower() or output != output.lower():
                raise ValueError(f"Rule {trigger!r} -> {output!r} must use lowercase characters only.")
            if trigger == output:
                raise ValueError(f"Rule {trigger!r} maps to itself; that case is covered by the repeat rule.")
        self._rules = dict(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __getitem__(self, trigger:str) -> str:
        return self._rules[trigger]

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._rules!r})'

    def output(self, trigger:str) -> Optional[str]:
        """ Return the explicit output for a lowercase <trigger>, or None if it only repeats. """
        return self._rules.get(trigger)

    def matches(self, trigger:str, current:str) -> bool:
        """ Return True if pressing the magic key after <trigger> would type <current>. Case-insensitive. """
        trigger = trigger.lower()
        current = current.lower()
        output = self._rules.get(trigger)
        if output is None:
            return trigger == current
        return output == current


# Magic key: keyed on the previous character. Comments show a word using each rule.
DEFAULT_MAGIC_RULES = MagicRuleTable({
    "a": "o",  # chaos -> cha#s
    "g": "s",  # legs -> leg#
    "h": "y",  # why -> wh#
    "u": "e",  # fuel -> fu#l
    "x": "t",  # extra -> ex#ra
    "y": "h",  # anyhow -> any#ow
})

# Skip magic key: keyed on the character two positions back.
DEFAULT_SKIP_MAGIC_RULES = MagicRuleTable({
    "a": "o",  # another -> an$ther
    "b": "n",  # bank -> ba$k
    "d": "t",  # edit -> edi$
    "f": "s",  # fast -> fa$t
    "g": "s",  # changes -> change$
    "h": "y",  # hey -> he$
    "j": "y",  # joy -> jo$
    "k": "t",  # market -> marke$
    "l": "r",  # color -> colo$
    "m": "k",  # make -> ma$e
    "o": "a",  # personal -> person$l
    "p": "n",  # open -> ope$
    "q": "e",  # request -> requ$st
    "r": "l",  # roll -> ro$l
    "u": "e",  # feature -> featur$
    "v": "t",  # invite -> invi$e
    "x": "t",  # exit -> exi$
    "y": "h",  # anything -> anyt$ing
    ",": "i",  # so, I -> so, $
    ".": "i",  # it. I -> it. $
    "-": "i",  # so - I -> so - $
    "/": "a",  # /tableflip -> /t$bleflip
    ";": "e",  # too; even -> to#; $ven
})
