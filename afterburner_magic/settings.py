""" Module for the user settings that decide when and how magic keys are highlighted. """

from typing import Any, List

from afterburner_magic.classify.classifier import MagicClassifier
from afterburner_magic.classify.options import MagicOptions
from afterburner_magic.resource import FrozenStruct
from afterburner_magic.util.config import SectionConfigDict


class SettingInfo(FrozenStruct):
    """ Display information for one boolean setting. """
    key: str    # Option name in the CFG section.
    label: str  # Short name for check boxes.
    desc: str   # Longer description for tooltips and help.


AFTERBURNER_LAYOUT_ID = "en-afterburner"  # The only keyboard layout with magic keys.


class MagicSettings:
    """ Typed view over the [afterburner] section of the user's CFG file. Unset options use the defaults below. """

    SECTION = "afterburner"
    LAYOUT = "layout"
    HIGHLIGHTING = "magic_key_highlighting"
    WORD_OVERRIDES = "magic_key_word_overrides_enabled"

    DEFAULTS = {LAYOUT: AFTERBURNER_LAYOUT_ID,
                HIGHLIGHTING: True,
                WORD_OVERRIDES: True,
                "suppress_skip_magic_after_magic": True,
                "suppress_skip_magic_after_skip_magic": True,
                "suppress_magic_after_skip_magic": True,
                "suppress_skip_magic_after_space": True}

    _OWN_INFO = [SettingInfo(key=HIGHLIGHTING, label="Enable magic key highlighting",
                             desc="Characters that should be typed using the magic key (orange) or skip magic key "
                                  "(blue) are highlighted in the practice text."),
                 SettingInfo(key=WORD_OVERRIDES, label="Enable word-specific highlighting overrides",
                             desc="Uses custom highlighting patterns for specific words where the default algorithm "
                                  "produces suboptimal results (e.g. queue -> qu$u$, institute -> institut$).")]

    def __init__(self, config:SectionConfigDict) -> None:
        self._config = config  # Raw option values read from (and written to) the CFG file.

    @classmethod
    def from_file(cls, filename:str) -> "MagicSettings":
        """ Create settings backed by <filename>. The file is not read until read() is called. """
        return cls(SectionConfigDict(filename, cls.SECTION))

    def read(self) -> List[str]:
        """ Load settings from the file (a missing file leaves every default in place).
            Values of the wrong type are discarded; return the names of any such options. """
        self._config.read()
        rejected = []
        for key, value in list(self._config.items()):
            default = self.DEFAULTS.get(key)
            if default is None or type(value) is not type(default):
                del self._config[key]
                rejected.append(key)
        return rejected

    def write(self) -> bool:
        """ Save every current value (defaults included) to the file. Return True if successful. """
        for key in self.DEFAULTS:
            self._config.setdefault(key, self.DEFAULTS[key])
        return self._config.write()

    def get(self, key:str) -> Any:
        return self._config.get(key, self.DEFAULTS[key])

    def set(self, key:str, value:Any) -> None:
        """ Change a setting in memory. It must be a known option with a value of the same type as its default. """
        if key not in self.DEFAULTS:
            raise KeyError(f"Unknown setting: {key}")
        if type(value) is not type(self.DEFAULTS[key]):
            raise TypeError(f"Setting {key} requires a {type(self.DEFAULTS[key]).__name__} value.")
        self._config[key] = value

    def highlighting_active(self) -> bool:
        """ Highlighting applies only to the Afterburner layout, and only when the user wants it. """
        return self.get(self.LAYOUT) == AFTERBURNER_LAYOUT_ID and self.get(self.HIGHLIGHTING)

    def to_magic_options(self) -> MagicOptions:
        """ Build the per-call classifier options from the current settings. """
        return MagicOptions(suppress_skip_magic_after_magic=self.get("suppress_skip_magic_after_magic"),
                            suppress_skip_magic_after_skip_magic=self.get("suppress_skip_magic_after_skip_magic"),
                            suppress_magic_after_skip_magic=self.get("suppress_magic_after_skip_magic"),
                            suppress_skip_magic_after_space=self.get("suppress_skip_magic_after_space"),
                            word_overrides_enabled=self.get(self.WORD_OVERRIDES))

    @classmethod
    def bool_settings(cls) -> List[SettingInfo]:
        """ Return display info for every boolean setting, with the suppression heuristics in display order. """
        heuristics = {h.option: h for h in MagicClassifier.Heuristic.LIST}
        order = ["suppress_skip_magic_after_magic", "suppress_skip_magic_after_skip_magic",
                 "suppress_magic_after_skip_magic", "suppress_skip_magic_after_space"]
        info = [SettingInfo(key=k, label=heuristics[k].label, desc=heuristics[k].desc) for k in order]
        return [*cls._OWN_INFO, *info]
