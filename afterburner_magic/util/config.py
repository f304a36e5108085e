""" Module for user settings stored in the .cfg file format. """

import ast
from configparser import ConfigParser, Error as ConfigParserError
from typing import Any, Dict

ConfigDict = Dict[str, Any]
NestedConfigDict = Dict[str, ConfigDict]


def eval_str(s:str) -> Any:
    """ Evaluate a string as a Python literal with ast.literal_eval. This fixes crap like bool('False') = True.
        Strings that are read as names will throw an error, in which case they are left as-is. """
    try:
        return ast.literal_eval(s)
    except (SyntaxError, ValueError):
        return s


class ConfigIO:
    """ Performs file I/O and data type conversion on the contents of CFG files. """

    def __init__(self, *, encoding='utf-8') -> None:
        self._encoding = encoding  # Character encoding of CFG files.

    def read(self, filename:str) -> NestedConfigDict:
        """ Read a .cfg file into a nested mapping of sections to option values. """
        parser = ConfigParser()
        with open(filename, 'r', encoding=self._encoding) as fp:
            parser.read_file(fp)
        return {sect: {name: eval_str(s) for name, s in parser[sect].items()} for sect in parser.sections()}

    def write(self, filename:str, options:NestedConfigDict) -> None:
        """ Save a nested mapping of option values to a .cfg file by section and name. """
        parser = ConfigParser()
        for sect, page in options.items():
            parser.add_section(sect)
            for name, value in page.items():
                parser.set(sect, name, str(value))
        with open(filename, 'w', encoding=self._encoding) as fp:
            parser.write(fp)


class SectionConfigDict(ConfigDict):
    """ Dict of option values corresponding to one section of a CFG file. """

    def __init__(self, filename:str, sect:str, *, io:ConfigIO=None) -> None:
        super().__init__()
        self._filename = filename    # Full name of a file in CFG format. It doesn't have to exist yet.
        self._sect = sect            # Name of our section in the file.
        self._io = io or ConfigIO()  # Performs whole reads/writes to CFG files.

    def read(self) -> bool:
        """ Try to read options from the CFG file and update this dict. Return True if successful. """
        try:
            cfg = self._io.read(self._filename)
        except (OSError, ConfigParserError):
            return False
        self.update(cfg.get(self._sect, {}))
        return True

    def write(self) -> bool:
        """ Write the current options to the CFG file. Return True if successful. """
        try:
            self._io.write(self._filename, {self._sect: self})
            return True
        except OSError:
            return False
