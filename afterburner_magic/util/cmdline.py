""" Module for user-configurable command-line options. """

import ast
import os
import sys
from typing import Any, Iterable, Iterator, List


class CmdlineArgument:
    """ Abstract class for information about a single argument from the command line. """

    def __call__(self, *args:str) -> Any:
        """ Return a final value for this option based on zero or more argument strings. """
        raise NotImplementedError

    def __iter__(self) -> Iterator[str]:
        """ Yield all unique command-line option strings that cause this action. """
        raise NotImplementedError

    def usage(self) -> str:
        return "|".join(self)

    def description(self) -> str:
        raise NotImplementedError


class CmdlineOption(CmdlineArgument):
    """ A command-line option corresponding to a single value which can be placed in an attribute. """

    def __init__(self, key:str, desc="No description.", opt_type=str) -> None:
        self._key = key            # Option key (generally the name prefixed with --).
        self._desc = desc          # Description to be displayed in help.
        self._opt_type = opt_type  # Data type to be produced if the option is specified.

    def _multiargs(self) -> bool:
        return issubclass(self._opt_type, (tuple, list, set))

    def __call__(self, *args:str) -> Any:
        """ Convert argument strings to the type required by this option.
            A bool option given alone is a switch that turns on. bool('False') is True, so parse literals instead. """
        if self._multiargs():
            return self._opt_type(args)
        if self._opt_type is bool:
            if not args:
                return True
            if len(args) == 1 and args[0] in ("True", "False"):
                return ast.literal_eval(args[0])
        if len(args) != 1:
            raise ValueError(f'Option {self._key} takes exactly one argument, got {len(args)}.')
        return self._opt_type(*args)

    def __iter__(self) -> Iterator[str]:
        yield self._key

    def usage(self) -> str:
        if self._multiargs():
            argstr = '=<str> [<str> ...]'
        elif self._opt_type is bool:
            argstr = '[=True|False]'
        else:
            argstr = '=<' + self._opt_type.__name__ + '>'
        return super().usage() + argstr

    def description(self) -> str:
        return self._desc


class CmdlineHelp(CmdlineArgument):
    """ Prints usage and argument help, then exits the program. """

    def __init__(self, opts:Iterable[CmdlineArgument], script_name:str, description:str, *, file=None) -> None:
        self._opts = [*opts, self]       # Options to format (including this one).
        self._script_name = script_name  # Program name as run from the command line.
        self._description = description  # A short description of what the program does.
        self._file = file or sys.stdout  # Output stream for help text.

    def format_help(self) -> str:
        usage = "".join(['usage: ', self._script_name, *[f' [{opt.usage()}]' for opt in self._opts]])
        keylists = [", ".join(opt) for opt in self._opts]
        col_width = max(map(len, keylists)) + 2
        info = [keys.ljust(col_width) + opt.description() for opt, keys in zip(self._opts, keylists)]
        return '\n'.join([self._description, usage, "", *info, ""])

    def __call__(self, *args) -> None:
        self._file.write(self.format_help())
        sys.exit(0)

    def __iter__(self) -> Iterator[str]:
        yield '-h'
        yield '--help'

    def description(self) -> str:
        return "Show this help message and exit."


class CmdlineParser:
    """ Parses option arguments into a dict by attribute name. Anything unrecognized is kept as an extra. """

    def __init__(self) -> None:
        self._attrs_by_opt = {}  # Attribute names keyed by the options that affect them.
        self._opts_by_key = {}   # Options keyed by every string that invokes them.
        self._extra_args = []    # Args that did not find matches during parsing.

    def add_option(self, attr:str, opt:CmdlineArgument) -> None:
        self._attrs_by_opt[opt] = attr
        for k in opt:
            self._opts_by_key[k] = opt

    def parse(self, argv:Iterable[str]) -> dict:
        """
        Option keys start with '-' and take their first argument after '=', with more following after spaces.
        Any args before the first option are extras (i.e. plain text input for the program):

          extra text     [  key  ] |----------|  [  key  ]
        "some words"    --config=my.cfg           --verbose
        """
        d = {}
        groups = []
        last_group = self._extra_args
        for s in argv:
            if s.startswith('-') and len(s) > 1:
                last_group = []
                groups.append(last_group)
            last_group.append(s)
        for group in groups:
            s, *args = group
            k, *eq = s.split('=', 1)
            opt = self._opts_by_key.get(k)
            if opt is None:
                self._extra_args += group
            else:
                d[self._attrs_by_opt[opt]] = opt(*eq, *args)
        return d

    def get_extras(self) -> List[str]:
        return self._extra_args[:]


class CmdlineOptions:
    """ Namespace class for command-line options. Option values are accessed as instance attributes.
        Unparsed options keep their default values. """

    def __init__(self, app_description="Command line application.") -> None:
        self._app_description = app_description  # App description shown in command-line help.
        self._options = {}  # Option objects keyed by their destination attributes.
        self._extras = []   # Arguments left over after the last parse.

    def __getattr__(self, name:str) -> Any:
        raise AttributeError(f'"{name}" is not the name of a valid command-line option.')

    def add(self, name:str, default:Any=None, desc="No description.") -> None:
        """ Add a new option and set its attribute to the default value (until parsed).
            Since attribute names cannot have hyphens, they are replaced with underscores. """
        opt_type = str if default is None else type(default)
        opt = CmdlineOption("--" + name, desc, opt_type)
        attr_name = name.replace("-", "_")
        self._options[attr_name] = opt
        setattr(self, attr_name, default)

    def parse(self, argv:Iterable[str]=None) -> None:
        """ Parse options into instance attributes from <argv> if given, otherwise from sys.argv. """
        parser = CmdlineParser()
        for attr, item in self._options.items():
            parser.add_option(attr, item)
        script, *args = (sys.argv if argv is None else argv)
        help_opt = CmdlineHelp(self._options.values(), os.path.basename(script), self._app_description)
        parser.add_option("_HELP_OPT", help_opt)
        self.__dict__.update(parser.parse(args))
        self._extras = parser.get_extras()

    def extras(self) -> List[str]:
        """ Return all arguments that were not options from the last parse. """
        return self._extras[:]
