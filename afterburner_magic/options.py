from afterburner_magic.util.cmdline import CmdlineOptions
from afterburner_magic.util.path import package_directory, PrefixPathConverter, user_data_directory

# The name of the root package is used as a default path for built-in assets and user files.
ROOT_PACKAGE = __package__.split(".", 1)[0]


class AfterburnerOptions(CmdlineOptions):
    """ Contains all command-line options necessary to build essential components. """

    ASSET_PATH_PREFIX = ":/"  # Prefix that indicates built-in assets.
    USER_PATH_PREFIX = "~/"   # Prefix that indicates local user app data.

    def __init__(self, app_description="Running Afterburner magic key highlighting as a library.") -> None:
        super().__init__(app_description)
        self.add("log", self.USER_PATH_PREFIX + "status.log",
                 "Text file to log status and exceptions.")
        self.add("rules", self.ASSET_PATH_PREFIX + "assets/magic_rules.cson",
                 "CSON file with the magic and skip magic rule tables.")
        self.add("overrides", self.ASSET_PATH_PREFIX + "assets/word_overrides.cson",
                 "CSON file with word-specific magic key patterns.")
        self.add("config", self.USER_PATH_PREFIX + "config.cfg",
                 "Config CFG/INI file with highlighting settings to load at start and/or write to.")
        self.add("input", "",
                 "Text file with practice text. If not given, text comes from arguments or standard input.")
        converter = PrefixPathConverter()
        converter.add(self.ASSET_PATH_PREFIX, package_directory(ROOT_PACKAGE))
        converter.add(self.USER_PATH_PREFIX, user_data_directory(ROOT_PACKAGE))
        self._convert_path = converter.convert

    def rules_path(self) -> str:
        return self._convert_path(self.rules)

    def overrides_path(self) -> str:
        return self._convert_path(self.overrides)

    def log_path(self) -> str:
        """ Return the path for the log file, creating empty directories to its location if necessary. """
        return self._convert_path(self.log, make_dirs=True)

    def config_path(self) -> str:
        """ Return the full file path to the config file, adding directories if it doesn't exist. """
        return self._convert_path(self.config, make_dirs=True)

    def input_path(self) -> str:
        return self._convert_path(self.input) if self.input else ""
