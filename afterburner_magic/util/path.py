""" Module for resolving asset and user data paths. """

import os
import sys

# Default user path components are for Linux, since it has several possible platform identifiers.
DEFAULT_USERPATH_COMPONENTS = (".local", "share", "{0}")
# User path components specific to Windows and Mac OS.
PLATFORM_USERPATH_COMPONENTS = {"win32": ("AppData", "Local", "{0}", "{0}"),
                                "darwin": ("Library", "Application Support", "{0}")}


def user_data_directory(app_name:str) -> str:
    """ Return the platform-specific directory where <app_name> keeps files in the user's home directory. """
    path_components = PLATFORM_USERPATH_COMPONENTS.get(sys.platform) or DEFAULT_USERPATH_COMPONENTS
    path_fmt = os.path.join("~", *path_components)
    return os.path.expanduser(path_fmt.format(app_name))


def package_directory(pkg_name:str) -> str:
    """ Import a package by name and return the directory it lives in. """
    module = sys.modules.get(pkg_name) or __import__(pkg_name)
    return os.path.dirname(module.__file__)


class PrefixPathConverter:
    """ Expands paths that start with special prefixes (such as :/ for built-in assets) into real paths. """

    def __init__(self) -> None:
        self._prefixes = {}  # Base path strings keyed by prefix.

    def add(self, prefix:str, base_path:str) -> None:
        self._prefixes[prefix] = os.path.normpath(base_path)

    def expand(self, path:str) -> str:
        """ Replace the longest matching prefix (if any) with its base path. """
        for prefix in sorted(self._prefixes, key=len, reverse=True):
            if path.startswith(prefix):
                return os.path.join(self._prefixes[prefix], path[len(prefix):])
        return path

    def convert(self, path:str, *, make_dirs=False) -> str:
        """ Expand <path> into a full file path usable by open().
            If <make_dirs> is true, create directories as needed to make the path valid for writing. """
        path = self.expand(path)
        if make_dirs:
            directory = os.path.dirname(path) or "."
            os.makedirs(directory, exist_ok=True)
        return path
