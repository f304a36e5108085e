#!/usr/bin/env python3

""" Master console script and primary entry point for the Afterburner magic key highlighter. """

import sys

from afterburner_magic.util.entrypoints import EntryPoint, EntryPointSelector

ENTRY_POINTS = {
    "annotate": EntryPoint("afterburner_magic.main_annotate", "main", "Print text with magic keys as # and $ (default)."),
    "html":     EntryPoint("afterburner_magic.main_html",     "main", "Print text as HTML with magic keys highlighted."),
    "gui":      EntryPoint("afterburner_magic.main_qt",       "main", "Run the Qt preview window (requires PyQt5).")
}


def main() -> int:
    loader = EntryPointSelector(ENTRY_POINTS, default_mode="annotate")
    return loader.main()


if __name__ == '__main__':
    sys.exit(main())
