""" Main module for printing practice text with magic keys in pattern notation. """

import sys

from afterburner_magic import Afterburner, AfterburnerOptions
from afterburner_magic.resource import ResourceError


def main() -> int:
    """ Print each line of input with magic characters as # and skip magic characters as $. """
    opts = AfterburnerOptions("Print practice text with magic keys shown as # and skip magic keys as $.")
    app = Afterburner(opts)
    try:
        highlighter = app.highlighter()
        text = app.input_text()
    except (OSError, ResourceError) as e:
        app.logger.log_exception(e)
        return 1
    print(highlighter.annotate(text))
    return 0


if __name__ == '__main__':
    sys.exit(main())
