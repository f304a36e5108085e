""" Main module for rendering practice text as highlighted HTML. """

import sys

from afterburner_magic import Afterburner, AfterburnerOptions
from afterburner_magic.resource import ResourceError


def main() -> int:
    """ Print a preformatted HTML block with a colored background behind every magic key character. """
    opts = AfterburnerOptions("Render practice text as HTML with magic keys highlighted.")
    app = Afterburner(opts)
    try:
        highlighter = app.highlighter()
        text = app.input_text()
    except (OSError, ResourceError) as e:
        app.logger.log_exception(e)
        return 1
    print(highlighter.to_html(text))
    return 0


if __name__ == '__main__':
    sys.exit(main())
