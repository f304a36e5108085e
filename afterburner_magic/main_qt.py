""" Main module for the Qt preview application. """

import sys

from PyQt5.QtWidgets import QApplication

from afterburner_magic import Afterburner, AfterburnerOptions
from afterburner_magic.qt.preview import PreviewWidget, SettingsPanel
from afterburner_magic.resource import ResourceError
from afterburner_magic.settings import MagicSettings

EXAMPLE_TEXT = "the queue at the institute\nassassin queen nineteen\nsit tie"


def build_window(app:Afterburner) -> PreviewWidget:
    """ Connect the settings panel to the user's settings and the preview to the highlighter. """
    settings = app.settings
    w_settings = SettingsPanel(MagicSettings.bool_settings())
    w_preview = PreviewWidget(w_settings)
    for info in MagicSettings.bool_settings():
        w_settings.set_value(info.key, settings.get(info.key))

    def on_toggle(key:str, value:bool) -> None:
        settings.set(key, value)
        if not settings.write():
            app.logger.log("Could not save settings.")
        w_preview.refresh()

    w_settings.toggled.connect(on_toggle)
    w_preview.connect_render(lambda text: app.highlighter().to_html(text, compat=True))
    w_preview.set_text(app.input_text() if app.has_input() else EXAMPLE_TEXT)
    w_preview.setWindowTitle("Afterburner Magic Keys")
    return w_preview


def main() -> int:
    """ In standalone mode, we must create a QApplication and run a GUI event loop indefinitely. """
    q_app = QApplication(sys.argv)
    opts = AfterburnerOptions("Preview magic key highlighting in a standalone window.")
    app = Afterburner(opts)
    try:
        window = build_window(app)
        window.show()
    except (OSError, ResourceError) as e:
        app.logger.log_exception(e)
        return 1
    return q_app.exec_()


if __name__ == '__main__':
    sys.exit(main())
