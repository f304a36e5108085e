from typing import Callable, Sequence

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QCheckBox, QGroupBox, QPlainTextEdit, QTextBrowser, QVBoxLayout, QWidget

from afterburner_magic.settings import SettingInfo

RenderCallback = Callable[[str], str]  # Turns plain practice text into highlighted HTML.


class SettingsPanel(QGroupBox):
    """ Group of check boxes, one for each boolean setting. Sends the key and new value when one is toggled. """

    toggled = pyqtSignal([str, bool])

    def __init__(self, infos:Sequence[SettingInfo], *args) -> None:
        super().__init__("Afterburner Settings", *args)
        self._boxes = {}  # Check box widgets by setting key.
        layout = QVBoxLayout(self)
        for info in infos:
            w_box = QCheckBox(info.label)
            w_box.setToolTip(info.desc)
            w_box.toggled.connect(lambda checked, key=info.key: self.toggled.emit(key, checked))
            layout.addWidget(w_box)
            self._boxes[info.key] = w_box

    def set_value(self, key:str, value:bool) -> None:
        """ Change a check box without sending a signal back out. """
        w_box = self._boxes[key]
        w_box.blockSignals(True)
        w_box.setChecked(value)
        w_box.blockSignals(False)


class PreviewWidget(QWidget):
    """ Editable practice text above a live highlighted rendering of it, with the settings panel at the bottom. """

    def __init__(self, w_settings:SettingsPanel, *args) -> None:
        super().__init__(*args)
        self._render = None                  # Callback to render text; set by connect_render().
        self._w_input = QPlainTextEdit()     # Practice text entered by the user.
        self._w_output = QTextBrowser()      # Highlighted HTML output.
        self._w_settings = w_settings
        layout = QVBoxLayout(self)
        layout.addWidget(self._w_input)
        layout.addWidget(self._w_output)
        layout.addWidget(self._w_settings)
        self._w_input.textChanged.connect(self.refresh)

    def connect_render(self, render:RenderCallback) -> None:
        self._render = render
        self.refresh()

    def set_text(self, text:str) -> None:
        self._w_input.setPlainText(text)

    def refresh(self) -> None:
        """ Render the current input text again (after an edit or a settings change). """
        if self._render is not None:
            self._w_output.setHtml(self._render(self._w_input.toPlainText()))
