""" Module for showing classifier output on practice text, either as pattern notation or as highlighted HTML. """

import html
from typing import List

from afterburner_magic.classify import MagicType, WORD_BOUNDARIES
from afterburner_magic.classify.classifier import MagicClassifier
from afterburner_magic.classify.options import MagicOptions
from afterburner_magic.resource import FrozenStruct

# Background colors for highlighted characters in CSS hex notation (with alpha).
MAGIC_BACKGROUND_COLOR = "#f80b"       # Orange.
SKIP_MAGIC_BACKGROUND_COLOR = "#2adb"  # Blue.

STANDARD_COLORS = {MagicType.MAGIC: MAGIC_BACKGROUND_COLOR,
                   MagicType.SKIP_MAGIC: SKIP_MAGIC_BACKGROUND_COLOR}
COMPAT_COLORS = {MagicType.MAGIC: "#ff8800",
                 MagicType.SKIP_MAGIC: "#22aadd"}


class TextItem(FrozenStruct):
    """ One word of a line along with any whitespace after it. """
    text: str    # Characters of the item.
    offset: int  # Index of the first character in the full line.


def split_items(line:str) -> List[TextItem]:
    """ Split a line into words, each carrying its trailing whitespace and its offset in the line. """
    items = []
    start = 0
    ws = False
    for i, c in enumerate(line):
        if c in WORD_BOUNDARIES:
            ws = True
        elif ws:
            items.append(TextItem(text=line[start:i], offset=start))
            start = i
            ws = False
    if start < len(line):
        items.append(TextItem(text=line[start:], offset=start))
    return items


class MagicHighlighter:
    """ Tags and formats practice text line by line. Each line is the full context for its characters;
        tags never look across a line break. When disabled, every character is left untagged. """

    def __init__(self, classifier:MagicClassifier, options:MagicOptions, *, enabled=True) -> None:
        self._classifier = classifier  # Classification engine.
        self._options = options        # Options for every classification call.
        self._enabled = enabled        # False if the layout isn't Afterburner or the user turned highlighting off.

    def tag_line(self, line:str) -> List[str]:
        """ Return one tag for every character in a single <line>. """
        if not self._enabled:
            return [MagicType.NONE] * len(line)
        classify = self._classifier.classify
        tags = []
        for item in split_items(line):
            for i in range(len(item.text)):
                tags.append(classify(line, item.offset + i, self._options))
        return tags

    def tag_text(self, text:str) -> List[List[str]]:
        """ Return the tags for every line in <text>. """
        return [self.tag_line(line) for line in text.split("\n")]

    def annotate(self, text:str) -> str:
        """ Replace every magic character with # and every skip magic character with $:

            assassin -> as#as#in """
        lines = []
        for line in text.split("\n"):
            tags = self.tag_line(line)
            lines.append("".join([MagicType.SYMBOLS.get(tag, c) for c, tag in zip(line, tags)]))
        return "\n".join(lines)

    def to_html(self, text:str, *, compat=False) -> str:
        """ Render <text> as preformatted HTML with a colored background behind each magic character.
            If <compat> is True, use opaque colors for renderers without alpha support (such as Qt). """
        colors = COMPAT_COLORS if compat else STANDARD_COLORS
        sections = ['<pre class="practice">']
        for n, line in enumerate(text.split("\n")):
            if n:
                sections.append("\n")
            for c, tag in zip(line, self.tag_line(line)):
                s = html.escape(c)
                if tag in colors:
                    s = f'<span class="{tag}" style="background-color: {colors[tag]}">{s}</span>'
                sections.append(s)
        sections.append('</pre>')
        return "".join(sections)
