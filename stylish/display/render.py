# display/render.py

from io import StringIO
from typing import Any, Dict, Mapping, Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..attributes import FontDescriptor
from ..text import AttributedString

class RichRenderer:
    """
    Turns attributed strings into rich Text and ANSI output.

    Reads the keys written by the default attribute adapter. Keys it does
    not understand (kern, shadow, custom adapter keys, ...) are ignored
    since a terminal has no way to show them.
    """
    def __init__(self, color_system: str = "truecolor", width: Optional[int] = None):
        self.console = Console(
            force_terminal=True,
            color_system=color_system,
            file=StringIO(),
            highlight=False,
            width=width
        )

    def style_for(self, attributes: Mapping[str, Any]) -> Style:
        """Build the rich Style for one run's attribute dictionary."""
        options: Dict[str, Any] = {}
        if attributes.get('foreground_color') is not None:
            options['color'] = attributes['foreground_color']
        if attributes.get('background_color') is not None:
            options['bgcolor'] = attributes['background_color']

        font = attributes.get('font')
        if isinstance(font, FontDescriptor):
            if font.bold or 'bold' in font.name.lower():
                options['bold'] = True
            if font.italic or 'italic' in font.name.lower():
                options['italic'] = True
        if attributes.get('obliqueness'):
            options['italic'] = True

        if 'underline_style' in attributes:
            options['underline'] = bool(attributes['underline_style'])
        if 'strikethrough_style' in attributes:
            options['strike'] = bool(attributes['strikethrough_style'])
        if attributes.get('link'):
            options['link'] = attributes['link']
        return Style(**options)

    def to_text(self, attributed: AttributedString) -> Text:
        text = Text(attributed.string, end="")
        for text_range, attributes in attributed.runs():
            style = self.style_for(attributes)
            if style:
                text.stylize(style, text_range.start, text_range.end)
        return text

    def to_ansi(self, attributed: AttributedString) -> str:
        """Render to a string with ANSI escape codes."""
        with self.console.capture() as capture:
            self.console.print(self.to_text(attributed), end="")
        return capture.get()
