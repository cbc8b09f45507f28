# label.py

from typing import Optional
from rich.text import Text

from .logger import Logger
from .attributes import StringAttributeAdapter
from .display import RichRenderer
from .styler import AttributesLike, style_substring
from .text import AttributedString, DEFAULT_SEARCH_OPTIONS, SearchOptions

class Label:
    """
    Holder for a piece of attributed text, styled in place.

    attributed_text stays None until text is given; substring styling on an
    empty label does nothing.
    """
    def __init__(self, text: Optional[str] = None,
                 search_options: SearchOptions = DEFAULT_SEARCH_OPTIONS,
                 adapter: Optional[StringAttributeAdapter] = None,
                 renderer: Optional[RichRenderer] = None,
                 logger: Optional[Logger] = None):
        self.search_options = search_options
        self.adapter = adapter
        self.renderer = renderer or RichRenderer()
        self.logger = logger or Logger(__name__)
        self.attributed_text: Optional[AttributedString] = (
            AttributedString(text) if text is not None else None
        )

    @property
    def text(self) -> Optional[str]:
        return self.attributed_text.string if self.attributed_text is not None else None

    @text.setter
    def text(self, value: Optional[str]) -> None:
        self.attributed_text = AttributedString(value) if value is not None else None

    def style_text(self, text: str, attributes: AttributesLike,
                   adapter: Optional[StringAttributeAdapter] = None) -> Optional[AttributedString]:
        """Set text and style all of it. Does nothing on a label without text."""
        return self.style_substring(text, attributes, of_text=text, adapter=adapter,
                                    search_options=SearchOptions.ANCHORED)

    def style_substring(self, substring: str, attributes: AttributesLike,
                        of_text: Optional[str] = None,
                        search_options: Optional[SearchOptions] = None,
                        adapter: Optional[StringAttributeAdapter] = None) -> Optional[AttributedString]:
        """
        Style the first occurrence of substring within the label's text.

        Args:
            substring: Text to style.
            attributes: Collection, attribute, list of attributes, or a
                function returning attributes.
            of_text: Expected full text. When it differs from the current
                text the label is reset to of_text without any styling.
            search_options: Overrides the label's search options.
            adapter: Overrides the label's adapter, which in turn overrides
                the adapter carried by the attribute collection.

        Returns:
            The new attributed text, or None when the label has no text or
            the substring was not found. A reset caused by of_text still
            applies in the not-found case.
        """
        if self.attributed_text is None:
            self.logger.debug("Label has no text yet; skipping styling")
            return None

        if of_text is not None and self.attributed_text.string != of_text:
            self.logger.debug("Label text changed; previous styling discarded")
            self.attributed_text = AttributedString(of_text)

        result = style_substring(
            self.attributed_text,
            substring,
            attributes,
            search_options=self.search_options if search_options is None else search_options,
            adapter=adapter or self.adapter
        )
        if result is None:
            return None

        self.attributed_text = result
        return result

    def render(self) -> Text:
        """Rich Text for the current attributed text (empty if none)."""
        if self.attributed_text is None:
            return Text("")
        return self.renderer.to_text(self.attributed_text)
