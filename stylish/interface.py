# interface.py

from typing import Optional, Union

from .logger import Logger
from .config import DEFAULT_CONFIG, StylishConfig
from .display import RichRenderer
from .label import Label
from .text import AttributedString

class Interface:
    """
    Main entry point that assembles the logger, renderer and labels.
    """

    def __init__(self, logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 config: Optional[StylishConfig] = None):
        """
        Initialize components with optional logging and configuration.

        Args:
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
            config: Styling defaults; logging arguments override its logging fields.
        """
        config = config or DEFAULT_CONFIG
        self.config = config.with_options(
            logging_enabled=logging_enabled or config.logging_enabled,
            log_file=log_file if log_file is not None else config.log_file
        )
        self._init_components()

    def _init_components(self) -> None:
        try:
            self.logger = Logger(__name__, self.config.logging_enabled, self.config.log_file)
            self.renderer = RichRenderer(color_system=self.config.color_system)
            self.logger.debug(f"Initialized with color system: {self.config.color_system}")
        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def label(self, text: Optional[str] = None) -> Label:
        """Create a label sharing this interface's defaults."""
        return Label(
            text,
            search_options=self.config.search_options,
            adapter=self.config.adapter,
            renderer=self.renderer,
            logger=self.logger
        )

    def render(self, target: Union[Label, AttributedString]) -> str:
        """Return ANSI output for a label or attributed string."""
        attributed = target.attributed_text if isinstance(target, Label) else target
        if attributed is None:
            return ""
        return self.renderer.to_ansi(attributed)

    def print(self, target: Union[Label, AttributedString]) -> None:
        """Write a label or attributed string to stdout."""
        print(self.render(target))
