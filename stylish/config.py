# config.py

from dataclasses import dataclass, replace
from typing import Optional

from .attributes import StringAttributeAdapter
from .text import DEFAULT_SEARCH_OPTIONS, SearchOptions

COLOR_SYSTEMS = ('standard', '256', 'truecolor', 'windows')

@dataclass(frozen=True)
class StylishConfig:
    """Defaults handed to labels and the renderer by Interface."""
    search_options: SearchOptions = DEFAULT_SEARCH_OPTIONS
    adapter: Optional[StringAttributeAdapter] = None
    color_system: str = 'truecolor'
    logging_enabled: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.color_system not in COLOR_SYSTEMS:
            raise ValueError(f"Unknown color system '{self.color_system}'")

    def with_options(self, **changes) -> 'StylishConfig':
        return replace(self, **changes)

DEFAULT_CONFIG = StylishConfig()
