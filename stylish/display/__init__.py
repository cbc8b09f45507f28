# display/__init__.py

from .render import RichRenderer

__all__ = ['RichRenderer']
