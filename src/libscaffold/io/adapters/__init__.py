"""Concrete input sources."""

from .answers import MappingInputSource
from .console import ConsoleInputSource

__all__ = ["ConsoleInputSource", "MappingInputSource"]
