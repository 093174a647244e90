"""Input sources and persisted answers for the collector."""

from .interfaces import InputSource
from .store import AnswerStore

__all__ = ["AnswerStore", "InputSource"]
