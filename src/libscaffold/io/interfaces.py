"""Abstract interfaces for answer sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..prompts import Prompt


class InputSource(ABC):
    """Supplier of answers for a batch of prompts."""

    @abstractmethod
    def ask(self, prompts: Sequence["Prompt"]) -> dict[str, str]:
        """Return one resolved answer per prompt, keyed by prompt name.

        Implementations decide how rejected answers are retried. The batch is
        only returned once every prompt has an accepted answer.
        """


__all__ = ["InputSource"]
