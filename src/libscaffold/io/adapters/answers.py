"""Non-interactive input source backed by pre-recorded answers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Sequence

from ..interfaces import InputSource

if TYPE_CHECKING:
    from ...prompts import Prompt


class MappingInputSource(InputSource):
    """Answer prompts from a mapping keyed by prompt name.

    Rejected answers propagate as :class:`~libscaffold.errors.PromptValidationError`
    because there is nobody to ask again.
    """

    def __init__(self, answers: Mapping[str, str]):
        self._answers = {str(key): str(value) for key, value in answers.items()}

    @classmethod
    def from_file(cls, path: Path | str) -> "MappingInputSource":
        """Load answers from a JSON object stored at ``path``."""

        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"{path} must contain a JSON object")
        return cls(payload)

    def ask(self, prompts: Sequence["Prompt"]) -> dict[str, str]:
        return {prompt.name: prompt.resolve(self._answers.get(prompt.name)) for prompt in prompts}


__all__ = ["MappingInputSource"]
