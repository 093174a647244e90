"""Answers remembered between generator runs."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Sequence

from ..errors import AnswerStoreError

if TYPE_CHECKING:
    from ..prompts import Prompt


LOGGER = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path.home() / ".libscaffold.json"


class AnswerStore:
    """JSON file mapping prompt names to their last accepted raw answer."""

    def __init__(self, path: Path | str = DEFAULT_STORE_PATH):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, str]:
        if not self._path.is_file():
            return {}
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise AnswerStoreError(f"{self._path} is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise AnswerStoreError(f"{self._path} must contain a JSON object")
        return {str(key): str(value) for key, value in payload.items()}

    def remember(self, answers: Mapping[str, str], prompts: Sequence["Prompt"]) -> dict[str, str]:
        """Persist the answers of prompts flagged with ``store``."""

        stored = self.load()
        stored.update(
            {prompt.name: answers[prompt.name] for prompt in prompts if prompt.store and prompt.name in answers}
        )
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(stored, ensure_ascii=False, sort_keys=True, indent=2), encoding="utf-8")
        LOGGER.debug("remembered %s in %s", sorted(stored), self._path)
        return stored


__all__ = ["DEFAULT_STORE_PATH", "AnswerStore"]
