"""Interactive terminal input source."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Sequence, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import InvalidResponse
from rich.prompt import Prompt as RichPrompt
from rich.text import TextType

from ...errors import InputSourceUnavailable, PromptValidationError
from ..interfaces import InputSource

if TYPE_CHECKING:
    from ...prompts import Prompt


LOGGER = logging.getLogger(__name__)


class _AnswerPrompt(RichPrompt):
    """Rich prompt delegating validation to a :class:`~libscaffold.prompts.Prompt`."""

    def __init__(self, question: "Prompt", *, console: Console, max_attempts: int | None = None) -> None:
        super().__init__(
            escape(question.message),
            console=console,
            choices=list(question.choices) or None,
            show_default=bool(question.default),
        )
        self.question = question
        self.max_attempts = max_attempts
        self.failures = 0

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: TextType,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        try:
            line = console.input(prompt, password=password, stream=stream)
        except EOFError as exc:
            raise InputSourceUnavailable("no input available") from exc
        if stream is not None and not line:
            raise InputSourceUnavailable("no input available")
        return line

    def process_response(self, value: str) -> str:
        try:
            return self.question.resolve(value.rstrip("\r\n"))
        except PromptValidationError as exc:
            LOGGER.debug("rejected answer for %s: %s", self.question.name, exc.message)
            self.failures += 1
            if self.max_attempts is not None and self.failures >= self.max_attempts:
                raise
            raise InvalidResponse(f"[prompt.invalid]{escape(exc.message)}") from exc


class ConsoleInputSource(InputSource):
    """Ask prompts one at a time with :mod:`rich`, re-asking rejected answers.

    ``stream`` replaces standard input, which is mostly useful in tests.
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
        *,
        max_attempts: int | None = None,
    ) -> None:
        self.console = console or Console()
        self._stream = stream
        self._max_attempts = max_attempts

    def _default(self, prompt: "Prompt") -> Any:
        if prompt.choices or prompt.default is None:
            return ...
        try:
            return prompt.resolve(prompt.default)
        except PromptValidationError:
            return ...

    def _ask_one(self, prompt: "Prompt") -> str:
        question = _AnswerPrompt(prompt, console=self.console, max_attempts=self._max_attempts)
        return question(default=self._default(prompt), stream=self._stream)

    def ask(self, prompts: Sequence["Prompt"]) -> dict[str, str]:
        return {prompt.name: self._ask_one(prompt) for prompt in prompts}


__all__ = ["ConsoleInputSource"]
