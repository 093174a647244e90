"""Prompt definitions and the answer collector."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Callable, Mapping, Sequence

from .config import LibraryConfig, UnitTestFramework
from .errors import PromptValidationError
from .naming import is_valid_email, normalize_scope, slugify

if TYPE_CHECKING:
    from .io.interfaces import InputSource

__all__ = ["Prompt", "PromptKind", "collect", "default_prompts"]


Validator = Callable[[str], "str | None"]

DEFAULT_REPOSITORY_URL = "https://github.com/username/repo"


class PromptKind(str, Enum):
    INPUT = "input"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class Prompt:
    """A single question asked by the collector.

    ``validate`` receives the raw answer and returns an error message, or
    ``None`` when the answer is acceptable. ``transform`` normalises accepted
    answers.
    """

    name: str
    message: str
    kind: PromptKind = PromptKind.INPUT
    default: str | None = None
    choices: tuple[str, ...] = ()
    validate: Validator | None = None
    transform: Callable[[str], str] | None = None
    store: bool = False

    def resolve(self, raw: str | None) -> str:
        """Validate and normalise ``raw``, raising :class:`PromptValidationError`."""

        value = raw if raw else None
        if value is None and self.default is not None and self.kind is PromptKind.INPUT:
            value = self.default
        if value is None:
            value = ""

        if self.kind is PromptKind.LIST:
            value = self._choice(value)

        if self.validate is not None:
            error = self.validate(value)
            if error:
                raise PromptValidationError(self.name, error)

        if self.transform is not None:
            value = self.transform(value)
        return value

    def _choice(self, value: str) -> str:
        candidate = value.strip()
        if candidate.isdigit() and 1 <= int(candidate) <= len(self.choices):
            return self.choices[int(candidate) - 1]
        if candidate in self.choices:
            return candidate
        raise PromptValidationError(
            self.name, "Please choose one of: " + ", ".join(self.choices)
        )


def _require_full_name(value: str) -> str | None:
    if re.search(r".+", value):
        return None
    return "Please enter your full name"


def _require_email(value: str) -> str | None:
    if is_valid_email(value):
        return None
    return "Please enter a valid email address"


def _require_library_name(value: str) -> str | None:
    if slugify(value):
        return None
    return "Please enter a library name"


def _require_scope(value: str) -> str | None:
    if not value or value.startswith("@"):
        return None
    return "The scope must start with @ or be left blank"


def default_prompts(app_name: str) -> list[Prompt]:
    """Return the questions asked for a new library, in order.

    ``app_name`` is usually the name of the directory the library is
    generated in and seeds the default library name.
    """

    return [
        Prompt("author_name", "Your full name", validate=_require_full_name),
        Prompt("author_email", "Your email address", validate=_require_email),
        Prompt(
            "library_name",
            "Your library name (kebab-case)",
            default=slugify(app_name) or None,
            validate=_require_library_name,
            transform=slugify,
        ),
        Prompt(
            "scope",
            "Your library scope (eg: @angular) leave blank for none",
            default="",
            validate=_require_scope,
            transform=normalize_scope,
        ),
        Prompt(
            "git_repository_url",
            "Git repository url",
            default=DEFAULT_REPOSITORY_URL,
            store=True,
        ),
        Prompt(
            "test_framework",
            "Test framework",
            kind=PromptKind.LIST,
            choices=tuple(framework.value for framework in UnitTestFramework),
        ),
    ]


def collect(
    prompts: Sequence[Prompt],
    source: "InputSource",
    defaults: Mapping[str, str] | None = None,
) -> LibraryConfig:
    """Ask ``prompts`` through ``source`` and build the configuration record.

    ``defaults`` replaces the built-in default of matching free-text prompts;
    choice prompts always require an explicit answer.
    """

    overrides = dict(defaults or {})
    effective = [
        replace(prompt, default=overrides[prompt.name])
        if prompt.name in overrides and prompt.kind is PromptKind.INPUT
        else prompt
        for prompt in prompts
    ]
    answers = source.ask(effective)
    return LibraryConfig.from_answers(answers)
