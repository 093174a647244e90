"""Configuration record shared by the answer collector and the scaffolder."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import is_valid_email

__all__ = ["Author", "LibraryConfig", "LibraryName", "UnitTestFramework"]


class UnitTestFramework(str, Enum):
    """Test runners the generated library can be wired for."""

    KARMA = "karma + jasmine"
    JEST = "jest"


class Author(BaseModel):
    """Author metadata written into the package manifests."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Full name of the library author.")
    email: str = Field(..., description="Contact address of the library author.")

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError("Please enter a valid email address")
        return value


class LibraryName(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    original: str = Field(..., min_length=1)
    kebab_case: str = Field(..., pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$")


class LibraryConfig(BaseModel):
    """Validated answers describing the library to generate.

    Attributes
    ----------
    author:
        Name and email of the person publishing the library.
    library_name:
        The slugified library name. ``original`` and ``kebab_case`` carry the
        same value; templates pick whichever reads better.
    scope:
        Either empty or an ``@scope/`` prefix that can be concatenated with the
        library name without further checks.
    git_repository_url:
        Free-form repository URL. It is never validated.
    test_framework:
        Selects which manifest variant and support files are rendered.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    author: Author
    library_name: LibraryName
    scope: str = Field(default="", pattern=r"^(@.*/)?$")
    git_repository_url: str
    test_framework: UnitTestFramework

    @classmethod
    def from_answers(cls, answers: Mapping[str, str]) -> "LibraryConfig":
        """Build a :class:`LibraryConfig` from answers keyed by prompt name."""

        return cls(
            author=Author(name=answers["author_name"], email=answers["author_email"]),
            library_name=LibraryName(
                original=answers["library_name"],
                kebab_case=answers["library_name"],
            ),
            scope=answers.get("scope", ""),
            git_repository_url=answers["git_repository_url"],
            test_framework=UnitTestFramework(answers["test_framework"]),
        )

    def to_answers(self) -> dict[str, str]:
        """Inverse of :meth:`from_answers`, keyed by prompt name."""

        return {
            "author_name": self.author.name,
            "author_email": self.author.email,
            "library_name": self.library_name.kebab_case,
            "scope": self.scope,
            "git_repository_url": self.git_repository_url,
            "test_framework": self.test_framework.value,
        }

    @property
    def package_name(self) -> str:
        """The name the library is published under, scope included."""

        return f"{self.scope}{self.library_name.kebab_case}"

    def context(self) -> Mapping[str, Any]:
        """Return the placeholders available to templates."""

        return {
            "author": {"name": self.author.name, "email": self.author.email},
            "library_name": {
                "original": self.library_name.original,
                "kebab_case": self.library_name.kebab_case,
            },
            "scope": self.scope,
            "package_name": self.package_name,
            "git_repository_url": self.git_repository_url,
            "test_framework": self.test_framework.value,
        }
