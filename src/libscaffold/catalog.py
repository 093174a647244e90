"""Static catalog of the template files making up a generated library."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Iterator

from .config import UnitTestFramework

__all__ = [
    "TEMPLATE_ROOT",
    "EntryMode",
    "TemplateEntry",
    "catalog_for",
    "PLAYGROUND_FILES",
]


TEMPLATE_ROOT = Path(__file__).resolve().parent / "templates"

_GLOB_CHARACTERS = frozenset("*?[")


class EntryMode(str, Enum):
    """How a template asset reaches the destination tree."""

    COPY = "copy"
    RENDER = "render"


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    """Map one template asset, or a glob of them, to a destination path."""

    source: str
    destination: str
    mode: EntryMode = EntryMode.RENDER

    @property
    def is_glob(self) -> bool:
        return any(character in self.source for character in _GLOB_CHARACTERS)

    def _glob_base(self) -> PurePosixPath:
        parts: list[str] = []
        for part in PurePosixPath(self.source).parts:
            if any(character in part for character in _GLOB_CHARACTERS):
                break
            parts.append(part)
        return PurePosixPath(*parts)

    def expand(self, template_root: Path) -> Iterator[tuple[Path, PurePosixPath]]:
        """Yield ``(source file, relative destination)`` pairs in sorted order.

        A glob keeps each match's path relative to the pattern's literal prefix,
        so ``src/**/*.ts`` -> ``src`` preserves subdirectories.
        """

        if not self.is_glob:
            yield template_root / self.source, PurePosixPath(self.destination)
            return

        base = template_root / self._glob_base()
        for source in sorted(template_root.glob(self.source)):
            if source.is_file():
                relative = PurePosixPath(source.relative_to(base).as_posix())
                yield source, PurePosixPath(self.destination) / relative


COPY = EntryMode.COPY
RENDER = EntryMode.RENDER

PROJECT_FILES: tuple[TemplateEntry, ...] = (
    TemplateEntry("gitignore", ".gitignore", COPY),
    TemplateEntry("npmignore", ".npmignore", COPY),
    TemplateEntry("travis.yml", ".travis.yml", COPY),
    TemplateEntry("_tsconfig.json", "tsconfig.json", RENDER),
    TemplateEntry("_tslint.json", "tslint.json", RENDER),
)

FRAMEWORK_FILES: dict[UnitTestFramework, tuple[TemplateEntry, ...]] = {
    UnitTestFramework.KARMA: (
        TemplateEntry("_package.json", "package.json", RENDER),
    ),
    UnitTestFramework.JEST: (
        TemplateEntry("_package_jest.json", "package.json", RENDER),
        TemplateEntry("_jest.ts", "src/jest.ts", RENDER),
        TemplateEntry("_jest-global-mocks.ts", "src/jest-global-mocks.ts", RENDER),
    ),
}

BUILD_FILES: tuple[TemplateEntry, ...] = (
    TemplateEntry("README.MD", "README.MD", RENDER),
    TemplateEntry("tools/**/*", "tools", RENDER),
    TemplateEntry("gulpfile.js", "gulpfile.js", RENDER),
)

SOURCE_FILES: tuple[TemplateEntry, ...] = (
    TemplateEntry("src/**/*.ts", "src", COPY),
    TemplateEntry("src/_package.json", "src/package.json", RENDER),
    TemplateEntry("src/_tsconfig.es5.json", "src/tsconfig.es5.json", RENDER),
    TemplateEntry("src/_tsconfig.spec.json", "src/tsconfig.spec.json", RENDER),
)

PLAYGROUND_FILES: tuple[TemplateEntry, ...] = (
    TemplateEntry("playground/**/*", "playground", RENDER),
    TemplateEntry("_bs-config.json", "bs-config.json", RENDER),
)


def catalog_for(test_framework: UnitTestFramework) -> tuple[TemplateEntry, ...]:
    """Return the ordered core entries for a library using ``test_framework``."""

    return PROJECT_FILES + FRAMEWORK_FILES[test_framework] + BUILD_FILES + SOURCE_FILES
