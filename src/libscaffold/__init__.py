"""Generator for Angular library projects.

The package asks a handful of questions about the library, validates them into
a :class:`LibraryConfig` and writes a ready-to-build project from a fixed set of
templates. It can be driven programmatically or via the command line
interface.
"""

from __future__ import annotations

from .catalog import EntryMode, TemplateEntry, catalog_for
from .config import LibraryConfig, UnitTestFramework
from .errors import AnswerStoreError, InputSourceUnavailable, PromptValidationError, ScaffoldError
from .hooks import InstallDependencies, setup_playground
from .naming import camel_case, normalize_scope, pascal_case, slugify
from .prompts import Prompt, PromptKind, collect, default_prompts
from .scaffold import GenerationContext, LibraryScaffolder
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "AnswerStoreError",
    "EntryMode",
    "GenerationContext",
    "InputSourceUnavailable",
    "InstallDependencies",
    "LibraryConfig",
    "LibraryScaffolder",
    "Prompt",
    "PromptKind",
    "PromptValidationError",
    "ScaffoldError",
    "TemplateEntry",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UnitTestFramework",
    "camel_case",
    "catalog_for",
    "collect",
    "default_prompts",
    "normalize_scope",
    "pascal_case",
    "setup_playground",
    "slugify",
]

__version__ = "0.1.0"
