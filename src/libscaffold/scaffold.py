"""Materialise a library project from the template catalog."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

from .catalog import TEMPLATE_ROOT, EntryMode, TemplateEntry, catalog_for
from .config import LibraryConfig
from .hooks import setup_playground
from .template import TemplateRenderer

__all__ = ["GenerationContext", "Hook", "LibraryScaffolder"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationContext:
    """Everything a post-processing hook may need about the current run."""

    config: LibraryConfig
    destination: Path
    renderer: TemplateRenderer
    template_root: Path
    force: bool = False

    @property
    def placeholders(self) -> Mapping[str, Any]:
        return self.config.context()

    def write_entries(self, entries: Iterable[TemplateEntry]) -> list[Path]:
        """Copy or render ``entries`` below :attr:`destination`."""

        written: list[Path] = []
        for entry in entries:
            for source, relative in entry.expand(self.template_root):
                target = self.destination / relative
                if target.exists() and not self.force:
                    raise FileExistsError(f"{target} already exists")
                target.parent.mkdir(parents=True, exist_ok=True)
                if entry.mode is EntryMode.COPY:
                    shutil.copyfile(source, target)
                else:
                    self.renderer.render_file(source, self.placeholders, target=target)
                LOGGER.debug("%s %s -> %s", entry.mode.value, source.name, target)
                written.append(target)
        return written


Hook = Callable[[GenerationContext], None]


class LibraryScaffolder:
    """Write a new library described by a :class:`LibraryConfig`."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        template_root: str | Path = TEMPLATE_ROOT,
        hooks: Iterable[Hook] | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.template_root = Path(template_root)
        if hooks is None:
            hooks = [setup_playground]
        self.hooks: list[Hook] = list(hooks)

    def materialize(
        self,
        config: LibraryConfig,
        destination: str | Path,
        *,
        force: bool = False,
    ) -> Path:
        """Populate ``destination`` and run the post-processing hooks in order."""

        target_path = Path(destination).expanduser().resolve()
        target_path.mkdir(parents=True, exist_ok=True)

        context = GenerationContext(
            config=config,
            destination=target_path,
            renderer=self.renderer,
            template_root=self.template_root,
            force=force,
        )

        written = context.write_entries(catalog_for(config.test_framework))
        LOGGER.info(
            "Wrote %d files for %s (%s) to %s",
            len(written),
            config.package_name,
            config.test_framework.value,
            target_path,
        )

        for hook in self.hooks:
            LOGGER.info("Running hook %s", getattr(hook, "__name__", type(hook).__name__))
            hook(context)

        return target_path
