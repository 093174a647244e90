"""Post-processing steps executed after the core templates are written."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from .catalog import PLAYGROUND_FILES

if TYPE_CHECKING:
    from .scaffold import GenerationContext

__all__ = ["InstallDependencies", "setup_playground"]


LOGGER = logging.getLogger(__name__)

_INSTALL_COMMANDS: dict[str, tuple[str, ...]] = {
    "npm": ("npm", "install"),
    "bower": ("bower", "install"),
}


def setup_playground(context: "GenerationContext") -> None:
    """Add the demo application served by ``npm run playground``."""

    written = context.write_entries(PLAYGROUND_FILES)
    LOGGER.info("Playground ready with %d files", len(written))


@dataclass(slots=True)
class InstallDependencies:
    """Install the generated library's dependencies.

    Each enabled package manager runs its install command inside the
    destination directory. Bower is off unless explicitly requested.
    """

    npm: bool = True
    bower: bool = False
    runner: Callable[..., Any] = field(default=subprocess.run)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        enabled = {"npm": self.npm, "bower": self.bower}
        return [command for name, command in _INSTALL_COMMANDS.items() if enabled[name]]

    def __call__(self, context: "GenerationContext") -> None:
        for command in self.commands:
            LOGGER.info("Running %s in %s", " ".join(command), context.destination)
            self.runner(list(command), cwd=context.destination, check=True)
