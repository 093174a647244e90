from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from libscaffold.config import LibraryConfig  # noqa: E402


@pytest.fixture()
def answers() -> dict[str, str]:
    return {
        "author_name": "Jane Doe",
        "author_email": "jane@example.com",
        "library_name": "my-cool-lib",
        "scope": "@acme/",
        "git_repository_url": "https://github.com/acme/lib",
        "test_framework": "jest",
    }


@pytest.fixture()
def jest_config(answers: dict[str, str]) -> LibraryConfig:
    return LibraryConfig.from_answers(answers)


@pytest.fixture()
def karma_config(answers: dict[str, str]) -> LibraryConfig:
    return LibraryConfig.from_answers({**answers, "test_framework": "karma + jasmine"})
