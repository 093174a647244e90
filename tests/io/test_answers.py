from __future__ import annotations

import json
from pathlib import Path

import pytest

from libscaffold.errors import PromptValidationError
from libscaffold.io.adapters import MappingInputSource
from libscaffold.prompts import default_prompts


def test_from_file_loads_answers(tmp_path: Path):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps({"scope": "@acme"}), encoding="utf-8")
    source = MappingInputSource.from_file(path)
    prompts = [prompt for prompt in default_prompts("demo") if prompt.name == "scope"]
    assert source.ask(prompts) == {"scope": "@acme/"}


def test_from_file_requires_object(tmp_path: Path):
    path = tmp_path / "answers.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        MappingInputSource.from_file(path)


def test_invalid_answer_propagates():
    source = MappingInputSource({"author_email": "nope"})
    prompts = [prompt for prompt in default_prompts("demo") if prompt.name == "author_email"]
    with pytest.raises(PromptValidationError):
        source.ask(prompts)
