from __future__ import annotations

import json
from pathlib import Path

import pytest

from libscaffold.config import LibraryConfig
from libscaffold.scaffold import GenerationContext, LibraryScaffolder


@pytest.fixture()
def scaffolder() -> LibraryScaffolder:
    return LibraryScaffolder()


def _tree(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_jest_library_structure(tmp_path: Path, scaffolder: LibraryScaffolder, jest_config: LibraryConfig):
    project_dir = scaffolder.materialize(jest_config, tmp_path / "project")

    expected_files = [
        ".gitignore",
        ".npmignore",
        ".travis.yml",
        "tsconfig.json",
        "tslint.json",
        "package.json",
        "README.MD",
        "gulpfile.js",
        "tools/gulp/inline-resources.js",
        "src/index.ts",
        "src/sample.component.ts",
        "src/jest.ts",
        "src/jest-global-mocks.ts",
        "src/package.json",
        "src/tsconfig.es5.json",
        "src/tsconfig.spec.json",
        "playground/index.ts",
        "playground/index.html",
        "bs-config.json",
    ]
    for relative in expected_files:
        assert (project_dir / relative).is_file(), f"expected {relative} to exist"

    manifest = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "@acme/my-cool-lib"
    assert manifest["author"] == {"name": "Jane Doe", "email": "jane@example.com"}
    assert "jest" in manifest["devDependencies"]
    assert manifest["repository"]["url"] == "git+https://github.com/acme/lib"


def test_karma_library_has_no_jest_files(tmp_path: Path, scaffolder: LibraryScaffolder, karma_config: LibraryConfig):
    project_dir = scaffolder.materialize(karma_config, tmp_path / "project")

    assert not (project_dir / "src" / "jest.ts").exists()
    assert not (project_dir / "src" / "jest-global-mocks.ts").exists()
    manifest = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))
    assert "jest" not in manifest["devDependencies"]
    assert "karma" in manifest["devDependencies"]


def test_rendered_manifests_are_valid_json(tmp_path: Path, scaffolder: LibraryScaffolder, answers: dict[str, str]):
    config = LibraryConfig.from_answers({**answers, "author_name": 'Jane "JD" Doe', "scope": ""})
    project_dir = scaffolder.materialize(config, tmp_path / "project")

    for relative in ["package.json", "tsconfig.json", "tslint.json", "src/package.json", "src/tsconfig.es5.json"]:
        json.loads((project_dir / relative).read_text(encoding="utf-8"))

    src_manifest = json.loads((project_dir / "src" / "package.json").read_text(encoding="utf-8"))
    assert src_manifest["name"] == "my-cool-lib"
    assert src_manifest["main"] == "my-cool-lib.umd.js"
    assert src_manifest["author"]["name"] == 'Jane "JD" Doe'


def test_source_files_are_copied_verbatim(tmp_path: Path, scaffolder: LibraryScaffolder, jest_config: LibraryConfig):
    project_dir = scaffolder.materialize(jest_config, tmp_path / "project")
    template_src = scaffolder.template_root / "src"
    for source in template_src.glob("*.ts"):
        assert (project_dir / "src" / source.name).read_bytes() == source.read_bytes()


def test_angular_interpolation_survives_rendering(tmp_path: Path, scaffolder: LibraryScaffolder, jest_config: LibraryConfig):
    project_dir = scaffolder.materialize(jest_config, tmp_path / "project")
    readme = (project_dir / "README.MD").read_text(encoding="utf-8")
    assert "{{ title }}" in readme
    assert "npm install @acme/my-cool-lib --save" in readme
    assert "name: 'myCoolLib'" in (project_dir / "gulpfile.js").read_text(encoding="utf-8")


def test_materialize_is_deterministic(tmp_path: Path, scaffolder: LibraryScaffolder, jest_config: LibraryConfig):
    first = scaffolder.materialize(jest_config, tmp_path / "first")
    second = scaffolder.materialize(jest_config, tmp_path / "second")
    assert _tree(first) == _tree(second)

    scaffolder.materialize(jest_config, first, force=True)
    assert _tree(first) == _tree(second)


def test_existing_files_require_force(tmp_path: Path, scaffolder: LibraryScaffolder, jest_config: LibraryConfig):
    project_dir = tmp_path / "project"
    scaffolder.materialize(jest_config, project_dir)
    (project_dir / "README.MD").write_text("custom", encoding="utf-8")

    with pytest.raises(FileExistsError):
        scaffolder.materialize(jest_config, project_dir)

    scaffolder.materialize(jest_config, project_dir, force=True)
    assert (project_dir / "README.MD").read_text(encoding="utf-8").startswith("# my-cool-lib")


def test_hooks_run_in_order_after_templates(tmp_path: Path, jest_config: LibraryConfig):
    calls: list[tuple[str, bool]] = []

    def first(context: GenerationContext) -> None:
        calls.append(("first", (context.destination / "src" / "package.json").exists()))

    def second(context: GenerationContext) -> None:
        calls.append(("second", context.config is jest_config))

    scaffolder = LibraryScaffolder(hooks=[first, second])
    project_dir = scaffolder.materialize(jest_config, tmp_path / "project")

    assert calls == [("first", True), ("second", True)]
    assert not (project_dir / "playground").exists()


def test_unwritable_destination_propagates(tmp_path: Path, scaffolder: LibraryScaffolder, jest_config: LibraryConfig):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(OSError):
        scaffolder.materialize(jest_config, blocker)


def test_repository_url_is_escaped_in_manifests(tmp_path: Path, scaffolder: LibraryScaffolder, answers: dict[str, str]):
    url = 'https://example.com/"quoted"\\path'
    config = LibraryConfig.from_answers({**answers, "git_repository_url": url})
    project_dir = scaffolder.materialize(config, tmp_path / "project")

    for relative in ["package.json", "src/package.json"]:
        manifest = json.loads((project_dir / relative).read_text(encoding="utf-8"))
        assert manifest["repository"]["url"] == f"git+{url}"
        assert manifest["bugs"]["url"] == f"{url}/issues"


def test_unusual_scope_keeps_json_valid(tmp_path: Path, scaffolder: LibraryScaffolder, answers: dict[str, str]):
    config = LibraryConfig.from_answers({**answers, "scope": '@a"b/'})
    project_dir = scaffolder.materialize(config, tmp_path / "project")

    manifest = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == '@a"b/my-cool-lib'
    tsconfig = json.loads((project_dir / "tsconfig.json").read_text(encoding="utf-8"))
    assert '@a"b/my-cool-lib' in tsconfig["compilerOptions"]["paths"]
