from __future__ import annotations

import os
from pathlib import Path

import pytest

import scan.files as scan_files
from scan.files import _build_gitignore_matcher, find_source_files


def _write(root: Path, relative_path: str, content: str = "export {};\n") -> None:
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _relative(root: Path, **kwargs: object) -> list[str]:
    return [
        path.relative_to(root).as_posix()
        for path in find_source_files(root, **kwargs)  # type: ignore[arg-type]
    ]


@pytest.mark.skipif(
    os.name == "nt",
    reason="Symlink semantics vary on Windows test runners.",
)
def test_find_source_files_skips_symlinked_dirs(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _write(repo_root, "pkg/module.js")

    external_root = tmp_path / "external"
    external_root.mkdir()
    _write(external_root, "leak.js")

    symlink_dir = repo_root / "linked"
    symlink_dir.symlink_to(external_root, target_is_directory=True)

    results = _relative(repo_root)

    assert "pkg/module.js" in results
    assert "linked/leak.js" not in results


@pytest.mark.skipif(
    os.name == "nt",
    reason="Symlink semantics vary on Windows test runners.",
)
def test_nested_gitignore_skips_symlinked_gitignore(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _write(repo_root, "pkg/module.js")
    (repo_root / ".gitignore").write_text("*.bin\n", encoding="utf-8")

    external_root = tmp_path / "external"
    external_root.mkdir()
    (external_root / ".gitignore").write_text("module.js\n", encoding="utf-8")

    (repo_root / "pkg" / ".gitignore").symlink_to(external_root / ".gitignore")

    matcher = _build_gitignore_matcher(repo_root, nested_gitignore=True)
    assert matcher is not None
    assert matcher(str(repo_root / "pkg" / "module.js")) is False


def test_find_source_files_filters_extensions_and_sorts(tmp_path: Path) -> None:
    _write(tmp_path, "b.ts")
    _write(tmp_path, "a/z.jsx")
    _write(tmp_path, "a/y.py", "print('no')\n")
    _write(tmp_path, "README.md", "# hi\n")

    assert _relative(tmp_path) == ["a/z.jsx", "b.ts"]
    assert _relative(tmp_path, extensions=[".ts"]) == ["b.ts"]


def test_find_source_files_skips_node_modules(tmp_path: Path) -> None:
    _write(tmp_path, "src/index.js")
    _write(tmp_path, "node_modules/dep/index.js")
    _write(tmp_path, "packages/a/node_modules/dep/index.js")

    assert _relative(tmp_path) == ["src/index.js"]


def test_find_source_files_respects_root_gitignore(tmp_path: Path) -> None:
    _write(tmp_path, "src/index.js")
    _write(tmp_path, "dist/bundle.js")
    (tmp_path / ".gitignore").write_text("dist\n", encoding="utf-8")

    assert _relative(tmp_path) == ["src/index.js"]


def test_find_source_files_include_and_exclude_patterns(tmp_path: Path) -> None:
    _write(tmp_path, "src/app.ts")
    _write(tmp_path, "src/generated/api.ts")
    _write(tmp_path, "scripts/build.js")

    assert _relative(
        tmp_path,
        include_patterns=["src/*"],
        exclude_patterns=["src/generated/*"],
    ) == ["src/app.ts"]


@pytest.mark.parametrize("pattern", ["dist", "coverage", "build/*"])
def test_find_source_files_skips_files_below_ignored_directories(
    tmp_path: Path, pattern: str
) -> None:
    top = pattern.split("/")[0]
    _write(tmp_path, "src/index.js")
    _write(tmp_path, f"{top}/bundle.js")
    _write(tmp_path, f"{top}/nested/chunk.js")
    (tmp_path / ".gitignore").write_text(f"{pattern}\n", encoding="utf-8")

    assert _relative(tmp_path) == ["src/index.js"]


def test_nested_gitignore_skips_ignored_subpackage_directories(
    tmp_path: Path,
) -> None:
    _write(tmp_path, "packages/a/src/index.ts")
    _write(tmp_path, "packages/a/generated/api.ts")
    (tmp_path / "packages" / "a" / ".gitignore").write_text(
        "generated\n", encoding="utf-8"
    )

    assert _relative(tmp_path, nested_gitignore=True) == ["packages/a/src/index.ts"]
    assert _relative(tmp_path) == [
        "packages/a/generated/api.ts",
        "packages/a/src/index.ts",
    ]


def test_walk_does_not_descend_into_node_modules(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write(tmp_path, "src/index.js")
    _write(tmp_path, "node_modules/dep/index.js")
    visited: list[str] = []
    real_walk = scan_files.os.walk

    def recording_walk(top, *args, **kwargs):  # type: ignore[no-untyped-def]
        for dirpath, dirnames, filenames in real_walk(top, *args, **kwargs):
            visited.append(Path(dirpath).relative_to(tmp_path).as_posix())
            yield dirpath, dirnames, filenames

    monkeypatch.setattr(scan_files.os, "walk", recording_walk)

    assert _relative(tmp_path) == ["src/index.js"]
    assert not any(entry.startswith("node_modules") for entry in visited)
