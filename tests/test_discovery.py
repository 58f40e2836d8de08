"""Tests for source file discovery."""

import os

import pytest

from ai_comments.discovery import collect_source_files


@pytest.fixture
def source_tree(tmp_path):
    """Small project tree with files that should and should not be found."""
    files = [
        "src/app.js",
        "src/components/Button.jsx",
        "src/components/Button.test.tsx",
        "src/types.ts",
        "src/styles.css",
        "src/README.md",
        "src/.eslintrc.js",
        "src/node_modules/lib/index.js",
        "src/.cache/bundle.js",
        "src/nested/node_modules/pkg/main.ts",
        "src/nested/deep/util.ts",
    ]
    for rel in files:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("// x\n", encoding="utf-8")
    return tmp_path / "src"


def test_collects_allowed_extensions(source_tree):
    found = collect_source_files(source_tree)
    relative = [path.relative_to(source_tree).as_posix() for path in found]

    assert relative == [
        ".eslintrc.js",
        "app.js",
        "components/Button.jsx",
        "components/Button.test.tsx",
        "nested/deep/util.ts",
        "types.ts",
    ]


def test_skips_dependency_and_hidden_directories(source_tree):
    found = {path.as_posix() for path in collect_source_files(source_tree)}

    assert not any("node_modules" in path for path in found)
    assert not any("/.cache/" in path for path in found)


def test_custom_extensions_and_skip_dirs(source_tree):
    found = collect_source_files(source_tree, extensions=[".css", ".md"], skip_dirs=[])
    names = sorted(path.name for path in found)

    assert names == ["README.md", "styles.css"]


def test_order_is_stable(source_tree):
    assert collect_source_files(source_tree) == collect_source_files(source_tree)


def test_empty_directory(tmp_path):
    assert collect_source_files(tmp_path) == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlinks_are_not_followed(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "secret.js").write_text("function a() {}\n", encoding="utf-8")
    root = tmp_path / "root"
    root.mkdir()
    (root / "real.js").write_text("function b() {}\n", encoding="utf-8")
    try:
        os.symlink(outside, root / "linked", target_is_directory=True)
        os.symlink(root / "real.js", root / "alias.js")
    except OSError:
        pytest.skip("cannot create symlinks here")

    found = collect_source_files(root)

    assert [path.name for path in found] == ["real.js"]
