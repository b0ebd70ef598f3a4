from __future__ import annotations

from pathlib import Path

from asset_build.discovery import glob_files


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")


def test_glob_files_recurses_from_root(tmp_path: Path) -> None:
    _touch(tmp_path, "main.js", "admin/settings.js", "admin/deep/nested.js", "style.css")

    assert glob_files("**/*.js", base_dir=str(tmp_path)) == [
        "admin/deep/nested.js",
        "admin/settings.js",
        "main.js",
    ]


def test_glob_files_applies_ignore_patterns(tmp_path: Path) -> None:
    _touch(
        tmp_path,
        "main.js",
        "main.min.js",
        "node_modules/lib/index.js",
        "js/build/out.js",
    )

    matches = glob_files(
        "**/*.js",
        base_dir=str(tmp_path),
        ignore=["node_modules/**", "**/*.min.js", "**/build/**"],
    )

    assert matches == ["main.js"]


def test_glob_files_skips_directories_and_dotfiles(tmp_path: Path) -> None:
    (tmp_path / "vendor.js").mkdir()
    _touch(tmp_path, ".hidden/secret.js", "app.js")

    assert glob_files("**/*.js", base_dir=str(tmp_path)) == ["app.js"]


def test_glob_files_missing_base_dir(tmp_path: Path) -> None:
    assert glob_files("**/*.css", base_dir=str(tmp_path / "missing")) == []


def test_glob_files_ignore_star_stays_within_one_segment(tmp_path: Path) -> None:
    _touch(tmp_path, "a.min.js", "admin/b.min.js", "vendor/x.js", "vendor/deep/y.js")

    matches = glob_files("**/*.js", base_dir=str(tmp_path), ignore=["*.min.js", "vendor/*"])

    assert matches == ["admin/b.min.js", "vendor/deep/y.js"]


def test_glob_files_ignore_double_star_and_character_classes(tmp_path: Path) -> None:
    _touch(tmp_path, "a.min.js", "admin/b.min.js", "vendor/deep/y.js", "lib/v1.js", "lib/v2.js", "lib/vx.js")

    matches = glob_files(
        "**/*.js",
        base_dir=str(tmp_path),
        ignore=["**/*.min.js", "vendor/**", "lib/v[0-9].js", "lib/v?x.js"],
    )

    assert matches == ["lib/vx.js"]
