from __future__ import annotations

import json
from pathlib import Path

import pytest

from asset_build.exceptions import OptionsError
from asset_build.options import (
    ReactifiedOptions,
    VanillaOptions,
    is_production_env,
    load_reactified_options,
    load_vanilla_options,
)


def test_vanilla_defaults() -> None:
    options = VanillaOptions(
        working_directory=Path("/project"),
        js_build_directory="/project/js/build",
        css_build_directory="/project/css/build",
        is_production=False,
    )

    assert options.working_directory == "/project"
    assert options.js_patterns == ["**/*.js"]
    assert options.css_patterns == ["**/*.css"]
    assert options.js_ignore_patterns == []
    assert options.css_ignore_patterns == []


def test_vanilla_options_reject_unknown_keys() -> None:
    with pytest.raises(ValueError):
        VanillaOptions(
            working_directory="/project",
            js_build_directory="/project/js/build",
            css_build_directory="/project/css/build",
            is_production=False,
            minify=True,
        )


def test_is_production_env() -> None:
    assert is_production_env({"NODE_ENV": "production"}) is True
    assert is_production_env({"NODE_ENV": "development"}) is False
    assert is_production_env({}) is False


def test_load_vanilla_options_from_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_ENV", "production")
    path = tmp_path / "assets.yaml"
    path.write_text(
        "jsPatterns:\n"
        "  - admin/**/*.js\n"
        "jsIgnorePatterns: ['**/*.min.js']\n"
        "js_build_directory: js/build\n"
        "cssBuildDirectory: css/build\n",
        encoding="utf-8",
    )

    options = load_vanilla_options(path)

    assert options.working_directory == str(tmp_path)
    assert options.js_patterns == ["admin/**/*.js"]
    assert options.js_ignore_patterns == ["**/*.min.js"]
    assert options.js_build_directory == "js/build"
    assert options.css_build_directory == "css/build"
    assert options.is_production is True


def test_load_vanilla_options_overrides_win(tmp_path: Path) -> None:
    path = tmp_path / "assets.yml"
    path.write_text(
        "isProduction: true\njsBuildDirectory: js/build\ncssBuildDirectory: css/build\n",
        encoding="utf-8",
    )

    options = load_vanilla_options(path, is_production=False, working_directory="/elsewhere")

    assert options.is_production is False
    assert options.working_directory == "/elsewhere"


def test_load_vanilla_options_camel_case_overrides_win(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_ENV", "development")
    path = tmp_path / "assets.yml"
    path.write_text("js_build_directory: js/build\ncss_build_directory: css/build\n", encoding="utf-8")

    options = load_vanilla_options(path, isProduction=True, jsBuildDirectory="dist/js")

    assert options.is_production is True
    assert options.js_build_directory == "dist/js"


def test_load_reactified_options_from_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NODE_ENV", raising=False)
    path = tmp_path / "blocks.json"
    path.write_text(
        json.dumps(
            {
                "entryPoints": {"blocks": "./js/src/blocks/index.js"},
                "outputPath": "/project",
                "libraryName": "polylang",
                "wpDependencies": ["blocks", "edit-post"],
                "additionalExternals": {"lodash": "lodash", "jquery": {"this": ["jQuery"]}},
                "sassLoadPaths": ["./css/src"],
            }
        ),
        encoding="utf-8",
    )

    options = load_reactified_options(path)

    assert isinstance(options, ReactifiedOptions)
    assert options.is_production is False
    assert options.additional_externals["jquery"] == {"this": ["jQuery"]}
    assert options.sass_load_paths == ["./css/src"]


def test_load_options_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("jsPatterns: [unclosed\n", encoding="utf-8")

    with pytest.raises(OptionsError) as excinfo:
        load_vanilla_options(path)
    assert str(path) in str(excinfo.value)


def test_load_options_requires_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(OptionsError):
        load_vanilla_options(path)


def test_load_options_missing_required_field(tmp_path: Path) -> None:
    path = tmp_path / "blocks.yaml"
    path.write_text("libraryName: polylang\n", encoding="utf-8")

    with pytest.raises(OptionsError):
        load_reactified_options(path, is_production=True)


def test_load_options_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OptionsError):
        load_vanilla_options(tmp_path / "absent.yaml")
