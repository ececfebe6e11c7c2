"""Recognise development artefacts that do not belong in the static tree."""

from __future__ import annotations

from pathlib import PurePath
from typing import Final

DEV_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {
        "ts", "tsx", "mts", "cts",
        "less", "scss", "sass",
        "md", "markdown",
        "yml", "yaml",
        "lock",
        "npmignore", "gitignore",
        "eslintrc", "prettierrc", "editorconfig", "jshintrc", "nycrc", "babelrc",
        "flowconfig",
    }
)

DEV_FILES: Final[frozenset[str]] = frozenset(
    {
        # Package manifests and lock files
        "package.json", "package-lock.json", "yarn.lock", "pnpm-lock.yaml",
        "composer.json", "composer.lock",
        "tsconfig.json", "tsconfig.base.json", "tsconfig.build.json",
        # Documentation
        "LICENSE", "LICENSE.md", "LICENSE.txt", "MIT-LICENSE",
        "README", "README.md", "README.txt",
        "CHANGELOG", "CHANGELOG.md", "HISTORY.md", "CONTRIBUTING.md",
        # Tool configuration
        ".gitignore", ".npmignore", ".npmrc", ".yarnrc",
        ".eslintrc", ".eslintrc.js", ".eslintrc.json", ".eslintrc.cjs",
        ".prettierrc", ".prettierrc.js", ".prettierrc.json",
        ".editorconfig", ".jshintrc",
        ".babelrc", ".babelrc.js", ".babelrc.json", "babel.config.js", "babel.config.json",
        ".nycrc", ".nycrc.json",
        "jest.config.js", "jest.config.json", "karma.conf.js",
        "webpack.config.js", "rollup.config.js", "vite.config.js", "vite.config.ts",
        ".browserslistrc", ".stylelintrc", ".stylelintrc.json",
        "Makefile", "Gruntfile.js", "Gulpfile.js",
    }
)

DEV_DIRECTORIES: Final[frozenset[str]] = frozenset({"node_modules", ".git", ".svn", ".hg"})


def is_dev_directory(name: str) -> bool:
    return name in DEV_DIRECTORIES


def is_dev_file(name: str) -> bool:
    """Return True for a development file name; extensions match case-insensitively."""

    if name in DEV_FILES:
        return True
    suffix = PurePath(name).suffix
    return bool(suffix) and suffix[1:].lower() in DEV_EXTENSIONS


__all__ = [
    "DEV_DIRECTORIES",
    "DEV_EXTENSIONS",
    "DEV_FILES",
    "is_dev_directory",
    "is_dev_file",
]
