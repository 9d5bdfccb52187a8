"""Paths and package names shared by the nox sessions."""

from __future__ import annotations

import pathlib

# Packaging
MAIN_PACKAGE = "imview"
TEST_PACKAGE = "tests"

# Directories
ARTIFACT_DIRECTORY = "public"

# Linting and test configs
PYPROJECT_TOML = "pyproject.toml"
COVERAGE_HTML_PATH = pathlib.Path(ARTIFACT_DIRECTORY, "coverage", "html")

# Spell-checked and linted paths
PYTHON_REFORMATTING_PATHS = (MAIN_PACKAGE, TEST_PACKAGE, "pipelines", "noxfile.py")
TEXT_PATHS = ("README.md", "DESIGN.md", PYPROJECT_TOML)
FULL_REFORMATTING_PATHS = (*PYTHON_REFORMATTING_PATHS, *TEXT_PATHS)
